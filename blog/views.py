import logging
from django.http import Http404, HttpResponse
from rest_framework import generics, permissions
from rest_framework.response import Response
from rest_framework.views import APIView
from .models import BlogPost, current_language
from .serializers import (
    BlogPostListSerializer,
    BlogPostDetailSerializer,
    BlogPostManageSerializer,
    TagSerializer,
)

logger = logging.getLogger(__name__)


def health_check_view(request):
    return HttpResponse("OK", status=200)


class BlogPostListView(generics.ListAPIView):
    """
    Devuelve los artículos publicados en el idioma activo del request,
    del más reciente al más antiguo.
    """
    serializer_class = BlogPostListSerializer

    def get_queryset(self):
        return BlogPost.objects.list_published_for_locale(current_language()).prefetch_related('tags')

class BlogPostDetailView(generics.RetrieveAPIView):
    """
    Devuelve los detalles de un artículo específico por su slug.
    Solo artículos publicados en el idioma activo.
    """
    serializer_class = BlogPostDetailSerializer
    lookup_field = 'slug' # Para buscar por slug en la URL

    def get_queryset(self):
        return BlogPost.objects.list_published_for_locale(current_language()).prefetch_related('tags', 'images')

class TagSearchView(APIView):
    """
    Busca tags entre todos los artículos (publicados o no, de cualquier idioma).
    ?term= vacío devuelve todos los tags.
    """

    def get(self, request):
        term = request.query_params.get('term', '')
        tags = BlogPost.objects.find_tags(term)
        return Response(TagSerializer(tags, many=True).data)


# --- Vistas de gestión (solo staff) ---

class BlogPostManageListCreateView(generics.ListCreateAPIView):
    """Lista todos los artículos, del más nuevo al más antiguo, y permite crearlos."""
    permission_classes = [permissions.IsAdminUser]
    serializer_class = BlogPostManageSerializer

    def get_queryset(self):
        return BlogPost.objects.unscoped_desc().prefetch_related('tags', 'images')

    def perform_create(self, serializer):
        post = serializer.save()
        logger.info(f"BlogPost creado vía API: {post.title}, Usuario: {self.request.user.username}")

class BlogPostManageDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Lee, actualiza o elimina cualquier artículo por su slug, sin filtrar por publicación ni idioma."""
    permission_classes = [permissions.IsAdminUser]
    serializer_class = BlogPostManageSerializer
    lookup_field = 'slug'

    def get_object(self):
        try:
            post = BlogPost.objects.unscoped_find_by(slug=self.kwargs['slug'])
        except BlogPost.DoesNotExist:
            raise Http404("Artículo no encontrado.")
        self.check_object_permissions(self.request, post)
        return post

    def perform_destroy(self, instance):
        logger.info(f"Eliminando BlogPost vía API: {instance.title}, Usuario: {self.request.user.username}")
        instance.delete()
