from django.contrib import admin
from .models import Tag, BlogPost, Image
import logging

logger = logging.getLogger(__name__)

@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}
    search_fields = ('name',)

class ImageInline(admin.TabularInline):
    # Las imágenes se editan (y se asignan en bloque) dentro del artículo
    model = Image
    fields = ('url', 'alt', 'position')
    extra = 1

@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'language', 'published_at', 'is_published', 'created_at')
    list_filter = ('language', 'published_at', 'tags')
    search_fields = ('title', 'description', 'body')
    readonly_fields = ('slug', 'created_at', 'updated_at')
    filter_horizontal = ('tags',)
    date_hierarchy = 'published_at'
    inlines = [ImageInline]

    def get_queryset(self, request):
        # El admin ve todos los artículos, publicados o no y de cualquier idioma
        return BlogPost.objects.unscoped_desc()

    @admin.display(boolean=True, description="¿Está Publicado?")
    def is_published(self, obj):
        return obj.is_published

    def save_model(self, request, obj, form, change):
        logger.debug(f"Attempting to save BlogPost: {obj.title}, User: {request.user.username}")
        super().save_model(request, obj, form, change)
        logger.info(f"BlogPost saved: {obj.title}")

    fieldsets = (
        (None, {
            'fields': ('title', 'slug', 'language')
        }),
        ('Publicación', {
            'fields': ('published_at', 'tags'),
            'description': "<p>Un artículo con fecha de publicación necesita una <strong>descripción</strong>.</p>"
        }),
        ('Contenido Principal', {
            'fields': ('description', 'body')
        }),
        ('Fechas', {
            'fields': ('created_at', 'updated_at'),
        }),
    )
