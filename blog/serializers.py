# blog/serializers.py
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework import serializers
from .models import Tag, BlogPost, Image

class TagSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ['name', 'slug']

class ImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Image
        fields = ['id', 'url', 'alt', 'position']

class ImageAttributesSerializer(serializers.Serializer):
    """
    Una entrada de "images_attributes":
    sin id crea, con id actualiza, con id y _destroy elimina la imagen.
    """
    id = serializers.IntegerField(required=False)
    url = serializers.URLField(max_length=500, required=False)
    alt = serializers.CharField(max_length=255, required=False, allow_blank=True)
    position = serializers.IntegerField(min_value=0, required=False)
    _destroy = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        if 'id' not in attrs and not attrs.get('_destroy') and not attrs.get('url'):
            raise serializers.ValidationError({'url': "La URL es obligatoria para una imagen nueva."})
        return attrs

class BlogPostListSerializer(serializers.ModelSerializer):
    # Tags como lista de strings (nombres)
    tags = serializers.StringRelatedField(many=True)
    published_at = serializers.DateTimeField(format="%Y-%m-%dT%H:%M:%SZ", read_only=True) # Formato con hora UTC

    class Meta:
        model = BlogPost
        fields = [
            'id', 'slug', 'title', 'pretty_title', 'description',
            'published_at', 'language', 'tags'
        ]

class BlogPostDetailSerializer(serializers.ModelSerializer):
    tags = serializers.StringRelatedField(many=True)
    images = ImageSerializer(many=True, read_only=True)
    published_at = serializers.DateTimeField(format="%Y-%m-%dT%H:%M:%SZ", read_only=True)

    class Meta:
        model = BlogPost
        fields = [
            'id', 'slug', 'title', 'pretty_title', 'description', 'body',
            'published_at', 'language', 'tags', 'images',
            'created_at', 'updated_at' # Campos adicionales para el detalle
        ]

class BlogPostManageSerializer(serializers.ModelSerializer):
    """
    Serializer de escritura para el staff. Acepta imágenes anidadas en
    "images_attributes" y los tags por nombre en "tag_list".
    """
    tags = serializers.StringRelatedField(many=True, read_only=True)
    tag_list = serializers.ListField(
        child=serializers.CharField(max_length=100), write_only=True, required=False
    )
    images = ImageSerializer(many=True, read_only=True)
    images_attributes = ImageAttributesSerializer(many=True, write_only=True, required=False)
    is_published = serializers.BooleanField(read_only=True)

    class Meta:
        model = BlogPost
        fields = [
            'id', 'slug', 'title', 'body', 'description', 'published_at', 'language',
            'is_published', 'tags', 'tag_list', 'images', 'images_attributes',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['slug', 'created_at', 'updated_at']

    def create(self, validated_data):
        return self._save_post(BlogPost(), validated_data)

    def update(self, instance, validated_data):
        return self._save_post(instance, validated_data)

    def _save_post(self, post, validated_data):
        images_attributes = validated_data.pop('images_attributes', None)
        tag_list = validated_data.pop('tag_list', None)
        for field, value in validated_data.items():
            setattr(post, field, value)

        # Artículo, tags e imágenes se guardan juntos o no se guarda nada
        with transaction.atomic():
            try:
                post.save()
            except DjangoValidationError as exc:
                raise serializers.ValidationError(exc.message_dict)
            if tag_list is not None:
                post.set_tag_list(tag_list)
            if images_attributes:
                try:
                    post.assign_images(images_attributes)
                except DjangoValidationError as exc:
                    raise serializers.ValidationError({'images_attributes': exc.messages})
                except Image.DoesNotExist as exc:
                    raise serializers.ValidationError({'images_attributes': [str(exc)]})
        return post
