import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models.functions import Left
from django.urls import reverse
from django.utils import translation
from django.utils.text import slugify

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 72
# slugify() puede alargar el texto (NFKD separa ligaduras como "ﬁ")
SLUG_MAX_LENGTH = 80

# Valores aceptados en "_destroy" al asignar imágenes anidadas
DESTROY_FLAGS = {True, 1, '1', 'true', 'True'}


def current_language():
    """Idioma activo del request, o LANGUAGE_CODE si no hay ninguno activo."""
    return translation.get_language() or settings.LANGUAGE_CODE


def slug_for(title):
    """
    Convierte un título en slug: "Foo bar" -> "foo-bar".
    Un título vacío (o que no deja nada al limpiarlo) no tiene slug: devuelve None, nunca "".
    """
    if not title:
        return None
    return slugify(title) or None


class Tag(models.Model):
    name = models.CharField(max_length=100, unique=True, verbose_name="Nombre del Tag")
    slug = models.SlugField(max_length=120, unique=True, blank=True, help_text="Versión amigable para URL del nombre del tag.")

    class Meta:
        verbose_name = "Tag"
        verbose_name_plural = "Tags"
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class BlogPostQuerySet(models.QuerySet):
    """
    BlogPost.objects es la colección completa (sin filtros implícitos).
    Cada filtro de publicación o idioma se pide de forma explícita.
    """

    def published(self):
        return self.filter(published_at__isnull=False)

    def for_locale(self, locale):
        return self.filter(language=locale)

    def list_published_for_locale(self, locale):
        """Artículos publicados en `locale`, del más reciente al más antiguo."""
        return self.published().for_locale(locale).order_by('-published_at')

    def unscoped_desc(self):
        """Todos los artículos (publicados o no, de cualquier idioma), por fecha de creación descendente."""
        return self.order_by('-created_at')

    def find_tags(self, term):
        """
        Tags distintos de los artículos de este queryset.
        Con term="" devuelve todos; si no, solo los que empiezan por `term`
        (comparación literal y sensible a mayúsculas).
        """
        tags = Tag.objects.filter(blog_posts__in=self).distinct()
        if term:
            # Left() + igualdad en vez de startswith: en SQLite LIKE ignora mayúsculas
            tags = tags.annotate(name_prefix=Left('name', len(term))).filter(name_prefix=term)
        return tags

    def unscoped_find_by(self, **criteria):
        """Primer artículo que cumple `criteria`. Lanza BlogPost.DoesNotExist si no hay ninguno."""
        post = self.filter(**criteria).first()
        if post is None:
            logger.warning(f"unscoped_find_by: ningún BlogPost cumple {criteria}")
            raise self.model.DoesNotExist(f"No existe un BlogPost con {criteria}")
        return post


class BlogPost(models.Model):
    title = models.CharField(max_length=TITLE_MAX_LENGTH, unique=True, verbose_name="Título")
    slug = models.SlugField(
        max_length=SLUG_MAX_LENGTH, unique=True, null=True, blank=True, editable=False,
        help_text="Se genera a partir del título cada vez que se guarda el artículo."
    )
    body = models.TextField(verbose_name="Contenido")
    description = models.TextField(
        blank=True, default='', verbose_name="Descripción",
        help_text="Obligatoria cuando el artículo tiene fecha de publicación."
    )
    published_at = models.DateTimeField(null=True, blank=True, db_index=True, verbose_name="Fecha de Publicación")
    language = models.CharField(
        max_length=7, choices=settings.LANGUAGES, default=current_language, db_index=True, verbose_name="Idioma"
    )

    tags = models.ManyToManyField(Tag, blank=True, related_name="blog_posts", verbose_name="Tags")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BlogPostQuerySet.as_manager()

    class Meta:
        verbose_name = "Artículo del Blog"
        verbose_name_plural = "Artículos del Blog"

    def clean(self):
        super().clean()
        errors = {}
        # Django solo rechaza "" como vacío; un texto de solo espacios tampoco vale
        if self.title and not self.title.strip():
            errors['title'] = "El título no puede estar vacío."
        if self.body and not self.body.strip():
            errors['body'] = "El contenido no puede estar vacío."
        if self.published_at is not None and not (self.description or '').strip():
            errors['description'] = "La descripción es obligatoria para un artículo publicado."
        if self.title and 'title' not in errors:
            self._check_derived_slug(errors)
        if errors:
            raise ValidationError(errors)

    def _check_derived_slug(self, errors):
        # El slug es el identificador externo: debe caber en el campo y no repetirse
        slug = slug_for(self.title)
        if slug is None:
            return
        if len(slug) > SLUG_MAX_LENGTH:
            errors['title'] = f"El slug generado a partir del título supera {SLUG_MAX_LENGTH} caracteres."
        elif BlogPost.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            errors['title'] = f"Ya existe un artículo con el slug '{slug}'; elige otro título."

    def save(self, *args, **kwargs):
        # Si la validación falla se lanza ValidationError y no se escribe nada
        self.full_clean()
        self.slug = slug_for(self.title)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'title' in update_fields:
            kwargs['update_fields'] = {*update_fields, 'slug'}
        super().save(*args, **kwargs)
        logger.info(f"BlogPost guardado: {self.title} (slug={self.slug}, idioma={self.language})")

    def delete(self, *args, **kwargs):
        with transaction.atomic():
            images_deleted, _ = self.images.all().delete()
            result = super().delete(*args, **kwargs)
        logger.info(f"BlogPost eliminado: {self.title} ({images_deleted} imágenes)")
        return result

    @property
    def is_published(self):
        return self.published_at is not None

    @property
    def pretty_title(self):
        if not self.title:
            return ""
        return " ".join(word.capitalize() for word in self.title.split())

    def to_param(self):
        """Identificador usado en la URL: el slug guardado o, si aún no existe, el que daría el título."""
        return self.slug or slug_for(self.title)

    def get_absolute_url(self):
        return reverse('blog-api:blogpost-detail', kwargs={'slug': self.to_param()})

    def find_image_by(self, image_id):
        if self.pk is None:
            return None
        try:
            return self.images.filter(pk=image_id).first()
        except (ValueError, TypeError):
            # Un id que no es numérico no puede corresponder a ninguna imagen
            return None

    def set_tag_list(self, names):
        """Reemplaza los tags del artículo por los nombres dados, creando los que no existan."""
        tags = []
        for name in names:
            name = name.strip()
            if name:
                tag, _ = Tag.objects.get_or_create(name=name)
                tags.append(tag)
        self.tags.set(tags)

    def assign_images(self, attributes):
        """
        Asigna imágenes a partir de una lista de diccionarios:
        sin "id" crea una imagen, con "id" la actualiza y con "id" + "_destroy" la elimina.
        Todo ocurre en una transacción; un id que no pertenece al artículo lanza Image.DoesNotExist.
        """
        attributes = list(attributes)
        with transaction.atomic():
            for attrs in attributes:
                attrs = dict(attrs)
                image_id = attrs.pop('id', None)
                destroy = attrs.pop('_destroy', False) in DESTROY_FLAGS
                if image_id is None:
                    if not destroy:
                        self.images.create(**attrs)
                    continue

                image = self.images.get(pk=image_id)
                if destroy:
                    image.delete()
                    continue
                for field, value in attrs.items():
                    setattr(image, field, value)
                image.save()
        logger.debug(f"BlogPost {self.pk}: {len(attributes)} imágenes procesadas")

    def __str__(self):
        return self.title or ''


class Image(models.Model):
    blog_post = models.ForeignKey(
        BlogPost,
        on_delete=models.CASCADE,
        related_name='images',
        verbose_name="Artículo"
    )
    url = models.URLField(max_length=500, verbose_name="URL de la Imagen")
    alt = models.CharField(max_length=255, blank=True, default='', verbose_name="Texto Alternativo")
    position = models.PositiveIntegerField(default=0, verbose_name="Posición")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Imagen"
        verbose_name_plural = "Imágenes"
        ordering = ['position', 'id']

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.url
