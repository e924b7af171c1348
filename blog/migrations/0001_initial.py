import blog.models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Nombre del Tag')),
                ('slug', models.SlugField(blank=True, help_text='Versión amigable para URL del nombre del tag.', max_length=120, unique=True)),
            ],
            options={
                'verbose_name': 'Tag',
                'verbose_name_plural': 'Tags',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='BlogPost',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=72, unique=True, verbose_name='Título')),
                ('slug', models.SlugField(blank=True, editable=False, help_text='Se genera a partir del título cada vez que se guarda el artículo.', max_length=80, null=True)),
                ('body', models.TextField(verbose_name='Contenido')),
                ('description', models.TextField(blank=True, default='', help_text='Obligatoria cuando el artículo tiene fecha de publicación.', verbose_name='Descripción')),
                ('published_at', models.DateTimeField(blank=True, db_index=True, null=True, verbose_name='Fecha de Publicación')),
                ('language', models.CharField(db_index=True, default=blog.models.current_language, max_length=7, verbose_name='Idioma')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tags', models.ManyToManyField(blank=True, related_name='blog_posts', to='blog.tag', verbose_name='Tags')),
            ],
            options={
                'verbose_name': 'Artículo del Blog',
                'verbose_name_plural': 'Artículos del Blog',
            },
        ),
        migrations.CreateModel(
            name='Image',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('url', models.URLField(max_length=500, verbose_name='URL de la Imagen')),
                ('alt', models.CharField(blank=True, default='', max_length=255, verbose_name='Texto Alternativo')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Posición')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('blog_post', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='images', to='blog.blogpost', verbose_name='Artículo')),
            ],
            options={
                'verbose_name': 'Imagen',
                'verbose_name_plural': 'Imágenes',
                'ordering': ['position', 'id'],
            },
        ),
    ]
