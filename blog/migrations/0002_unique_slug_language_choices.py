from django.db import migrations, models

import blog.models


class Migration(migrations.Migration):

    dependencies = [
        ('blog', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='blogpost',
            name='slug',
            field=models.SlugField(blank=True, editable=False, help_text='Se genera a partir del título cada vez que se guarda el artículo.', max_length=80, null=True, unique=True),
        ),
        migrations.AlterField(
            model_name='blogpost',
            name='language',
            field=models.CharField(choices=[('en', 'English'), ('ro', 'Română')], db_index=True, default=blog.models.current_language, max_length=7, verbose_name='Idioma'),
        ),
    ]
