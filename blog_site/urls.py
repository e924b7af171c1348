# blog_site/urls.py

from django.contrib import admin
from django.urls import path, include
from blog.views import health_check_view

urlpatterns = [
    # Ruta raíz para el health check (buena práctica para Render/plataformas)
    path('', health_check_view, name='health_check'),

    # Rutas del panel de administración de Django
    path('admin/', admin.site.urls),

    # Incluye todas las URLs del API de la app 'blog' bajo el prefijo /api/blog/
    # Aquí deberían estar: /api/blog/posts/, /api/blog/posts/<slug>/, /api/blog/tags/
    # y las rutas de gestión /api/blog/manage/posts/...
    path('api/blog/', include('blog.urls', namespace='blog-api')),
]
