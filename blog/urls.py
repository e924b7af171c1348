from django.urls import path
from .views import (
    BlogPostListView,
    BlogPostDetailView,
    TagSearchView,
    BlogPostManageListCreateView,
    BlogPostManageDetailView,
)

app_name = 'blog'

urlpatterns = [
    path('posts/', BlogPostListView.as_view(), name='blogpost-list'),
    path('posts/<slug:slug>/', BlogPostDetailView.as_view(), name='blogpost-detail'),
    path('tags/', TagSearchView.as_view(), name='tag-search'),
    path('manage/posts/', BlogPostManageListCreateView.as_view(), name='blogpost-manage-list'),
    path('manage/posts/<slug:slug>/', BlogPostManageDetailView.as_view(), name='blogpost-manage-detail'),
]
