"""
Books app URLs
"""
from django.urls import path
from rest_framework.authtoken.views import obtain_auth_token

from . import views

app_name = "books"

urlpatterns = [
    path("auth/token/", obtain_auth_token, name="token"),
    path("books/", views.BookListView.as_view(), name="book-list"),
    path("books/<int:pk>/", views.BookDetailView.as_view(), name="book-detail"),
    path("addresses/", views.AddressListView.as_view(), name="address-list"),
    path("addresses/<int:pk>/", views.AddressDetailView.as_view(), name="address-detail"),
    path("users/me/", views.UserDetailView.as_view(), name="user-detail"),
]
