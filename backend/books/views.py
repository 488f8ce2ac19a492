"""
Books API views
"""
import logging

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly

from .filters import OwnerFilter, PublishedFilter, SearchFilter
from .models import Address, Book
from .permissions import IsOwner, IsOwnerOrReadOnly
from .serializers import AddressSerializer, BookSerializer, UserSerializer

logger = logging.getLogger(__name__)


@extend_schema_view(
    get=extend_schema(
        tags=["Books"],
        summary="List books",
        description="Paginated list of books, filterable by publication, owner and text.",
    ),
    post=extend_schema(
        tags=["Books"],
        summary="Create a book",
        description="Create a book owned by the authenticated user.",
    ),
)
class BookListView(generics.ListCreateAPIView):
    serializer_class = BookSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    filter_backends = [PublishedFilter, OwnerFilter, SearchFilter]

    def get_queryset(self):
        return Book.objects.select_related("owner")

    def perform_create(self, serializer):
        book = serializer.save(owner=self.request.user)
        logger.info(f"Book {book.id} created by user {self.request.user.id}")


@extend_schema_view(
    get=extend_schema(tags=["Books"], summary="Get a book"),
    patch=extend_schema(
        tags=["Books"],
        summary="Update a book",
        description="Partially update a book. Only the owner may do this.",
    ),
    delete=extend_schema(
        tags=["Books"],
        summary="Delete a book",
        description="Delete a book. Only the owner may do this.",
    ),
)
class BookDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = BookSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsOwnerOrReadOnly]
    http_method_names = ["get", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return Book.objects.select_related("owner")

    def perform_destroy(self, instance):
        book_id = instance.id
        instance.delete()
        logger.info(f"Book {book_id} deleted by user {self.request.user.id}")


@extend_schema_view(
    get=extend_schema(tags=["Addresses"], summary="List your addresses"),
    post=extend_schema(
        tags=["Addresses"],
        summary="Add an address",
        description="Marking the address primary clears the flag on your other addresses.",
    ),
)
class AddressListView(generics.ListCreateAPIView):
    serializer_class = AddressSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Address.objects.for_user(self.request.user)

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)


@extend_schema_view(
    get=extend_schema(tags=["Addresses"], summary="Get an address"),
    patch=extend_schema(tags=["Addresses"], summary="Update an address"),
    delete=extend_schema(tags=["Addresses"], summary="Delete an address"),
)
class AddressDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = AddressSerializer
    permission_classes = [IsAuthenticated, IsOwner]
    http_method_names = ["get", "patch", "delete", "head", "options"]

    def get_queryset(self):
        # Other users' addresses are reported as missing, not forbidden
        return Address.objects.for_user(self.request.user)


@extend_schema_view(
    get=extend_schema(tags=["Users"], summary="Get the current user"),
    patch=extend_schema(
        tags=["Users"],
        summary="Update the current user",
        description="full_name is split into first_name and last_name.",
    ),
)
class UserDetailView(generics.RetrieveUpdateAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ["get", "patch", "head", "options"]

    def get_object(self):
        return self.request.user
