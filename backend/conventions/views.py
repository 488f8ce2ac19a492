"""
Conventions API views

Read-only access to the rule catalog, the layout template and the
mechanical test naming helpers.
"""
import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .catalog import CATALOG
from .layout import ProjectLayoutTemplate
from .naming import describe_test_location, proposition_to_test_name
from .serializers import (
    LayoutQuerySerializer,
    LocationQuerySerializer,
    LocationSerializer,
    PropositionQuerySerializer,
    RuleQuerySerializer,
    RuleSerializer,
)

logger = logging.getLogger(__name__)


class RuleListView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Conventions"],
        summary="List rules",
        description="All rules in catalog order, optionally limited to one category.",
        parameters=[RuleQuerySerializer],
        responses={200: RuleSerializer(many=True), 400: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        query = RuleQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        category = query.validated_data.get("category")
        rules = CATALOG.by_category(category) if category else CATALOG.all()

        return Response(
            {
                "count": len(rules),
                "categories": [c.value for c in CATALOG.categories()],
                "results": RuleSerializer(rules, many=True).data,
            }
        )


class RuleDetailView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Conventions"],
        summary="Get a rule",
        description="Retrieve one rule by id. Ids are case-insensitive.",
        parameters=[
            OpenApiParameter(
                name="rule_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Rule id, e.g. NAMING-PERMISSION",
            ),
        ],
        responses={200: RuleSerializer, 404: OpenApiTypes.OBJECT},
    )
    def get(self, request, rule_id):
        # UnknownRuleError becomes a 404 in core.exceptions.api_exception_handler
        rule = CATALOG.get(rule_id)
        return Response(RuleSerializer(rule).data)


class LayoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Conventions"],
        summary="Expected project layout",
        description=(
            "The directory tree a project with the given apps should have, "
            "as a nested tree, a flat path list and a rendered drawing."
        ),
        parameters=[LayoutQuerySerializer],
        responses={200: OpenApiTypes.OBJECT, 400: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        query = LayoutQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        app_names = query.validated_data.get("apps") or None
        template = ProjectLayoutTemplate(app_names)

        data = template.to_dict()
        data["rendered"] = template.render()
        return Response(data)


class NamingView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Conventions"],
        summary="Derive a test location",
        description=(
            "Where the tests for a function, class, method or endpoint live "
            "and what their class is called."
        ),
        parameters=[LocationQuerySerializer],
        responses={200: LocationSerializer, 400: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        query = LocationQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        data = query.validated_data
        try:
            location = describe_test_location(data["source"], data["kind"], data["name"])
        except ValueError as e:
            logger.info(f"Rejected test location query {dict(data)}: {e}")
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(LocationSerializer(location.to_dict()).data)


class PropositionView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Conventions"],
        summary="Name a test after a proposition",
        parameters=[PropositionQuerySerializer],
        responses={200: OpenApiTypes.OBJECT, 400: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        query = PropositionQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        sentence = query.validated_data["sentence"]
        try:
            test_name = proposition_to_test_name(sentence)
        except ValueError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"sentence": sentence, "test_name": test_name})
