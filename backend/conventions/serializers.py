"""
Conventions API serializers

The catalog is static data, so these are plain serializers over
dataclasses and query parameters rather than model serializers.
"""
from rest_framework import serializers

from .catalog import Category
from .naming import SUBJECT_KINDS


class RuleSerializer(serializers.Serializer):
    """Serializer for catalog rules"""

    id = serializers.CharField()
    category = serializers.SerializerMethodField()
    title = serializers.CharField()
    subject = serializers.CharField()
    description = serializers.CharField()
    placement = serializers.CharField()
    pattern = serializers.CharField()
    example = serializers.CharField()
    snippet = serializers.CharField()

    def get_category(self, obj) -> str:
        return obj.category.value


class RuleQuerySerializer(serializers.Serializer):
    category = serializers.CharField(
        required=False,
        help_text=f"One of: {', '.join(c.value for c in Category)} (case-insensitive)",
    )

    def validate_category(self, value):
        try:
            return Category.parse(value)
        except ValueError as e:
            raise serializers.ValidationError(str(e))


class LayoutQuerySerializer(serializers.Serializer):
    apps = serializers.CharField(required=False, allow_blank=True)

    def validate_apps(self, value):
        """Comma-separated app names; blank means the placeholder app"""
        return [name.strip() for name in value.split(",") if name.strip()]


class LocationQuerySerializer(serializers.Serializer):
    source = serializers.CharField()
    kind = serializers.ChoiceField(choices=SUBJECT_KINDS)
    name = serializers.CharField()


class LocationSerializer(serializers.Serializer):
    """Serializer for a derived test location"""

    module_path = serializers.CharField()
    class_name = serializers.CharField()
    node_id = serializers.CharField()


class PropositionQuerySerializer(serializers.Serializer):
    sentence = serializers.CharField()
