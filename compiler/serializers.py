import dataclasses

from django.conf import settings
from rest_framework import serializers


def get_max_source_length():
    return settings.LISPC.get("MAX_SOURCE_LENGTH", 10000)


# Request Serializers
class TokenizeRequestSerializer(serializers.Serializer):
    """Validates the source text submitted for translation."""
    source = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def validate_source(self, value):
        limit = get_max_source_length()
        if len(value) > limit:
            raise serializers.ValidationError(f"source must be at most {limit} characters")
        return value


def nesting_depth(source):
    """Deepest parenthesis nesting in ``source``, ignoring balance errors."""
    depth = deepest = 0
    for char in source:
        if char == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif char == ")":
            depth -= 1
    return deepest


class CompileRequestSerializer(TokenizeRequestSerializer):
    steps = serializers.BooleanField(default=False)

    def validate_source(self, value):
        value = super().validate_source(value)
        limit = settings.LISPC.get("MAX_NESTING_DEPTH", 100)
        if nesting_depth(value) > limit:
            raise serializers.ValidationError(f"source must nest at most {limit} levels deep")
        return value


# Artifact Serializers
class TokenSerializer(serializers.Serializer):
    type = serializers.SerializerMethodField()
    value = serializers.CharField()

    def get_type(self, obj):
        return obj.type.name


class ASTNodeSerializer(serializers.BaseSerializer):
    """
    Render a source or target AST node as nested dicts.

    Each node becomes ``{"type": <node class name>, ...fields}``; child
    sequences become lists and nested nodes are rendered recursively.
    """

    def to_representation(self, instance):
        data = {"type": type(instance).__name__}
        for field in dataclasses.fields(instance):
            data[field.name] = self._render(getattr(instance, field.name))
        return data

    def _render(self, value):
        if isinstance(value, tuple):
            return [self._render(item) for item in value]
        if dataclasses.is_dataclass(value):
            return self.to_representation(value)
        return value


class CompilationSerializer(serializers.Serializer):
    """Serializer for a full translation including the intermediate steps."""
    output = serializers.CharField()
    tokens = TokenSerializer(many=True)
    ast = ASTNodeSerializer()
    target_ast = ASTNodeSerializer()
