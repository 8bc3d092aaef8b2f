from rest_framework import serializers


class ExpressionSerializer(serializers.Serializer):
    """Serializer for an expression submitted for evaluation."""
    expression = serializers.CharField(max_length=1000, trim_whitespace=False)

    def validate_expression(self, value):
        if not value.strip():
            raise serializers.ValidationError("expression must not be blank")
        return value
