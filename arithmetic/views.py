from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ExpressionSerializer
from .utils import evaluate_expression


class EvaluateExpressionAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ExpressionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expression = serializer.validated_data["expression"]
        result = evaluate_expression(expression)
        if result.is_err():
            return Response(
                {"status": 400, "message": str(result.error), "error": result.error.as_dict()},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            {"status": 200, "data": {"expression": expression, "result": result.value}},
            status=status.HTTP_200_OK
        )
