import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .dsl import CompilerError, Tokenizer, compile_steps
from .serializers import (
    CompileRequestSerializer, TokenizeRequestSerializer,
    CompilationSerializer, TokenSerializer,
)

logger = logging.getLogger(__name__)


def compiler_error_response(error: CompilerError) -> Response:
    """Build the 400 response reported for a rejected source."""
    return Response(
        {"status": 400, "message": error.message, "error": type(error).__name__},
        status=status.HTTP_400_BAD_REQUEST
    )


class CompileAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CompileRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        source = serializer.validated_data["source"]

        try:
            compilation = compile_steps(source)
        except CompilerError as e:
            logger.info(f"Rejected source ({type(e).__name__}): {e.message}")
            return compiler_error_response(e)

        if serializer.validated_data["steps"]:
            data = CompilationSerializer(compilation).data
        else:
            data = {"output": compilation.output}
        return Response({"status": 200, "data": data}, status=status.HTTP_200_OK)


class TokenizeAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = TokenizeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            tokens = Tokenizer(serializer.validated_data["source"]).generate_tokens()
        except CompilerError as e:
            logger.info(f"Rejected source ({type(e).__name__}): {e.message}")
            return compiler_error_response(e)

        return Response(
            {"status": 200, "data": TokenSerializer(tokens, many=True).data},
            status=status.HTTP_200_OK
        )
