"""Error responses for deserialization failures in FastAPI apps.

Error response format:
{
    "type": "error",
    "error": {
        "type": "<error_type>",
        "message": "<error_message>"
    }
}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from params_deserializer.core.exceptions import TypeMismatch

logger = logging.getLogger(__name__)


class ErrorResponseBuilder:
    """Builder for consistent error responses."""

    @staticmethod
    def _build(status_code: int, error_type: str, message: str) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content={
                "type": "error",
                "error": {
                    "type": error_type,
                    "message": message,
                },
            },
        )

    @staticmethod
    def type_mismatch(error: TypeMismatch) -> JSONResponse:
        """Build a 422 response for params with the wrong shape."""
        return ErrorResponseBuilder._build(422, "type_mismatch", str(error))


async def _type_mismatch_handler(request: Request, exc: TypeMismatch) -> JSONResponse:
    logger.warning(f"Rejected params for {request.url.path}: {exc}")
    return ErrorResponseBuilder.type_mismatch(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Map TypeMismatch raised inside request handling to a 422 response."""
    app.add_exception_handler(TypeMismatch, _type_mismatch_handler)
