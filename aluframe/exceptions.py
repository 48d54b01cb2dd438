"""Estimator exceptions and their HTTP error handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class InvalidInputError(ValueError):
    """Raised when dimensions, collar type or flags fail validation."""

    def __init__(self, message: str, details: list = None):
        self.message = message
        self.details = details or []
        super().__init__(message)


class UnsupportedShapeError(ValueError):
    """Raised when a shape selector has no registered frame component."""

    def __init__(self, selector, available: list):
        self.selector = selector
        self.available = available
        super().__init__(
            f"No frame component registered for shape: {selector}. "
            f"Available: {available}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register estimator exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "invalid_input",
                "details": exc.details,
            },
        )

    @app.exception_handler(UnsupportedShapeError)
    async def unsupported_shape_handler(request: Request, exc: UnsupportedShapeError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "unsupported_shape",
                "details": [{"available": exc.available}],
            },
        )
