"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from panelcut.domain import InvalidDimension


class OptimizationError(Exception):
    """Raised when a request fails boundary validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Optimization failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidDimension)
    async def invalid_dimension_handler(
        request: Request, exc: InvalidDimension
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_dimension",
                "details": [{"field": exc.field, "value": exc.value}],
            },
        )

    @app.exception_handler(OptimizationError)
    async def optimization_error_handler(
        request: Request, exc: OptimizationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cut list optimization failed",
                "error_type": "optimization",
                "details": [{"message": e} for e in exc.errors],
            },
        )
