"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sheetcut.domain.exceptions import PackingConfigurationError, UnknownPackerError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(PackingConfigurationError)
    async def packing_configuration_error_handler(
        request: Request, exc: PackingConfigurationError
    ) -> JSONResponse:
        details = None
        if isinstance(exc, UnknownPackerError):
            details = [{"requested": exc.requested, "available": exc.available}]
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "packing_configuration",
                "details": details,
            },
        )
