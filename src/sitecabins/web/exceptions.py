"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sitecabins.domain.services import GridStepError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(GridStepError)
    async def grid_step_error_handler(
        request: Request, exc: GridStepError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "grid_step",
                "details": {"step": exc.step},
            },
        )
