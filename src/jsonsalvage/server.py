"""FastAPI server for jsonsalvage.

This module defines the FastAPI application and HTTP endpoints for running
JSON recovery over HTTP. Routes are defined here and delegate to the modules
of the http package.
"""
import dotenv
from fastapi import FastAPI

from jsonsalvage.config import Settings, load_settings
from jsonsalvage.http.extract import ExtractRequest, ExtractResponse, handle_extract
from jsonsalvage.log import configure_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Environment variables are loaded from a .env file if present before
    settings are read.

    Args:
        settings: Settings to use. Defaults to load_settings() from the
            environment.

    Returns:
        FastAPI: Configured application with /extract and /health routes.
    """
    dotenv.load_dotenv()
    settings = settings or load_settings()
    configure_logging(settings)
    api = FastAPI(title="jsonsalvage")

    @api.post("/extract", response_model=ExtractResponse)
    def extract_endpoint(request: ExtractRequest):
        """Recover the JSON value contained in a model response.

        A plain def, so FastAPI runs extraction in its threadpool, off the
        event loop.

        Args:
            request: Request with the raw text.

        Returns:
            ExtractResponse: Canonical JSON and whether it was found.
        """
        return handle_extract(request, settings)

    @api.get("/health")
    async def health():
        """Liveness check."""
        return {"status": "ok"}

    return api


app = create_app()
"""FastAPI application instance for uvicorn.

Example:
    Run with uvicorn:
        uvicorn jsonsalvage.server:app --reload
"""
