"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from pantry_chef.api.auth import require_function_key
from pantry_chef.api.models import PantryAiData, PantryAiResponse
from pantry_chef.app_logging import configure_logging
from pantry_chef.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/api/ProcessPantryImage", dependencies=[Depends(require_function_key)]
    )
    async def process_pantry_image(request: Request) -> JSONResponse:
        """Analyze an uploaded pantry image and return the mapped item."""
        logger.info("Processing a pantry image request.")
        state_container: AppContainer = request.app.state.container
        try:
            async with request.form() as form:
                files = [
                    value
                    for _, value in form.multi_items()
                    if not isinstance(value, str)
                ]
                if not files:
                    logger.error("No image file found in the multipart request.")
                    return _json_response(
                        PantryAiResponse(success=False, error="No image file found."),
                        status.HTTP_400_BAD_REQUEST,
                    )
                upload = files[0]
                image_bytes = await upload.read()

            logger.info(
                "Received image file: %s, size: %d bytes",
                upload.filename,
                len(image_bytes),
            )
            result = await state_container.vision_service.analyze(image_bytes)
            logger.info("Received analysis from the vision provider.")

            record = state_container.mapper.map(result)
            return _json_response(
                PantryAiResponse(success=True, data=PantryAiData.from_record(record)),
                status.HTTP_200_OK,
            )
        except Exception as exc:
            logger.exception("Error processing image: %s", exc)
            return _json_response(
                PantryAiResponse(success=False, error=str(exc)),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    return app


def _json_response(body: PantryAiResponse, status_code: int) -> JSONResponse:
    """Serialize an envelope with camelCase keys."""
    return JSONResponse(
        content=body.model_dump(mode="json", by_alias=True),
        status_code=status_code,
    )
