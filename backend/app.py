# backend/app.py

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.datastructures import UploadFile

from config.logger import setup_logging
from config.settings import settings
from .errors import GenerationError, ValidationError
from .model import GenerationRequest, GenerateResponse, ErrorResponse
from .replicate_client import ReplicateVideoProvider
from .utils import build_provider_input

FALLBACK_ERROR = "video generation failed"


def create_app(provider=None) -> FastAPI:
    """
    Build the API. `provider` is anything with `async run(ProviderInput) -> str`;
    by default the Replicate provider built from settings.
    """
    if provider is None:
        provider = ReplicateVideoProvider(
            api_token=settings.REPLICATE_API_TOKEN,
            model=settings.REPLICATE_MODEL,
        )

    app = FastAPI(title="Photo to Video Service")

    @app.post(
        "/api/generate",
        response_model=GenerateResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate(request: Request):
        t0 = time.time()
        try:
            form = await request.form()
            image = form.get("image")
            prompt: Optional[str] = form.get("prompt")
            if not isinstance(image, UploadFile):
                raise ValidationError("image is required")

            req = GenerationRequest(
                image_data=await image.read(),
                mime_type=image.content_type or "application/octet-stream",
                prompt=prompt if isinstance(prompt, str) else None,
            )
            provider_input = build_provider_input(req)
            logger.info(
                f"/api/generate :: mime={req.mime_type} bytes={len(req.image_data)} "
                f"motion_bucket_id={provider_input.motion_bucket_id}"
            )

            video_url = await provider.run(provider_input)

            logger.info(f"/api/generate OK in {time.time() - t0:.2f}s")
            return GenerateResponse(videoUrl=video_url)
        except GenerationError as e:
            logger.warning(f"/api/generate failed with {e.status_code}: {e}")
            return JSONResponse({"error": str(e) or FALLBACK_ERROR}, status_code=e.status_code)
        except Exception as e:
            logger.exception(f"/api/generate error: {e}")
            return JSONResponse({"error": str(e) or FALLBACK_ERROR}, status_code=500)

    return app


setup_logging(settings.LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, log_level="info")
