import base64
from typing import Optional

from .model import GenerationRequest, ProviderInput

MOTION_BUCKET_WITH_PROMPT = 127
MOTION_BUCKET_NO_PROMPT = 100


def encode_data_uri(data: bytes, mime_type: str) -> str:
    """Inline the image as `data:<mime>;base64,<payload>` so the provider needs no upload step."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def motion_bucket_for_prompt(prompt: Optional[str]) -> int:
    # Any non-empty prompt (whitespace included) asks for more motion
    return MOTION_BUCKET_WITH_PROMPT if prompt else MOTION_BUCKET_NO_PROMPT


def build_provider_input(req: GenerationRequest) -> ProviderInput:
    return ProviderInput(
        input_image=encode_data_uri(req.image_data, req.mime_type),
        motion_bucket_id=motion_bucket_for_prompt(req.prompt),
    )
