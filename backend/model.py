# backend/model.py
from pydantic import BaseModel
from typing import Optional, Literal

SizingStrategy = Literal["maintain_aspect_ratio", "crop_to_16_9", "use_image_dimensions"]


class GenerationRequest(BaseModel):
    image_data: bytes
    mime_type: str
    prompt: Optional[str] = None


class ProviderInput(BaseModel):
    input_image: str  # data URI
    sizing_strategy: SizingStrategy = "maintain_aspect_ratio"
    frames_per_second: int = 6
    motion_bucket_id: int
    cond_aug: float = 0.02


class GenerateResponse(BaseModel):
    videoUrl: str


class ErrorResponse(BaseModel):
    error: str
