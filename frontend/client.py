from typing import Any, Dict, Optional, Tuple

import requests
from loguru import logger

from config.settings import settings

VIDEO_FILENAME = "generated-video.mp4"


class BackendClient:
    """Thin requests wrapper around POST /api/generate."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.BACKEND_URL).rstrip("/")

    def generate(
        self, image_bytes: bytes, filename: str, mime_type: str, prompt: str
    ) -> Tuple[int, Dict[str, Any]]:
        """
        Send the image + prompt and wait for the video. No timeout: generation can take minutes.
        Returns (status_code, json_body). Raises if the request fails or the body is not JSON.
        """
        resp = requests.post(
            f"{self.base_url}/api/generate",
            files={"image": (filename, image_bytes, mime_type)},
            data={"prompt": prompt},
            timeout=None,
        )
        return resp.status_code, resp.json()


def fetch_video(video_url: str, timeout: float = 60.0) -> Optional[bytes]:
    """Download the generated video for the download button. None if it can't be fetched."""
    try:
        resp = requests.get(video_url, timeout=timeout)
        resp.raise_for_status()
        return resp.content
    except requests.RequestException as e:
        logger.warning(f"Could not download video {video_url}: {e!r}")
        return None
