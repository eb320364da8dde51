import base64
from dataclasses import dataclass
from io import BytesIO
from typing import Callable, Optional, Tuple, Union

from loguru import logger
from PIL import Image, UnidentifiedImageError

from .client import BackendClient
from .messages import t


@dataclass(frozen=True)
class Idle:
    message: str = ""


@dataclass(frozen=True)
class Processing:
    message: str


@dataclass(frozen=True)
class Success:
    video_url: str
    message: str


@dataclass(frozen=True)
class Error:
    message: str


Status = Union[Idle, Processing, Success, Error]


@dataclass(frozen=True)
class UploadSelection:
    image_bytes: bytes
    mime_type: str
    filename: str
    preview_url: str  # data URL for <img src>
    size: Optional[Tuple[int, int]] = None


def image_size(data: bytes) -> Optional[Tuple[int, int]]:
    """(width, height) if Pillow can read the header, else None. Used for display only."""
    try:
        with Image.open(BytesIO(data)) as img:
            return img.size
    except (UnidentifiedImageError, OSError):
        return None


class UploadController:
    """
    State of the upload page: the selected image, the prompt and one status value.

    The page calls select_file / set_prompt / submit / reset from widget callbacks.
    `listener`, when given, is called with every new status so the page can paint
    "processing" before the backend answers.
    """

    def __init__(
        self,
        client: Optional[BackendClient] = None,
        listener: Optional[Callable[[Status], None]] = None,
    ):
        self.client = client or BackendClient()
        self.listener = listener
        self.selection: Optional[UploadSelection] = None
        self.prompt: str = ""
        self.status: Status = Idle()

    @property
    def video_url(self) -> Optional[str]:
        return self.status.video_url if isinstance(self.status, Success) else None

    @property
    def is_processing(self) -> bool:
        return isinstance(self.status, Processing)

    @property
    def can_submit(self) -> bool:
        return self.selection is not None and not self.is_processing

    def _set_status(self, status: Status) -> None:
        self.status = status
        if self.listener is not None:
            self.listener(status)

    def select_file(self, file) -> None:
        """
        Accept an uploaded file (anything with `.type`, `.name`, `.getvalue()`).
        Only the declared content type is checked, not the bytes themselves.
        """
        mime_type = getattr(file, "type", None) or ""
        if not mime_type.startswith("image/"):
            self._set_status(Error(t("select_image_only")))
            return

        data = file.getvalue()
        if not data:
            self._set_status(Error(t("select_image_only")))
            return

        preview_url = f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
        self.selection = UploadSelection(
            image_bytes=data,
            mime_type=mime_type,
            filename=getattr(file, "name", None) or "image",
            preview_url=preview_url,
            size=image_size(data),
        )
        self._set_status(Idle())

    def set_prompt(self, text: str) -> None:
        self.prompt = text or ""

    def submit(self) -> None:
        if self.begin_submit():
            self.finish_submit()

    def begin_submit(self) -> bool:
        """
        Validate and move to Processing without calling the backend.
        Returns False when nothing should be sent.
        """
        if self.is_processing:
            return False
        if self.selection is None:
            self._set_status(Error(t("select_image_first")))
            return False

        self._set_status(Processing(t("processing")))
        return True

    def finish_submit(self) -> None:
        """Send the pending request started by begin_submit and settle the status."""
        if not self.is_processing or self.selection is None:
            return
        sel = self.selection
        try:
            status_code, body = self.client.generate(
                sel.image_bytes, sel.filename, sel.mime_type, self.prompt
            )
        except Exception as e:
            logger.exception(f"Backend request failed: {e!r}")
            self._set_status(Error(t("server_error")))
            return

        if not isinstance(body, dict):
            body = {}
        video_url = body.get("videoUrl")
        if 200 <= status_code < 300 and video_url:
            self._set_status(Success(video_url=video_url, message=t("success")))
        else:
            logger.warning(f"Generation failed: HTTP {status_code} {body}")
            self._set_status(Error(body.get("error") or t("generation_failed")))

    def reset(self) -> None:
        self.selection = None
        self.prompt = ""
        self._set_status(Idle())
