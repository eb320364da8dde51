import os

import pytest
import requests
from streamlit.testing.v1 import AppTest

from frontend.controller import Processing, Success, UploadController
from frontend.messages import t

APP_PATH = os.path.join(os.path.dirname(__file__), "..", "frontend", "app.py")
VIDEO_URL = "https://x/video.mp4"


class FakeUpload:
    def __init__(self, data=b"\xff\xd8\xff\xe0fake", type="image/jpeg", name="photo.jpg"):
        self._data = data
        self.type = type
        self.name = name

    def getvalue(self):
        return self._data


class RecordingBackend:
    """Answers with a video URL and notes what the controller looked like mid-request."""

    def __init__(self):
        self.controller = None
        self.calls = []
        self.processing_during_call = []

    def generate(self, image_bytes, filename, mime_type, prompt):
        self.calls.append(prompt)
        self.processing_during_call.append(self.controller.is_processing)
        return 200, {"videoUrl": VIDEO_URL}


class FakeVideoResponse:
    content = b"mp4-bytes"

    def raise_for_status(self):
        pass


@pytest.fixture
def backend(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout=0: FakeVideoResponse())
    return RecordingBackend()


def page_with_image(backend):
    ctrl = UploadController(client=backend)
    backend.controller = ctrl
    ctrl.select_file(FakeUpload())
    at = AppTest.from_file(APP_PATH)
    at.session_state["controller"] = ctrl
    return at, ctrl


def test_generate_button_disabled_without_image():
    at = AppTest.from_file(APP_PATH)
    at.run()

    assert not at.exception
    assert at.button(key="generate").disabled


def test_generate_button_disabled_while_processing(backend):
    at, ctrl = page_with_image(backend)
    ctrl.status = Processing(t("processing"))

    at.run()

    button = at.button(key="generate")
    assert button.disabled
    assert button.label == t("generating")
    assert backend.calls == []


def test_click_sends_one_request_after_entering_processing(backend):
    at, ctrl = page_with_image(backend)
    at.run()
    assert not at.button(key="generate").disabled

    at.button(key="generate").click().run()

    assert not at.exception
    assert len(backend.calls) == 1
    assert backend.processing_during_call == [True]
    assert ctrl.status == Success(video_url=VIDEO_URL, message=t("success"))
    assert not at.button(key="generate").disabled


def test_success_offers_video_download(backend):
    at, _ = page_with_image(backend)
    at.run()

    at.button(key="generate").click().run()

    assert at.session_state["video_download"] == (VIDEO_URL, b"mp4-bytes")
