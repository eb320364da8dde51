import requests
from fastapi.testclient import TestClient

from backend.app import create_app
from frontend.client import BackendClient
from frontend.controller import Processing, Success, UploadController
from frontend.messages import t


class FakeProvider:
    def __init__(self):
        self.calls = []

    async def run(self, provider_input):
        self.calls.append(provider_input)
        return "https://x/video.mp4"


class FakeUpload:
    def __init__(self, data, type, name):
        self._data = data
        self.type = type
        self.name = name

    def getvalue(self):
        return self._data


def test_drop_jpeg_without_prompt_to_playable_video(monkeypatch):
    provider = FakeProvider()
    api = TestClient(create_app(provider=provider))
    # Route the frontend's HTTP call into the in-process backend
    monkeypatch.setattr(
        requests,
        "post",
        lambda url, files=None, data=None, timeout=None: api.post(url, files=files, data=data),
    )

    seen = []
    ctrl = UploadController(client=BackendClient("http://testserver"), listener=seen.append)
    ctrl.select_file(FakeUpload(b"\xff\xd8\xff\xe0jpeg-body", "image/jpeg", "beach.jpg"))

    ctrl.submit()

    assert Processing(t("processing")) in seen
    assert seen.index(Processing(t("processing"))) < len(seen) - 1
    assert ctrl.status == Success(video_url="https://x/video.mp4", message=t("success"))
    assert ctrl.video_url == "https://x/video.mp4"
    assert len(provider.calls) == 1
    assert provider.calls[0].motion_bucket_id == 100
    assert provider.calls[0].input_image.startswith("data:image/jpeg;base64,")
