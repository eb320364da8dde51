from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

import replicate
from loguru import logger

from .errors import ProviderError
from .model import ProviderInput


@dataclass(frozen=True)
class SingleReference:
    url: str


@dataclass(frozen=True)
class ReferenceSequence:
    urls: Tuple[str, ...]


ProviderOutput = Union[SingleReference, ReferenceSequence]


def _as_url(item: Any) -> str:
    # replicate>=1.0 may hand back FileOutput objects instead of plain strings
    url = getattr(item, "url", None)
    return url if isinstance(url, str) else str(item)


def classify_output(raw: Any) -> ProviderOutput:
    """
    Tag the raw SDK output as a single reference or an ordered sequence of references.
    """
    if raw is None:
        raise ProviderError("provider returned no video")
    if isinstance(raw, str) or hasattr(raw, "url"):
        return SingleReference(_as_url(raw))
    if isinstance(raw, dict):
        raise ProviderError(f"unexpected provider output: {list(raw.keys())}")
    try:
        items = tuple(_as_url(item) for item in raw)
    except TypeError:
        return SingleReference(_as_url(raw))
    return ReferenceSequence(items)


def first_reference(output: ProviderOutput) -> str:
    if isinstance(output, SingleReference):
        ref = output.url
    elif output.urls:
        ref = output.urls[0]
    else:
        ref = ""
    if not ref:
        raise ProviderError("provider returned no video")
    return ref


class ReplicateVideoProvider:
    """
    Runs the image-to-video model on Replicate and returns one result URL.
    """

    def __init__(self, api_token: Optional[str], model: str, client=None):
        """`client` replaces the replicate.Client built from `api_token` (anything with `async_run`)."""
        self.api_token = api_token
        self.model = model
        if client is None and api_token:
            client = replicate.Client(api_token=api_token)
        self.client = client

    async def run(self, provider_input: ProviderInput) -> str:
        if self.client is None:
            raise ProviderError("REPLICATE_API_TOKEN is not set")

        logger.info(
            f"Running {self.model.split(':')[0]} "
            f"motion_bucket_id={provider_input.motion_bucket_id}"
        )
        # Blocks until the prediction finishes; can take minutes
        raw = await self.client.async_run(
            self.model,
            input=provider_input.model_dump(),
            use_file_output=False,
        )
        return first_reference(classify_output(raw))
