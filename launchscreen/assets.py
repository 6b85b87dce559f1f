import asyncio
import io
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

import httpx
from PIL import Image, UnidentifiedImageError

from .errors import FormatError, NetworkError
from .manifest import Manifest, platform_splash, shared_splash
from .tools import ensure_directory


# The unqualified name is the default asset; `~iphone` narrows it to phones.
UNIVERSAL_IMAGE_FILENAME = "launch_background_image.png"
PHONE_IMAGE_FILENAME = "launch_background_image~iphone.png"

REMOTE_SCHEMES = {"http", "https"}


@dataclass(frozen=True)
class ImageOutput:
    url: str
    path: Path


def plan_background_images(
    manifest: Optional[Manifest],
    target_dir: Path,
    platform: str = "ios",
) -> List[ImageOutput]:
    """
    Decide which background images to write into `target_dir`.

    - no phone image: nothing is written and the template's image stays
    - phone image only: it becomes the universal image
    - phone + tablet: the phone image gets the `~iphone` name and the tablet
      image takes the universal slot

    A tablet image is only honoured alongside a platform-scoped phone image.
    """
    platform_section = platform_splash(manifest, platform)
    phone_image = platform_section.get("imageUrl")
    tablet_image = None
    if phone_image:
        tablet_image = platform_section.get("tabletImageUrl") or None
    else:
        phone_image = shared_splash(manifest).get("imageUrl")

    if not phone_image:
        return []

    if not tablet_image:
        return [ImageOutput(url=phone_image, path=target_dir / UNIVERSAL_IMAGE_FILENAME)]

    return [
        ImageOutput(url=phone_image, path=target_dir / PHONE_IMAGE_FILENAME),
        ImageOutput(url=tablet_image, path=target_dir / UNIVERSAL_IMAGE_FILENAME),
    ]


class ImageFetcher:
    """
    Fetches an image from a URL or a local path and stores it as PNG.

    Local paths are resolved against the `base_dir` passed to
    `fetch_and_save`. A shared httpx client can be injected; otherwise one is
    opened per download.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self._client = client

    async def fetch_and_save(self, base_dir: Path, url: str, dest: Path) -> None:
        if urlparse(url).scheme in REMOTE_SCHEMES:
            data = await self._download(url)
        else:
            data = await asyncio.to_thread((base_dir / url).read_bytes)
        await asyncio.to_thread(_write_png, data, url, dest)

    async def _download(self, url: str) -> bytes:
        try:
            if self._client is not None:
                response = await self._client.get(url)
                response.raise_for_status()
                return response.content

            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            raise NetworkError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e


def _write_png(data: bytes, source: str, dest: Path) -> None:
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise FormatError(f"Not a readable image: {e}", source=source) from e

    if img.mode == "CMYK":
        img = img.convert("RGB")

    ensure_directory(dest.parent)
    img.save(dest, format="PNG")


async def provision_background_images(
    manifest: Optional[Manifest],
    target_dir: Path,
    fetcher,
    platform: str = "ios",
) -> List[ImageOutput]:
    """
    Fetch every planned background image concurrently.

    All fetches are awaited before returning. Each failure is reported and the
    first one is re-raised so the caller always sees it.
    """
    outputs = plan_background_images(manifest, target_dir, platform)
    if not outputs:
        return []

    for output in outputs:
        print(f"🖼️  Saving {output.url} -> {output.path.name}")

    results = await asyncio.gather(
        *(fetcher.fetch_and_save(target_dir, output.url, output.path) for output in outputs),
        return_exceptions=True,
    )

    failures = [
        (output, result)
        for output, result in zip(outputs, results)
        if isinstance(result, BaseException)
    ]
    for output, error in failures:
        print(f"⚠️  Failed to save {output.url} -> {output.path}: {error}")
    if failures:
        raise failures[0][1]

    return outputs
