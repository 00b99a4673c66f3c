"""Viewer URL construction and QR rendering for payload text."""

import asyncio
import base64
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from .errors import EncodingError
from .interfaces import ILogSink, IQRGenerator

VIEW_PATH = "/view"


@dataclass(frozen=True)
class QRArtifact:
    """Rendered QR code and the URL it points at."""
    image_data: str
    source_url: str
    png: bytes


def encode_payload(text: str) -> str:
    """Base64 of the UTF-8 bytes of text (safe for non-ASCII input)."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_payload(encoded: str) -> str:
    return base64.b64decode(encoded.encode("ascii")).decode("utf-8")


def build_viewer_url(origin: str, text: str) -> str:
    return f"{origin.rstrip('/')}{VIEW_PATH}?data={encode_payload(text)}"


def decode_viewer_url(url: str) -> str:
    """Recover the payload text from a viewer URL.

    The query is split by hand: standard parsers turn the base64 "+" into
    a space.
    """
    for pair in urlsplit(url).query.split("&"):
        key, _, value = pair.partition("=")
        if key == "data":
            return decode_payload(unquote(value))
    raise ValueError("viewer URL has no data parameter")


def png_data_url(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


class PayloadEncoder:
    """Wraps text into a viewer URL and renders it as a QR image."""

    def __init__(self, qr: IQRGenerator, logger: ILogSink, origin: str):
        self.qr = qr
        self.logger = logger
        self.origin = origin

    async def encode(self, text: str) -> QRArtifact:
        """Render text; raises EncodingError when the QR cannot be built."""
        url = build_viewer_url(self.origin, text)
        try:
            png = await asyncio.to_thread(self.qr.generate, url)
        except Exception as e:
            self.logger.log(
                "error", f"QR generation failed for {len(url)} char URL: {e}"
            )
            raise EncodingError(f"QR generation failed: {e}") from e

        return QRArtifact(image_data=png_data_url(png), source_url=url, png=png)
