"""
Post Composer - Raster Image Value

Encoded raster assets (background art, overlay object, logo) are carried
by value inside every composition snapshot. A RasterImage never references
a file or URL; it owns its encoded bytes.
"""

import base64
import binascii
import io
from dataclasses import dataclass
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from utils.errors import DecodeError


_DATA_URL_PREFIX = 'data:'
_BASE64_MARKER = ';base64,'


@dataclass(frozen=True)
class RasterImage:
    """Immutable encoded raster (PNG, JPEG, ...) plus its MIME type."""
    data: bytes
    mime_type: str = 'image/png'

    def __repr__(self):
        return f"RasterImage({self.mime_type}, {len(self.data)} bytes)"

    # ========================================
    # Builders
    # ========================================

    @classmethod
    def from_pil(cls, image: Image.Image, fmt: str = 'PNG') -> 'RasterImage':
        """Encode a Pillow image."""
        buffer = io.BytesIO()
        image.save(buffer, format=fmt)
        return cls(buffer.getvalue(), Image.MIME.get(fmt.upper(), 'image/png'))

    @classmethod
    def from_bytes(cls, data: bytes) -> 'RasterImage':
        """Wrap encoded bytes, detecting the MIME type from the image header.

        Raises:
            DecodeError: if the bytes are not a recognised image format
        """
        try:
            with Image.open(io.BytesIO(data)) as img:
                mime = Image.MIME.get(img.format or '', 'application/octet-stream')
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise DecodeError(f"Unrecognised image data: {e}") from e
        return cls(bytes(data), mime)

    @classmethod
    def from_file(cls, path) -> 'RasterImage':
        """Read an image file into memory (no reference to the path is kept)."""
        with open(path, 'rb') as f:
            return cls.from_bytes(f.read())

    @classmethod
    def from_data_url(cls, url: str) -> 'RasterImage':
        """Parse a ``data:<mime>;base64,<payload>`` URL.

        Raises:
            DecodeError: if the URL is not a base64 data URL
        """
        if not isinstance(url, str) or not url.startswith(_DATA_URL_PREFIX) or _BASE64_MARKER not in url:
            raise DecodeError("Not a base64 data URL")
        header, payload = url[len(_DATA_URL_PREFIX):].split(_BASE64_MARKER, 1)
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid base64 payload: {e}") from e
        return cls(data, header or 'image/png')

    # ========================================
    # Accessors
    # ========================================

    def to_data_url(self) -> str:
        return f"{_DATA_URL_PREFIX}{self.mime_type}{_BASE64_MARKER}{base64.b64encode(self.data).decode('ascii')}"

    def to_pil(self) -> Image.Image:
        """Decode into a fully loaded Pillow image.

        Raises:
            DecodeError: if the bytes cannot be decoded
        """
        try:
            img = Image.open(io.BytesIO(self.data))
            img.load()
        except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError(f"Could not decode image: {e}") from e
        return img

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""
        return self.to_pil().size
