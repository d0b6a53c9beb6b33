"""Chroma-key style background removal.

Makes every pixel whose RGB colour is close to a reference background
colour fully transparent. The reference is sampled from the top-left
pixel, which assumes a flat or near-flat background in that corner; a
subject touching the corner gets keyed as background. That heuristic is
kept as-is: smarter sampling would change the output for existing images.

Pure functions with no shared state, safe to run on a worker thread
(see background_removal_worker.BackgroundRemovalWorker).
"""

import logging

import numpy as np
from PIL import Image

from constants import DEFAULT_REMOVAL_TOLERANCE
from models.raster import RasterImage
from utils.errors import ProcessingError

logger = logging.getLogger(__name__)


def sample_reference_color(pixels):
    """RGB of the top-left pixel of an (H, W, 4) uint8 buffer."""
    return pixels[0, 0, :3].astype(np.int32)


def background_mask(pixels, tolerance):
    """Boolean (H, W) mask of pixels within ``tolerance`` of the reference colour.

    Distance is Euclidean in RGB space, compared squared to stay in integer
    arithmetic: d < t  <=>  d^2 < t^2 for t > 0.
    """
    if tolerance <= 0:
        return np.zeros(pixels.shape[:2], dtype=bool)
    reference = sample_reference_color(pixels)
    diff = pixels[..., :3].astype(np.int32) - reference
    dist_sq = np.einsum('ijk,ijk->ij', diff, diff)
    return dist_sq < tolerance * tolerance


def key_out_background(pixels, tolerance=DEFAULT_REMOVAL_TOLERANCE):
    """Return a copy of an RGBA buffer with background pixels' alpha set to 0.

    Pixels outside the tolerance are left untouched, including their alpha.

    Args:
        pixels: (H, W, 4) uint8 array
        tolerance: RGB distance threshold (0-441 scale)

    Raises:
        ProcessingError: if the buffer is not an RGBA uint8 image
    """
    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
        raise ProcessingError(f"Expected an (H, W, 4) uint8 buffer, got {pixels.shape} {pixels.dtype}")

    result = pixels.copy()
    if result.shape[0] == 0 or result.shape[1] == 0:
        return result

    mask = background_mask(result, tolerance)
    result[mask, 3] = 0
    logger.debug("Keyed out %d of %d pixels (tolerance %s)", int(mask.sum()), mask.size, tolerance)
    return result


def remove_background(image, tolerance=DEFAULT_REMOVAL_TOLERANCE):
    """Remove the flat background of an encoded raster.

    Args:
        image: RasterImage to process (left unmodified)
        tolerance: RGB distance threshold (default 40)

    Returns:
        RasterImage: new PNG-encoded image

    Raises:
        DecodeError: if the source cannot be decoded as an image
        ProcessingError: if the decoded image has no accessible RGBA pixel buffer
    """
    decoded = image.to_pil()

    try:
        pixels = np.array(decoded.convert('RGBA'), dtype=np.uint8)
    except (OSError, ValueError, MemoryError) as e:
        raise ProcessingError(f"Could not access pixel data: {e}") from e
    finally:
        decoded.close()

    keyed = key_out_background(pixels, tolerance)

    try:
        return RasterImage.from_pil(Image.fromarray(keyed))
    except (OSError, ValueError) as e:
        raise ProcessingError(f"Could not encode result: {e}") from e
