"""Exception types raised by the composition editor core."""


class EditorError(Exception):
    """Base class for all editor errors."""


class InputError(EditorError):
    """A raster handed to the editor is malformed or unsupported."""


class DecodeError(InputError):
    """The source bytes could not be decoded as an image."""


class ProcessingError(InputError):
    """Pixel buffer access failed while processing a decoded image."""
