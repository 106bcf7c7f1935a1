"""Exception hierarchy."""


class JalchakshError(Exception):
    """Base class for all errors raised by this package."""


class InvalidImageData(JalchakshError, ValueError):
    """Pixel buffer does not match the declared image dimensions."""


class EmptyCatalog(JalchakshError):
    """No detection profiles are available to select from."""


class UnsupportedImageFile(JalchakshError):
    """An uploaded file is not a readable image within the size limit."""
