# File: vidshare/core/common/errors.py

class VideoServiceError(Exception):
    """
    Base class for every failure surfaced by the transform engine,
    the video library and the share links.

    `kind` is a stable machine-readable tag the request layer maps to a
    rejection (e.g. 404 for "not_found", 400 for "invalid_argument").
    """
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(VideoServiceError, LookupError):
    """Missing clip, file or share token."""
    kind = "not_found"


class InvalidArgumentError(VideoServiceError, ValueError):
    """Malformed trim window, too few merge inputs, oversized upload..."""
    kind = "invalid_argument"


class StorageIOError(VideoServiceError):
    """Read/write fault on the storage filesystem. The OSError is kept as __cause__."""
    kind = "io_failure"


class DelegateFailureError(VideoServiceError, RuntimeError):
    """
    The external transcoder reported an error.
    `detail` holds the tool's own message, unmodified.
    """
    kind = "delegate_failure"

    def __init__(self, message: str, detail: str = ""):
        super().__init__(message)
        self.detail = detail
