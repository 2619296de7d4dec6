import pytest
from vidshare.core.common.errors import (
    DelegateFailureError,
    InvalidArgumentError,
    NotFoundError,
    StorageIOError,
    VideoServiceError,
)

@pytest.mark.parametrize("error_cls, kind, builtin", [
    (NotFoundError, "not_found", LookupError),
    (InvalidArgumentError, "invalid_argument", ValueError),
    (DelegateFailureError, "delegate_failure", RuntimeError),
    (StorageIOError, "io_failure", VideoServiceError),
])
def test_error_kinds(error_cls, kind, builtin):
    error = error_cls("boom")
    assert error.kind == kind
    assert isinstance(error, VideoServiceError)
    assert isinstance(error, builtin)
    assert error.message == "boom"

def test_delegate_detail_is_kept_verbatim():
    stderr = "[mov,mp4] moov atom not found\n"
    error = DelegateFailureError(f"Error processing video: {stderr}", stderr)
    assert error.detail == stderr
