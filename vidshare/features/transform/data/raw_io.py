import logging
from pathlib import Path
from vidshare.core.common.errors import NotFoundError, StorageIOError

logger = logging.getLogger(__name__)

def file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError as e:
        raise NotFoundError(f"Video file not found: {path}") from e
    except OSError as e:
        raise StorageIOError(f"Could not stat {path}: {e}") from e

def read_whole(path: Path) -> bytes:
    """Materializes the whole clip. Bounded by the upload caps."""
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise NotFoundError(f"Video file not found: {path}") from e
    except OSError as e:
        raise StorageIOError(f"Could not read {path}: {e}") from e

def write_new(path: Path, buffer) -> int:
    """
    Writes buffer to a file that must not exist yet ('xb').
    Output files are never overwritten.
    """
    try:
        with open(path, "xb") as f:
            f.write(buffer)
    except OSError as e:
        logger.error(f"Failed writing {path}: {e}")
        raise StorageIOError(f"Could not write {path}: {e}") from e
    return len(buffer)
