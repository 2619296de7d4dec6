import random
import shutil
import time
import logging
from pathlib import Path
from typing import Optional
from vidshare.core.config.settings import settings
from vidshare.core.common.errors import InvalidArgumentError, NotFoundError, StorageIOError
from ..domain.interfaces import IUploadStore

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".raw", ".mp4", ".mov"}

class LocalUploadStore(IUploadStore):
    def __init__(self, uploads_dir: Optional[Path] = None, max_bytes: Optional[int] = None):
        self.uploads_dir = Path(uploads_dir or settings.UPLOADS_DIR)
        self.max_bytes = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES

    def stage(self, incoming: Path) -> Path:
        """
        Moves input file to: <uploads>/{ms_timestamp}-{random 9 digits}.ext
        The generated name keeps concurrent uploads from colliding.
        """
        incoming = Path(incoming)
        if not incoming.is_file():
            raise NotFoundError(f"No video file provided: {incoming}")

        # 1. Validate type and size before touching storage
        extension = incoming.suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise InvalidArgumentError(
                f"Invalid file type '{extension or incoming.name}'. Only video files are allowed ({', '.join(sorted(ALLOWED_EXTENSIONS))})"
            )

        file_size = incoming.stat().st_size
        if file_size > self.max_bytes:
            raise InvalidArgumentError(f"Video file too large: {file_size} bytes (limit {self.max_bytes})")

        # 2. Construct destination path
        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        destination = self.uploads_dir / f"{int(time.time() * 1000)}-{random.randint(0, 10**9 - 1):09d}{extension}"

        # 3. Move file (Copy + Unlink is safer across different partitions/drives)
        try:
            shutil.copy2(str(incoming), str(destination))
            incoming.unlink()
        except OSError as e:
            raise StorageIOError(f"Could not store upload {incoming.name}: {e}") from e

        logger.info(f"Stored upload {incoming.name} as {destination.name} ({file_size} bytes)")
        return destination

    def discard(self, stored: Path) -> None:
        try:
            Path(stored).unlink()
        except FileNotFoundError:
            logger.warning(f"Rejected upload already gone: {stored}")
        except OSError as e:
            raise StorageIOError(f"Could not remove rejected upload {stored}: {e}") from e
