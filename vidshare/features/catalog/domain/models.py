from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

from vidshare.core.common.enums import ClipEncoding, ClipOrigin
from vidshare.core.shared_types import ClipMedia

@dataclass(frozen=True)
class Clip:
    """
    A cataloged video. `media` is the raw/container variant,
    resolved once when the row is read.
    """
    id: UUID
    filename: str
    media: ClipMedia
    size_bytes: int
    duration_seconds: float
    origin: ClipOrigin = ClipOrigin.UPLOAD

    @property
    def path(self) -> Path:
        return self.media.path

    @property
    def encoding(self) -> ClipEncoding:
        return self.media.encoding

@dataclass(frozen=True)
class NewClip:
    """
    Fully populated row to insert. Validated before it reaches the database.
    """
    filename: str
    filepath: Path
    size_bytes: int
    duration_seconds: float
    origin: ClipOrigin

    def __post_init__(self):
        if self.size_bytes < 0:
            raise ValueError(f"Clip size cannot be negative: {self.size_bytes}")
        if self.duration_seconds < 0:
            raise ValueError(f"Clip duration cannot be negative: {self.duration_seconds}")
