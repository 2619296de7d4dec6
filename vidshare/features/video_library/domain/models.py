from dataclasses import dataclass
from uuid import UUID

from vidshare.features.catalog.domain.models import Clip

@dataclass(frozen=True)
class ClipSummary:
    """
    What a caller gets back from upload / trim / merge.
    """
    id: UUID
    filename: str
    duration: float
    size_bytes: int

    @classmethod
    def of(cls, clip: Clip) -> "ClipSummary":
        return cls(id=clip.id, filename=clip.filename, duration=clip.duration_seconds, size_bytes=clip.size_bytes)

    def to_dict(self) -> dict:
        return {"id": str(self.id), "filename": self.filename, "duration": self.duration}
