import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vidshare.core.common.errors import InvalidArgumentError
from vidshare.core.shared_types import MediaFile

@dataclass(frozen=True)
class FrameGeometry:
    """
    The one raw encoding we understand natively: interleaved pixels,
    no padding, no header, fixed frame rate.
    """
    width: int = 320
    height: int = 240
    bytes_per_pixel: int = 3
    fps: int = 30

    def __post_init__(self):
        if min(self.width, self.height, self.bytes_per_pixel, self.fps) <= 0:
            raise ValueError(f"Invalid frame geometry: {self}")

    @property
    def frame_size(self) -> int:
        return self.width * self.height * self.bytes_per_pixel

    def frame_count(self, byte_size: int) -> int:
        # A partial trailing frame is dropped.
        return byte_size // self.frame_size

    def frame_at(self, seconds: float) -> int:
        return math.floor(seconds * self.fps)

    def duration_of(self, byte_size: int) -> float:
        return self.frame_count(byte_size) / self.fps

@dataclass(frozen=True)
class TrimWindow:
    """Seconds to cut from the head and the tail of a clip."""
    trim_start: float = 0.0
    trim_end: float = 0.0

    def __post_init__(self):
        if not (math.isfinite(self.trim_start) and math.isfinite(self.trim_end)):
            raise InvalidArgumentError(f"Trim values must be finite numbers (trim_start={self.trim_start}, trim_end={self.trim_end})")
        if self.trim_start < 0 or self.trim_end < 0:
            raise InvalidArgumentError("Trim values must not be negative")
        if self.trim_start <= 0 and self.trim_end <= 0:
            raise InvalidArgumentError("Must specify a positive trim amount (trim_start or trim_end)")

    @classmethod
    def from_optional(cls, trim_start: Optional[float], trim_end: Optional[float]) -> "TrimWindow":
        return cls(trim_start=float(trim_start or 0.0), trim_end=float(trim_end or 0.0))

    def remaining(self, total_duration: float) -> float:
        return total_duration - self.trim_start - self.trim_end

@dataclass(frozen=True)
class TranscodeRequest:
    """
    Input for the delegate transcoder.
    start_seconds / duration_seconds map to ffmpeg's -ss / -t and are optional.
    """
    source: MediaFile
    output: MediaFile
    start_seconds: Optional[float] = None
    duration_seconds: Optional[float] = None

@dataclass(frozen=True)
class TransformResult:
    output_path: Path
    duration_seconds: float
    size_bytes: int

    @property
    def filename(self) -> str:
        return self.output_path.name
