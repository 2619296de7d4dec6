from pathlib import Path
from typing import Iterable, Optional

from vidshare.core.config.settings import settings
from vidshare.core.shared_types import MediaFile, media_for_path
from ..domain.interfaces import ITranscoder
from ..domain.models import FrameGeometry, TransformResult
from ..data.concatenator import ClipConcatenator
from ..data.duration import DurationEstimator
from ..data.ffmpeg_adapter import FFmpegTranscoder
from ..data.trimmer import FrameTrimmer

def default_geometry() -> FrameGeometry:
    """The deployment's raw geometry, read from settings."""
    return FrameGeometry(
        width=settings.RAW_VIDEO_WIDTH,
        height=settings.RAW_VIDEO_HEIGHT,
        fps=settings.RAW_VIDEO_FPS
    )

class TransformEngine:
    """
    Facade for the Transform Feature.
    Wires one geometry into the estimator, trimmer and concatenator.
    """
    def __init__(self, geometry: Optional[FrameGeometry] = None, transcoder: Optional[ITranscoder] = None):
        self.geometry = geometry or default_geometry()
        self.transcoder = transcoder if transcoder is not None else FFmpegTranscoder()
        self.estimator = DurationEstimator(self.geometry)
        self.trimmer = FrameTrimmer(self.geometry, self.estimator, self.transcoder)
        self.concatenator = ClipConcatenator(self.geometry, self.estimator)

    async def measure(self, media: MediaFile) -> float:
        return await self.estimator.measure(media, self.transcoder)

# --- Standalone API: paths in, paths out. Does NOT interact with the database. ---

def estimate_duration(path: str) -> float:
    """
    Public Service API: duration in seconds of a stored clip.
    """
    return TransformEngine().estimator.estimate(Path(path))

async def trim_video(path: str, trim_start: Optional[float] = None, trim_end: Optional[float] = None) -> TransformResult:
    """
    Public Service API: write a trimmed copy of a clip next to it.

    Args:
        path: Path to the source clip (.raw is sliced natively, others go to FFmpeg).
        trim_start: Seconds to cut from the start.
        trim_end: Seconds to cut from the end.
    """
    return await TransformEngine().trimmer.trim(media_for_path(path), trim_start, trim_end)

def merge_videos(paths: Iterable[str]) -> TransformResult:
    """
    Public Service API: concatenate raw clips, in order, into one new file.
    """
    return TransformEngine().concatenator.merge([media_for_path(p) for p in paths])
