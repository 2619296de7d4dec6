import logging
from typing import List, Sequence

from vidshare.core.shared_types import ClipMedia, RawClip
from vidshare.core.common.errors import InvalidArgumentError, NotFoundError, StorageIOError
from ..domain.models import FrameGeometry, TransformResult
from .duration import DurationEstimator
from .output_names import merged_output_path
from .raw_io import file_size, read_whole, write_new

logger = logging.getLogger(__name__)

class ClipConcatenator:
    """
    Joins raw clips byte for byte, in the given order.
    No re-muxing, no re-encoding: every input must share the raw geometry.
    """

    def __init__(self, geometry: FrameGeometry, estimator: DurationEstimator):
        self.geometry = geometry
        self.estimator = estimator

    def merge(self, media_list: Sequence[ClipMedia]) -> TransformResult:
        if len(media_list) < 2:
            raise InvalidArgumentError("At least two clips required to merge")

        for media in media_list:
            if not isinstance(media, RawClip):
                raise InvalidArgumentError(f"Only raw clips can be merged, got {media.name}")
            if not media.exists():
                raise NotFoundError(f"Video file not found: {media.path}")

        # Pass 1: total duration (sum of estimates) and total size
        total_duration = 0.0
        sizes: List[int] = []
        for media in media_list:
            total_duration += self.estimator.estimate(media.path)
            sizes.append(file_size(media.path))

        buffer = bytearray(sum(sizes))

        # Pass 2: copy each input at its offset
        offset = 0
        for media, expected_size in zip(media_list, sizes):
            data = read_whole(media.path)
            if len(data) != expected_size:
                raise StorageIOError(f"Clip {media.name} changed size while merging")
            buffer[offset:offset + len(data)] = data
            offset += len(data)

        output_path = merged_output_path(media_list[0].path.parent)
        size = write_new(output_path, buffer)

        logger.info(f"Merged {len(media_list)} clips -> {output_path.name} ({total_duration:.3f}s, {size} bytes)")
        return TransformResult(output_path=output_path, duration_seconds=total_duration, size_bytes=size)
