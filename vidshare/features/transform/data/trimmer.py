import asyncio
import logging
from typing import Optional

from vidshare.core.shared_types import ClipMedia, RawClip, media_for_path
from vidshare.core.common.errors import InvalidArgumentError
from ..domain.interfaces import ITranscoder
from ..domain.models import FrameGeometry, TrimWindow, TranscodeRequest, TransformResult
from .duration import DurationEstimator
from .output_names import trimmed_output_path
from .raw_io import file_size, read_whole, write_new

logger = logging.getLogger(__name__)

class FrameTrimmer:
    """
    Cuts whole frames off the head and/or tail of a clip.
    Raw clips are sliced in memory; containers go to the transcoder.
    The source file is only ever read.
    """

    def __init__(self, geometry: FrameGeometry, estimator: DurationEstimator, transcoder: Optional[ITranscoder] = None):
        self.geometry = geometry
        self.estimator = estimator
        self.transcoder = transcoder

    async def trim(self, media: ClipMedia, trim_start: Optional[float] = None, trim_end: Optional[float] = None) -> TransformResult:
        window = TrimWindow.from_optional(trim_start, trim_end)

        total = await self.estimator.measure(media, self.transcoder)
        new_duration = window.remaining(total)
        if new_duration <= 0:
            raise InvalidArgumentError(
                f"Invalid trim parameters: resulting clip would be empty "
                f"({total:.3f}s - {window.trim_start}s - {window.trim_end}s)"
            )

        output = media_for_path(trimmed_output_path(media.path))

        if isinstance(media, RawClip):
            # Whole-file copy; keep it off the event loop
            size = await asyncio.get_running_loop().run_in_executor(
                None, self._slice_frames, media, output, window, total
            )
        else:
            size = await self._delegate(media, output, window, new_duration)

        logger.info(f"Trimmed {media.name} -> {output.name} ({new_duration:.3f}s, {size} bytes)")
        return TransformResult(output_path=output.path, duration_seconds=new_duration, size_bytes=size)

    def _slice_frames(self, media: RawClip, output: RawClip, window: TrimWindow, total: float) -> int:
        frame_size = self.geometry.frame_size
        start_frame = self.geometry.frame_at(window.trim_start)
        end_frame = self.geometry.frame_at(total - window.trim_end)

        source = read_whole(media.path)

        # Fixture clips can claim more frames than they hold; never read past the end.
        end_offset = min(end_frame * frame_size, self.geometry.frame_count(len(source)) * frame_size)
        start_offset = min(start_frame * frame_size, end_offset)
        buffer = bytearray(end_frame * frame_size - start_frame * frame_size)
        chunk = memoryview(source)[start_offset:end_offset]
        buffer[0:len(chunk)] = chunk

        return write_new(output.path, buffer)

    async def _delegate(self, media: ClipMedia, output: ClipMedia, window: TrimWindow, new_duration: float) -> int:
        if self.transcoder is None:
            raise InvalidArgumentError(f"No transcoder configured for non-raw clip {media.name}")

        request = TranscodeRequest(
            source=media,
            output=output,
            start_seconds=window.trim_start if window.trim_start else None,
            duration_seconds=new_duration if window.trim_end else None
        )
        # Outcome (success or DelegateFailureError) propagates untouched.
        await self.transcoder.transcode(request)
        return file_size(output.path)
