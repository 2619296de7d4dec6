import asyncio
import logging
from pathlib import Path
from typing import List
from vidshare.core.config.settings import settings
from vidshare.core.common.errors import DelegateFailureError, NotFoundError
from ..domain.interfaces import ITranscoder
from ..domain.models import TranscodeRequest

logger = logging.getLogger(__name__)

class FFmpegTranscoder(ITranscoder):
    """
    Concrete implementation of ITranscoder using FFmpeg / FFprobe.
    Each call is one subprocess awaited at a single suspension point:
    no progress, no cancellation, no retry.
    """

    def __init__(self, ffmpeg_binary: str = None, ffprobe_binary: str = None):
        self.ffmpeg_binary = ffmpeg_binary or settings.FFMPEG_BINARY
        self.ffprobe_binary = ffprobe_binary or settings.FFPROBE_BINARY

    def build_trim_command(self, request: TranscodeRequest) -> List[str]:
        # -y: Overwrite output files without asking (the name is unique anyway)
        # -ss: Start time (seeking), only when cutting the head
        # -t: Duration of the output, only when cutting the tail
        # -c:v libx264 / -c:a aac: Re-encode so the cut is frame accurate
        cmd = [self.ffmpeg_binary, "-y"]
        if request.start_seconds:
            cmd += ["-ss", str(request.start_seconds)]
        cmd += ["-i", str(request.source.path)]
        if request.duration_seconds:
            cmd += ["-t", str(request.duration_seconds)]
        cmd += [
            "-c:v", "libx264",
            "-c:a", "aac",
            str(request.output.path)
        ]
        return cmd

    def build_probe_command(self, path: Path) -> List[str]:
        return [
            self.ffprobe_binary, "-v", "error", "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1", str(path)
        ]

    async def transcode(self, request: TranscodeRequest) -> None:
        if not request.source.exists():
            raise NotFoundError(f"Video file not found: {request.source.path}")

        request.output.ensure_parent_dir()
        cmd = self.build_trim_command(request)

        logger.info(f"Executing FFmpeg Trim: {' '.join(cmd)}")
        await self._run(cmd, "Error processing video")

    async def probe_duration(self, path: Path) -> float:
        cmd = self.build_probe_command(path)
        stdout = await self._run(cmd, "Error probing video")
        try:
            return float(stdout.strip())
        except ValueError as e:
            raise DelegateFailureError(f"Error probing video: unreadable duration {stdout.strip()!r}", stdout) from e

    async def _run(self, cmd: List[str], failure_prefix: str) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            # Binary missing / not executable
            logger.error(f"Could not start {cmd[0]}: {e}")
            raise DelegateFailureError(f"{failure_prefix}: {e}", str(e)) from e

        stdout, stderr = await process.communicate()

        if process.returncode != 0:
            error_message = stderr.decode(errors="replace") if stderr else "Unknown FFmpeg error"
            logger.error(f"FFmpeg Failed. STDERR: {error_message}")
            raise DelegateFailureError(f"{failure_prefix}: {error_message}", error_message)

        return stdout.decode(errors="replace") if stdout else ""
