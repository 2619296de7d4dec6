import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from vidshare.core.config.settings import settings
from vidshare.core.common.enums import ClipOrigin
from vidshare.core.common.errors import InvalidArgumentError, NotFoundError, StorageIOError, VideoServiceError
from vidshare.core.shared_types import media_for_path
from vidshare.features.catalog.data.local_fs import LocalUploadStore
from vidshare.features.catalog.data.repository import SqlCatalogRepo
from vidshare.features.catalog.domain.interfaces import ICatalogRepository, IUploadStore
from vidshare.features.catalog.domain.models import Clip, NewClip
from vidshare.features.transform.data.raw_io import file_size
from vidshare.features.transform.domain.models import TransformResult
from vidshare.features.transform.service.api import TransformEngine

from ..domain.interfaces import IVideoLibrary
from ..domain.models import ClipSummary

logger = logging.getLogger(__name__)


class VideoLibrary(IVideoLibrary):
    """
    The Video Lifecycle Orchestrator.
    Runs a transform, then records its result as one new catalog row.
    No retries: transforms are not idempotent against partial writes,
    so a caller has to resubmit explicitly.
    """

    def __init__(self,
                 catalog: Optional[ICatalogRepository] = None,
                 engine: Optional[TransformEngine] = None,
                 uploads: Optional[IUploadStore] = None,
                 max_duration_seconds: Optional[float] = None):
        self.catalog = catalog or SqlCatalogRepo()
        self.engine = engine or TransformEngine()
        self.uploads = uploads or LocalUploadStore()
        self.max_duration_seconds = (
            max_duration_seconds if max_duration_seconds is not None else settings.MAX_VIDEO_DURATION_SECONDS
        )

    def get(self, clip_id) -> Clip:
        clip = self.catalog.get_clip(clip_id)
        if clip is None:
            raise NotFoundError(f"Video with ID {clip_id} not found")
        return clip

    async def upload_file(self, incoming_path: Path) -> ClipSummary:
        """Stages an incoming file into upload storage, then catalogs it."""
        stored_path = self.uploads.stage(Path(incoming_path))
        try:
            return await self.upload(stored_path)
        except VideoServiceError as e:
            if stored_path.exists():
                logger.error(f"Upload failed after staging, {stored_path} is now an orphaned file: {e.message}")
            raise

    async def upload(self, stored_path: Path) -> ClipSummary:
        media = media_for_path(stored_path)

        # 1. Duration (raw geometry, fixture name or the transcoder's probe)
        duration = await self.engine.measure(media)

        # 2. Enforce the ceiling before anything is cataloged
        if duration > self.max_duration_seconds:
            logger.info(f"Rejecting upload {media.name}: {duration:.3f}s > {self.max_duration_seconds}s")
            self._discard_rejected(media.path)
            raise InvalidArgumentError(
                f"Video duration exceeds maximum allowed length ({self.max_duration_seconds / 60:g} minutes)"
            )

        # 3. Persist
        clip = self.catalog.add_clip(NewClip(
            filename=media.name,
            filepath=media.path,
            size_bytes=file_size(media.path),
            duration_seconds=duration,
            origin=ClipOrigin.UPLOAD
        ))
        return ClipSummary.of(clip)

    async def trim(self, clip_id, trim_start: Optional[float] = None, trim_end: Optional[float] = None) -> ClipSummary:
        source = self.get(clip_id)
        logger.info(f"Trimming clip {source.id} (start={trim_start}, end={trim_end})")

        result = await self.engine.trimmer.trim(source.media, trim_start, trim_end)
        return self._record(result, ClipOrigin.TRIM)

    async def merge(self, clip_ids: Sequence) -> ClipSummary:
        if clip_ids is None or len(clip_ids) < 2:
            raise InvalidArgumentError("Must provide at least two video IDs to merge")

        # Resolve in order; the first unknown id aborts before any file is written
        sources: List[Clip] = [self.get(clip_id) for clip_id in clip_ids]
        logger.info(f"Merging clips {[str(c.id) for c in sources]}")

        result = await asyncio.get_running_loop().run_in_executor(
            None, self.engine.concatenator.merge, [clip.media for clip in sources]
        )
        return self._record(result, ClipOrigin.MERGE)

    def _record(self, result: TransformResult, origin: ClipOrigin) -> ClipSummary:
        try:
            clip = self.catalog.add_clip(NewClip(
                filename=result.filename,
                filepath=result.output_path,
                size_bytes=result.size_bytes,
                duration_seconds=result.duration_seconds,
                origin=origin
            ))
        except Exception:
            logger.exception(f"Catalog insert failed; {result.output_path} is now an orphaned file")
            raise
        return ClipSummary.of(clip)

    def _discard_rejected(self, path: Path) -> None:
        try:
            self.uploads.discard(path)
        except StorageIOError as e:
            # The rejection still stands; the leftover file is an anomaly for cleanup.
            logger.error(f"Rejected upload left on disk (orphaned file): {e}")
