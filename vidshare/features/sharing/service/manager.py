import logging
import mimetypes
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from vidshare.core.config.settings import settings
from vidshare.core.common.enums import ClipEncoding
from vidshare.core.common.errors import InvalidArgumentError, NotFoundError
from vidshare.features.catalog.data.repository import SqlCatalogRepo
from vidshare.features.catalog.domain.interfaces import ICatalogRepository
from vidshare.features.catalog.domain.models import Clip

from ..data.repository import SqlShareLinkRepo
from ..domain.interfaces import IShareLinkRepository
from ..domain.models import ShareGrant, SharedDownload

logger = logging.getLogger(__name__)

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class ShareTokenManager:
    """
    Issues and checks expiring share links.
    Expiry is evaluated on every resolve against `clock`; nothing is cached.
    """

    def __init__(self,
                 catalog: Optional[ICatalogRepository] = None,
                 links: Optional[IShareLinkRepository] = None,
                 clock: Callable[[], datetime] = utc_now):
        self.catalog = catalog or SqlCatalogRepo()
        self.links = links or SqlShareLinkRepo()
        self.clock = clock

    def issue(self, clip_id, ttl_hours: Optional[float] = None) -> ShareGrant:
        if ttl_hours is None:
            ttl_hours = settings.DEFAULT_SHARE_TTL_HOURS
        if ttl_hours <= 0:
            raise InvalidArgumentError(f"Share link lifetime must be positive, got {ttl_hours} hours")

        clip = self.catalog.get_clip(clip_id)
        if clip is None:
            raise NotFoundError(f"Video with ID {clip_id} not found")

        now = self.clock()
        token = self._new_token(now)
        expires_at = now + timedelta(hours=ttl_hours)

        self.links.add_link(token, clip.id, expires_at)
        logger.info(f"Share link issued for clip {clip.id}, expires {expires_at.isoformat()}")

        return ShareGrant(
            token=token,
            clip_id=clip.id,
            expires_at=expires_at,
            share_url=f"{settings.SHARE_URL_PREFIX}{token}"
        )

    def resolve(self, token: str) -> Clip:
        grant = self.links.get_by_token(token)
        if grant is None or not grant.is_valid_at(self.clock()):
            raise NotFoundError("Share link not found or expired")

        clip = self.catalog.get_clip(grant.clip_id)
        if clip is None:
            raise NotFoundError(f"Shared video {grant.clip_id} no longer exists")
        return clip

    def open_download(self, token: str) -> SharedDownload:
        clip = self.resolve(token)
        if not clip.media.exists():
            logger.error(f"Clip {clip.id} is cataloged but its file is missing: {clip.path}")
            raise NotFoundError(f"Video file not found for clip {clip.id}")

        if clip.encoding == ClipEncoding.RAW:
            content_type = "video/raw"
        else:
            content_type = mimetypes.guess_type(clip.filename)[0] or "application/octet-stream"

        return SharedDownload(filename=clip.filename, path=clip.path, content_type=content_type)

    def _new_token(self, now: datetime) -> str:
        # Timestamp + random suffix: unique in practice, and not guessable.
        return f"{int(now.timestamp() * 1000)}-{secrets.token_urlsafe(16)}"
