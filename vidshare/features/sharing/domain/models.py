from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from uuid import UUID

def as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything we store is UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)

@dataclass(frozen=True)
class ShareGrant:
    """
    An issued share link. Immutable: there is no renewal and no revocation.
    """
    token: str
    clip_id: UUID
    expires_at: datetime
    share_url: str

    def is_valid_at(self, now: datetime) -> bool:
        """Valid strictly before expiry."""
        return as_utc(now) < as_utc(self.expires_at)

    def to_dict(self) -> dict:
        return {"shareUrl": self.share_url, "expiryTimestamp": as_utc(self.expires_at).isoformat()}

@dataclass(frozen=True)
class SharedDownload:
    """Everything the request layer needs to stream a shared video."""
    filename: str
    path: Path
    content_type: str

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'
