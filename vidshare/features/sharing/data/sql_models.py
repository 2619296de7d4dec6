import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects.postgresql import UUID
from vidshare.core.database.base import Base

def utc_now():
    return datetime.now(timezone.utc)

class ShareLinkModel(Base):
    """
    A time-limited download capability for one video.

    video_id is a lookup-only reference (no ForeignKey):
    a share link never keeps a video alive.
    """
    __tablename__ = "share_links"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    video_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    token = Column(String, nullable=False, unique=True, index=True)

    # Always written in UTC
    expiry_timestamp = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)
