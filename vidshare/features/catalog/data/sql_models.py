import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, BigInteger, Float, DateTime, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from vidshare.core.database.base import Base
from vidshare.core.common.enums import ClipOrigin

def utc_now():
    return datetime.now(timezone.utc)

class ClipModel(Base):
    """
    One stored video artifact. Rows are insert-only:
    uploads, trims and merges each add a new row and never touch existing ones.
    """
    __tablename__ = "videos"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    filename = Column(String, nullable=False)
    filepath = Column(String, nullable=False, unique=True)
    size = Column(BigInteger, nullable=False)
    duration = Column(Float, nullable=False)

    origin = Column(SQLEnum(ClipOrigin), nullable=False, default=ClipOrigin.UPLOAD)
    created_at = Column(DateTime(timezone=True), default=utc_now)
