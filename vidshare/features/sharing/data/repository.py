from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from vidshare.core.common.errors import InvalidArgumentError, StorageIOError
from vidshare.core.config.settings import settings
from vidshare.core.database.connection import SessionLocal
from .sql_models import ShareLinkModel
from ..domain.interfaces import IShareLinkRepository
from ..domain.models import ShareGrant, as_utc

class SqlShareLinkRepo(IShareLinkRepository):
    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def add_link(self, token: str, clip_id: UUID, expires_at: datetime) -> None:
        with self.session_factory() as db:
            try:
                db.add(ShareLinkModel(
                    video_id=clip_id,
                    token=token,
                    expiry_timestamp=as_utc(expires_at)
                ))
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise InvalidArgumentError("Share token already issued") from e
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageIOError(f"Could not store share link for clip {clip_id}") from e

    def get_by_token(self, token: str) -> Optional[ShareGrant]:
        with self.session_factory() as db:
            row = db.query(ShareLinkModel).filter(ShareLinkModel.token == token).first()
            if not row:
                return None
            return ShareGrant(
                token=row.token,
                clip_id=row.video_id,
                expires_at=as_utc(row.expiry_timestamp),
                share_url=f"{settings.SHARE_URL_PREFIX}{row.token}"
            )
