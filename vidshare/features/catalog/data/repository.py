import logging
from typing import Optional
from uuid import UUID
from pathlib import Path
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from vidshare.core.common.errors import InvalidArgumentError, StorageIOError
from vidshare.core.database.connection import SessionLocal
from vidshare.core.shared_types import media_for_path
from .sql_models import ClipModel
from ..domain.interfaces import ICatalogRepository
from ..domain.models import Clip, NewClip

logger = logging.getLogger(__name__)

def coerce_clip_id(clip_id) -> Optional[UUID]:
    """Accepts a UUID or its string form. Anything else can never resolve."""
    if isinstance(clip_id, UUID):
        return clip_id
    try:
        return UUID(str(clip_id))
    except ValueError:
        return None

def to_domain(row: ClipModel) -> Clip:
    return Clip(
        id=row.id,
        filename=row.filename,
        media=media_for_path(row.filepath),
        size_bytes=row.size,
        duration_seconds=row.duration,
        origin=row.origin
    )

class SqlCatalogRepo(ICatalogRepository):
    def __init__(self, session_factory=SessionLocal):
        # In a full DI framework, this would be injected.
        self.session_factory = session_factory

    def get_clip(self, clip_id) -> Optional[Clip]:
        key = coerce_clip_id(clip_id)
        if key is None:
            return None
        with self.session_factory() as db:
            row = db.get(ClipModel, key)
            return to_domain(row) if row else None

    def add_clip(self, new_clip: NewClip) -> Clip:
        """
        Transactional logic: one row, fully populated, or nothing.
        """
        with self.session_factory() as db:
            try:
                row = ClipModel(
                    filename=new_clip.filename,
                    filepath=str(Path(new_clip.filepath)),
                    size=new_clip.size_bytes,
                    duration=new_clip.duration_seconds,
                    origin=new_clip.origin
                )
                db.add(row)
                db.commit()
                db.refresh(row)

                logger.info(f"Cataloged {row.origin.value} clip {row.id} ({row.filename})")
                return to_domain(row)
            except IntegrityError as e:
                db.rollback()
                raise InvalidArgumentError(f"Clip file is already cataloged: {new_clip.filepath}") from e
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Catalog insert failed for {new_clip.filename}: {e}")
                raise StorageIOError(f"Could not catalog clip {new_clip.filename}") from e
