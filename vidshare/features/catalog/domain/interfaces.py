from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
from uuid import UUID
from .models import Clip, NewClip

class ICatalogRepository(ABC):
    @abstractmethod
    def get_clip(self, clip_id: UUID) -> Optional[Clip]:
        """Point lookup by id. None when the id is unknown."""
        pass

    @abstractmethod
    def add_clip(self, new_clip: NewClip) -> Clip:
        """
        Inserts one fully populated row in its own transaction.
        Returns the stored Clip with its assigned id.
        """
        pass

class IUploadStore(ABC):
    @abstractmethod
    def stage(self, incoming: Path) -> Path:
        """
        Validates an incoming upload and moves it into upload storage.
        Returns: the stored absolute path.
        """
        pass

    @abstractmethod
    def discard(self, stored: Path) -> None:
        """Removes a stored upload that was rejected."""
        pass
