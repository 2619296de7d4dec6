from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID
from .models import ShareGrant

class IShareLinkRepository(ABC):
    @abstractmethod
    def add_link(self, token: str, clip_id: UUID, expires_at: datetime) -> None:
        """Persists the (token, clip, expiry) tuple as one row."""
        pass

    @abstractmethod
    def get_by_token(self, token: str) -> Optional[ShareGrant]:
        """
        Raw lookup, expired or not.
        Expiry is judged by the caller against its own clock.
        """
        pass
