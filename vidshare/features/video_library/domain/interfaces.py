from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence
from .models import ClipSummary

class IVideoLibrary(ABC):
    """
    Contract the request layer talks to.
    Every successful call inserts exactly one catalog row; nothing is updated or deleted.
    """

    @abstractmethod
    async def upload(self, stored_path: Path) -> ClipSummary:
        """
        Catalogs a freshly stored file.

        Raises:
            InvalidArgumentError: If the clip is longer than the allowed maximum
                (the file is deleted and no row is created).
            NotFoundError: If the file does not exist.
        """
        pass

    @abstractmethod
    async def trim(self, clip_id, trim_start: Optional[float] = None, trim_end: Optional[float] = None) -> ClipSummary:
        """
        Cuts seconds off the head and/or tail of a cataloged clip into a new clip.

        Raises:
            NotFoundError: If clip_id does not resolve.
            InvalidArgumentError: If the window is not positive or leaves nothing.
            DelegateFailureError: If the transcoder fails on a non-raw clip.
        """
        pass

    @abstractmethod
    async def merge(self, clip_ids: Sequence) -> ClipSummary:
        """
        Concatenates cataloged raw clips, in order, into a new clip.

        Raises:
            InvalidArgumentError: With fewer than two ids.
            NotFoundError: Naming the first id that does not resolve.
        """
        pass
