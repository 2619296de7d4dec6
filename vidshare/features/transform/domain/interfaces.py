from abc import ABC, abstractmethod
from pathlib import Path
from .models import TranscodeRequest

class ITranscoder(ABC):
    """
    Contract for the external, non-raw-aware media tool.
    Abstracts away the underlying binary (FFmpeg) from the transform engine.
    """

    @abstractmethod
    async def transcode(self, request: TranscodeRequest) -> None:
        """
        Cuts request.source into request.output. Completes or fails exactly once.

        Raises:
            DelegateFailureError: carrying the tool's message unmodified.
        """
        pass

    @abstractmethod
    async def probe_duration(self, path: Path) -> float:
        """
        Asks the tool for the container's own duration, in seconds.

        Raises:
            DelegateFailureError: If the tool cannot read the file.
        """
        pass
