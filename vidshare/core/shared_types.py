from dataclasses import dataclass
from pathlib import Path
from typing import Union

from vidshare.core.common.enums import ClipEncoding

RAW_SUFFIX = ".raw"

@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing a media file on the filesystem.
    Encapsulates path validation and directory creation.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() == "." or str(self.path).strip() == "":
             raise ValueError("File path cannot be empty.")

    @property
    def name(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.exists()

    def ensure_parent_dir(self) -> None:
        """Creates the directory structure for this file if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

@dataclass(frozen=True)
class RawClip(MediaFile):
    """Headerless RGB24 frames in the fixed raw geometry."""
    encoding = ClipEncoding.RAW

@dataclass(frozen=True)
class ContainerClip(MediaFile):
    """Anything else (mp4, mov...). Opaque to us, handed to the transcoder."""
    encoding = ClipEncoding.CONTAINER

ClipMedia = Union[RawClip, ContainerClip]

def media_for_path(path) -> ClipMedia:
    """Resolves the raw/container variant once, from the filename suffix."""
    path = Path(path)
    if path.suffix.lower() == RAW_SUFFIX:
        return RawClip(path)
    return ContainerClip(path)
