# File: vidshare/core/common/enums.py

from enum import Enum, unique

@unique
class ClipEncoding(str, Enum):
    RAW = "raw"
    CONTAINER = "container"

@unique
class ClipOrigin(str, Enum):
    UPLOAD = "upload"
    TRIM = "trim"
    MERGE = "merge"
