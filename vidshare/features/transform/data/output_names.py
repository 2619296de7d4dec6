import secrets
import time
from pathlib import Path

def unique_stamp() -> str:
    """Millisecond timestamp plus a random component, e.g. '1718035200123-9f3a1c'."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(3)}"

def trimmed_output_path(source: Path) -> Path:
    # clip.raw -> clip-trimmed-<stamp>.raw, next to the source
    return source.with_name(f"{source.stem}-trimmed-{unique_stamp()}{source.suffix}")

def merged_output_path(directory: Path) -> Path:
    return directory / f"merged-{unique_stamp()}.raw"
