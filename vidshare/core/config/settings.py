# File: vidshare/core/config/settings.py

import os
import shutil
from pathlib import Path


class Settings:
    # --- Paths ---
    # vidshare/core/config/settings.py -> vidshare/core/config -> vidshare/core -> vidshare -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = Path(os.getenv("VIDSHARE_DATA_DIR", str(BASE_DIR / "data")))
    UPLOADS_DIR: Path = DATA_DIR / "uploads"

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "vidshare_db")

    @property
    def DATABASE_URL(self) -> str:
        # SQLite only when explicitly requested (test runs, local hacking).
        if os.getenv("USE_SQLITE", "false").lower() == "true":
            sqlite_path = os.getenv("SQLITE_PATH", "./test_vidshare.db")
            return f"sqlite:///{sqlite_path}"

        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # --- External Tools ---
    # Auto-detect ffmpeg/ffprobe or use env var
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")
    FFPROBE_BINARY: str = os.getenv("FFPROBE_BINARY_PATH", shutil.which("ffprobe") or "ffprobe")

    # --- Raw Video Geometry (RGB24, no container) ---
    RAW_VIDEO_WIDTH: int = int(os.getenv("RAW_VIDEO_WIDTH", "320"))
    RAW_VIDEO_HEIGHT: int = int(os.getenv("RAW_VIDEO_HEIGHT", "240"))
    RAW_VIDEO_FPS: int = int(os.getenv("RAW_VIDEO_FPS", "30"))

    # --- Upload Limits ---
    MAX_VIDEO_DURATION_SECONDS: float = float(os.getenv("MAX_VIDEO_DURATION_SECONDS", "300"))
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(1024 * 1024 * 1024)))

    # --- Share Links ---
    DEFAULT_SHARE_TTL_HOURS: float = float(os.getenv("DEFAULT_SHARE_TTL_HOURS", "24"))
    SHARE_URL_PREFIX: str = os.getenv("SHARE_URL_PREFIX", "/videos/share/")


settings = Settings()
