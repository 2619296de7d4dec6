# File: tests/conftest.py

import pytest
import os
import sys
import tempfile
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy_utils import database_exists, create_database

# Make `vidshare` importable when pytest runs from the repo root
sys.path.append(os.getcwd())

# Settings read the environment at import time, so pick the DB first
os.environ.setdefault("USE_SQLITE", "true")
os.environ.setdefault("SQLITE_PATH", str(Path(tempfile.gettempdir()) / "vidshare_test.db"))

from vidshare.core.config.settings import settings
from vidshare.core.common.errors import DelegateFailureError
from vidshare.features.transform.domain.interfaces import ITranscoder
from vidshare.features.transform.domain.models import FrameGeometry

# Separate engine so tests can inspect rows outside the repositories
TEST_ENGINE = create_engine(settings.DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=TEST_ENGINE)


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Creates the vidshare test database and its two tables once.
    """
    if not database_exists(TEST_ENGINE.url):
        create_database(TEST_ENGINE.url)

    # Registers ClipModel and ShareLinkModel on Base
    from vidshare.core.database.base import Base
    import vidshare.features.catalog.data.sql_models
    import vidshare.features.sharing.data.sql_models

    Base.metadata.create_all(bind=TEST_ENGINE)

    yield


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Empties videos and share_links before each test.
    """
    from vidshare.core.database.base import Base

    Base.metadata.create_all(bind=TEST_ENGINE)

    # share_links holds no FK to videos, so any order works on SQLite and Postgres alike
    with TEST_ENGINE.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())

    yield


@pytest.fixture(scope="function")
def db_session():
    """
    Read-only view of the catalog for assertions.
    """
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


# --- Media fixtures ---

@pytest.fixture
def tiny_geometry():
    """4x2 RGB24 @ 10 fps: 24 bytes per frame, so clips stay small."""
    return FrameGeometry(width=4, height=2, bytes_per_pixel=3, fps=10)


@pytest.fixture
def make_raw_clip(tmp_path):
    """
    Factory: writes a raw clip whose frame N is filled with byte N % 256,
    so slices can be checked frame by frame.
    """
    def _make(name: str, frames: int, geometry: FrameGeometry, extra_bytes: int = 0, directory: Path = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        payload = b"".join(bytes([i % 256]) * geometry.frame_size for i in range(frames))
        path.write_bytes(payload + b"\xff" * extra_bytes)
        return path
    return _make


class FakeTranscoder(ITranscoder):
    """Stands in for FFmpeg: records requests, writes a small output file."""

    def __init__(self, duration: float = 10.0, error: str = None):
        self.duration = duration
        self.error = error
        self.requests = []
        self.probed = []

    async def transcode(self, request):
        self.requests.append(request)
        if self.error:
            raise DelegateFailureError(f"Error processing video: {self.error}", self.error)
        request.output.ensure_parent_dir()
        request.output.path.write_bytes(b"transcoded-output")

    async def probe_duration(self, path):
        self.probed.append(path)
        return self.duration


@pytest.fixture
def fake_transcoder():
    return FakeTranscoder()


@pytest.fixture
def failing_transcoder():
    return FakeTranscoder(error="moov atom not found\nInvalid data found when processing input")
