import asyncio
import pytest
from vidshare.core.common.errors import DelegateFailureError, InvalidArgumentError, NotFoundError
from vidshare.core.shared_types import media_for_path
from vidshare.features.transform.data.duration import DurationEstimator
from vidshare.features.transform.data.trimmer import FrameTrimmer

@pytest.fixture
def trimmer(tiny_geometry, fake_transcoder):
    return FrameTrimmer(tiny_geometry, DurationEstimator(tiny_geometry), fake_transcoder)

def run_trim(trimmer, path, start=None, end=None):
    return asyncio.run(trimmer.trim(media_for_path(path), start, end))

def test_raw_trim_keeps_whole_frames(trimmer, tiny_geometry, make_raw_clip):
    # 50 frames @ 10fps = 5.0s
    source = make_raw_clip("clip.raw", frames=50, geometry=tiny_geometry)
    original_bytes = source.read_bytes()

    result = run_trim(trimmer, source, start=1, end=1)

    # frames 10..40
    data = result.output_path.read_bytes()
    assert len(data) == 30 * tiny_geometry.frame_size
    assert result.size_bytes == len(data)
    assert data == original_bytes[10 * 24:40 * 24]
    assert data[0] == 10 and data[-1] == 39
    assert result.duration_seconds == pytest.approx(3.0)

    # Source is never touched
    assert source.read_bytes() == original_bytes

def test_fractional_cut_rounds_down_to_frame(trimmer, tiny_geometry, make_raw_clip):
    source = make_raw_clip("clip.raw", frames=50, geometry=tiny_geometry)

    result = run_trim(trimmer, source, start=0.25, end=None)

    # start_frame = floor(2.5) = 2, end_frame = 50
    data = result.output_path.read_bytes()
    assert len(data) == 48 * tiny_geometry.frame_size
    assert data[0] == 2
    assert result.duration_seconds == pytest.approx(4.75)

def test_output_name_and_location(trimmer, tiny_geometry, make_raw_clip):
    source = make_raw_clip("beach.raw", frames=20, geometry=tiny_geometry)

    result = run_trim(trimmer, source, end=0.5)

    assert result.output_path.parent == source.parent
    assert result.output_path.name.startswith("beach-trimmed-")
    assert result.output_path.suffix == ".raw"

def test_repeated_trims_never_collide(trimmer, tiny_geometry, make_raw_clip):
    source = make_raw_clip("clip.raw", frames=20, geometry=tiny_geometry)

    first = run_trim(trimmer, source, start=0.5)
    second = run_trim(trimmer, source, start=0.5)

    assert first.output_path != second.output_path

def test_missing_trim_amount_rejected(trimmer, tiny_geometry, make_raw_clip):
    source = make_raw_clip("clip.raw", frames=20, geometry=tiny_geometry)
    with pytest.raises(InvalidArgumentError, match="positive trim amount"):
        run_trim(trimmer, source)

def test_empty_result_rejected(trimmer, tiny_geometry, make_raw_clip):
    source = make_raw_clip("clip.raw", frames=20, geometry=tiny_geometry)
    with pytest.raises(InvalidArgumentError, match="would be empty"):
        run_trim(trimmer, source, start=1, end=1)
    assert list(source.parent.glob("*-trimmed-*")) == []

def test_missing_source_is_not_found(trimmer, tmp_path):
    with pytest.raises(NotFoundError):
        run_trim(trimmer, tmp_path / "gone.raw", start=1)

def test_container_trim_is_delegated(trimmer, fake_transcoder, tmp_path):
    source = tmp_path / "talk.mp4"
    source.write_bytes(b"mp4 bytes")
    fake_transcoder.duration = 12.0

    result = run_trim(trimmer, source, start=2, end=3)

    request = fake_transcoder.requests[0]
    assert request.source.path == source
    assert request.start_seconds == 2
    assert request.duration_seconds == pytest.approx(7.0)
    assert request.output.path.name.startswith("talk-trimmed-")
    assert request.output.path.suffix == ".mp4"
    assert result.duration_seconds == pytest.approx(7.0)
    assert result.size_bytes == len(b"transcoded-output")

def test_container_head_only_trim_sends_no_duration(trimmer, fake_transcoder, tmp_path):
    source = tmp_path / "talk.mov"
    source.write_bytes(b"mov bytes")

    run_trim(trimmer, source, start=2)

    request = fake_transcoder.requests[0]
    assert request.start_seconds == 2
    assert request.duration_seconds is None

def test_delegate_failure_passes_through(tiny_geometry, failing_transcoder, tmp_path):
    # A fixture name gives a fixed duration, so no probe is needed
    source = tmp_path / "test-video-broken.mp4"
    source.write_bytes(b"garbage")
    trimmer = FrameTrimmer(tiny_geometry, DurationEstimator(tiny_geometry), failing_transcoder)

    with pytest.raises(DelegateFailureError) as exc_info:
        run_trim(trimmer, source, start=1)

    assert exc_info.value.detail == failing_transcoder.error
