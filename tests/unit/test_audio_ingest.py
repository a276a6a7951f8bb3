import pytest

from avr_stt.audio.ingest import (
    EMPTY_AUDIO_MESSAGE,
    INVALID_SAMPLE_RATE_MESSAGE,
    PAYLOAD_TOO_LARGE_MESSAGE,
    AudioIngestor,
    IngestLimits,
    is_raw_audio,
    parse_sample_rate,
)
from avr_stt.audio.types import DEFAULT_AUDIO_FORMAT, AudioRequest, HeaderStatus, IngestRejection

RAW = "application/octet-stream"


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_sample_rate_absent(raw):
    header = parse_sample_rate(raw)

    assert header.status is HeaderStatus.ABSENT
    assert header.value is None


@pytest.mark.parametrize(
    "raw",
    [
        "abc",
        "k8000",
        ".5",
        "-8000",
        "0",
        "-0",
        "+",
        "٨٠٠٠",
        "2147483648",
        "99999999999999999999",
    ],
)
def test_parse_sample_rate_invalid(raw):
    header = parse_sample_rate(raw)

    assert header.status is HeaderStatus.INVALID
    assert header.raw == raw
    assert header.value is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("8000", 8000),
        (" 16000 ", 16000),
        ("44100", 44100),
        ("16000.0", 16000),
        ("8000abc", 8000),
        ("8k", 8),
        ("+8000", 8000),
        ("2147483647", 2147483647),
    ],
)
def test_parse_sample_rate_valid(raw, expected):
    header = parse_sample_rate(raw)

    assert header.status is HeaderStatus.VALID
    assert header.value == expected


@pytest.mark.parametrize(
    "content_type,expected",
    [
        ("application/octet-stream", True),
        ("Application/Octet-Stream; charset=binary", True),
        ("audio/wav", False),
        ("application/json", False),
        ("", False),
        (None, False),
    ],
)
def test_is_raw_audio(content_type, expected):
    assert is_raw_audio(content_type) is expected


@pytest.mark.asyncio
async def test_ingestor_builds_audio_request():
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=10))

    audio = await ingestor.from_bytes(data=b"\x00\x01\x02\x03", content_type=RAW, sample_rate="8000")

    assert isinstance(audio, AudioRequest)
    assert audio.pcm == b"\x00\x01\x02\x03"
    assert audio.sample_rate == 8000
    assert audio.audio_format == DEFAULT_AUDIO_FORMAT


@pytest.mark.asyncio
async def test_ingestor_keeps_audio_format_label():
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=10))

    audio = await ingestor.from_bytes(data=b"\x00\x01", content_type=RAW, sample_rate="16000", audio_format="audio/l16")

    assert isinstance(audio, AudioRequest)
    assert audio.audio_format == "audio/l16"


@pytest.mark.asyncio
async def test_ingestor_rejects_empty_body_before_sample_rate():
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=10))

    rejection = await ingestor.from_bytes(data=b"", content_type=RAW, sample_rate=None)

    assert rejection == IngestRejection(status_code=400, message=EMPTY_AUDIO_MESSAGE)


@pytest.mark.asyncio
async def test_ingestor_treats_other_content_types_as_empty():
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=10))

    rejection = await ingestor.from_bytes(data=b"\x00\x01", content_type="audio/wav", sample_rate="8000")

    assert rejection == IngestRejection(status_code=400, message=EMPTY_AUDIO_MESSAGE)


@pytest.mark.asyncio
@pytest.mark.parametrize("sample_rate", [None, "abc", "0"])
async def test_ingestor_rejects_bad_sample_rate(sample_rate):
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=10))

    rejection = await ingestor.from_bytes(data=b"\x00\x01", content_type=RAW, sample_rate=sample_rate)

    assert rejection == IngestRejection(status_code=400, message=INVALID_SAMPLE_RATE_MESSAGE)


@pytest.mark.asyncio
async def test_ingestor_enforces_size_limit():
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=3))

    rejection = await ingestor.from_bytes(data=b"1234", content_type=RAW, sample_rate="8000")

    assert rejection == IngestRejection(status_code=413, message=PAYLOAD_TOO_LARGE_MESSAGE)
