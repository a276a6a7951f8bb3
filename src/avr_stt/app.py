import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .asr import AsrFailure, AsrService
from .audio import AudioIngestor, IngestLimits, IngestRejection
from .audio.ingest import PAYLOAD_TOO_LARGE_MESSAGE
from .settings import Settings, load_settings

SERVICE_NAME = "avr-stt-elevenlabs"
PROCESSING_ERROR_MESSAGE = "Error processing audio"

logger = logging.getLogger(__name__)


def _declared_length(request: Request) -> Optional[int]:
    value = request.headers.get("content-length")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def _read_body(request: Request, limit: int) -> bytes:
    # Stop one byte past the limit so oversized bodies are never fully buffered.
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            break
    return bytes(body)


def create_app(settings: Optional[Settings] = None, *, asr_service: Optional[AsrService] = None) -> FastAPI:
    """Build the FastAPI application.

    Settings are read from the environment when not supplied. The ASR service
    defaults to the provider named in ``settings.asr.provider``; tests pass
    their own service to swap the provider out.
    """

    cfg = settings or load_settings()
    service = asr_service or AsrService.from_settings(cfg.asr)
    ingestor = AudioIngestor(limits=IngestLimits(max_bytes=cfg.server.max_body_bytes))

    app = FastAPI(title=SERVICE_NAME)
    app.state.settings = cfg
    app.state.asr_service = service
    app.state.audio_ingestor = ingestor

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "provider": service.provider.name,
        }

    @app.post("/transcribe")
    async def transcribe(request: Request) -> JSONResponse:
        logger.info("transcribe.received path=/transcribe")

        declared = _declared_length(request)
        if declared is not None and ingestor.exceeds_limit(declared):
            logger.error("transcribe.rejected content_length=%s limit=%s", declared, ingestor.limits.max_bytes)
            return JSONResponse({"message": PAYLOAD_TOO_LARGE_MESSAGE}, status_code=413)

        body = await _read_body(request, ingestor.limits.max_bytes)
        audio = await ingestor.from_bytes(
            data=body,
            content_type=request.headers.get("content-type"),
            sample_rate=request.headers.get("x-sample-rate"),
            audio_format=request.headers.get("x-audio-format"),
        )
        if isinstance(audio, IngestRejection):
            logger.error(
                "transcribe.rejected status=%s reason=%s x_sample_rate=%r",
                audio.status_code,
                audio.message,
                request.headers.get("x-sample-rate"),
            )
            return JSONResponse({"message": audio.message}, status_code=audio.status_code)

        logger.info(
            "transcribe.audio size_kb=%.2f sample_rate=%sHz format=%s",
            audio.size_kb,
            audio.sample_rate,
            audio.audio_format,
        )

        outcome = await service.transcribe_request(audio)
        if isinstance(outcome, AsrFailure):
            logger.error("transcribe.failed kind=%s error=%s", outcome.kind.value, outcome.message)
            return JSONResponse(
                {"message": PROCESSING_ERROR_MESSAGE, "error": outcome.message},
                status_code=500,
            )

        text = outcome.text or ""
        logger.info("transcribe.done transcription=%s", text or "No text transcribed")
        return JSONResponse({"transcription": text})

    return app
