import logging

import uvicorn
from dotenv import load_dotenv

from .app import SERVICE_NAME, create_app
from .settings import load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> None:
    load_dotenv()
    settings = load_settings()

    logging.basicConfig(level=settings.server.log_level, format=LOG_FORMAT)
    logger = logging.getLogger(SERVICE_NAME)

    app = create_app(settings)
    logger.info(
        "ElevenLabs STT listening on port %s (model=%s, language=%s, provider=%s)",
        settings.server.port,
        settings.asr.elevenlabs.model_id,
        settings.asr.elevenlabs.language_code,
        app.state.asr_service.provider.name,
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_level=settings.server.log_level.lower())


if __name__ == "__main__":
    main()
