import logging

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings) -> None:
    """Configure le logger racine une seule fois pour tout le process."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    # uvicorn garde ses propres handlers, on aligne juste le niveau
    logging.getLogger("uvicorn").setLevel(settings.LOG_LEVEL)
