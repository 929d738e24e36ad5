import logging

from wallet_api.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # uvicorn's own access log duplicates the request middleware
    logging.getLogger("uvicorn.access").disabled = True
