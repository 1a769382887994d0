import logging

from config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # uvicorn installs its own handlers; keep its access log quiet since
    # main.py logs every request already
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
