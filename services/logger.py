import logging

from utils import config

LOG_FORMAT = "[%(asctime)s] %(levelname)s – %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the root logger once per process."""
    logging.basicConfig(
        filename=log_file or config.LOG_FILE,
        level=getattr(logging, level or config.LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
    )


def log_event(name: str, details: dict | None = None):
    logging.getLogger("job_portal.events").info("%s – %s", name, details or {})
