import logging
from rich.console import Console
from rich.logging import RichHandler
from yt_transcript.config import settings

def setup_logger(name: str = "yt_transcript") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)
    if not logger.handlers:
        # stderr, so transcripts written to stdout stay clean
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    return logger

logger = setup_logger()
