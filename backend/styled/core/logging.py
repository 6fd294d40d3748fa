import logging
from typing import Optional

from styled.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    chosen = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, chosen, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    for noisy in ["urllib3", "httpx", "cloudinary"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)
