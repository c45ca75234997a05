import logging
import os
import random
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import settings
from .console import InteractionLoop
from .globals import character_table
from .options import OptionGenerator
from .session import QuizSession

logger = logging.getLogger(__name__)


# --- Logging Setup ---
def setup_logging():
    package_logger = logging.getLogger(settings.PROJECT_NAME)
    if package_logger.handlers:
        return
    package_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    # Keep the console transcript free of log lines.
    package_logger.propagate = False

    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    try:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        # The quiz runs without a log file when the log directory is unusable.
        package_logger.addHandler(logging.NullHandler())
        return

    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    package_logger.addHandler(file_handler)


# --- Session Factory ---
def create_session(rng: Optional[random.Random] = None) -> QuizSession:
    rng = rng or random.Random()
    generator = OptionGenerator(character_table, rng)
    return QuizSession(character_table, generator, rng)


def main() -> int:
    setup_logging()
    try:
        InteractionLoop(create_session()).run()
    except Exception:
        logger.exception("Quiz stopped on an internal error")
        raise
    return 0
