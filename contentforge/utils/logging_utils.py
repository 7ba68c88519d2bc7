# contentforge/utils/logging_utils.py
import logging
import os
from logging.handlers import RotatingFileHandler
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _rotating_handler(log_dir, filename, formatter):
    handler = RotatingFileHandler(
        os.path.join(log_dir, filename),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(app=None, log_level=logging.INFO, log_dir=None):
    """
    Route the service's logs to stdout and app.log, with OpenAI, NewsAPI and
    Hugging Face traffic also written to external.log
    """
    if log_dir is None:
        log_dir = app.config.get('LOG_DIR', 'logs') if app else 'logs'
    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    app_logger = logging.getLogger('contentforge')
    app_logger.setLevel(log_level)
    app_logger.handlers = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    app_logger.addHandler(console)
    app_logger.addHandler(_rotating_handler(log_dir, 'app.log', formatter))

    # Children of contentforge.external still propagate to app.log
    external_logger = logging.getLogger('contentforge.external')
    external_logger.setLevel(log_level)
    external_logger.handlers = []
    external_logger.addHandler(_rotating_handler(log_dir, 'external.log', formatter))

    if app:
        # Flask names its logger after the import name, so this is usually app_logger
        if app.logger is not app_logger:
            app.logger.handlers = list(app_logger.handlers)
        app.logger.setLevel(log_level)
        if not app.debug:
            app.logger.info(f"Logging to {os.path.abspath(log_dir)}")

    return {
        'app_logger': app_logger,
        'external_logger': external_logger
    }
