import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level=logging.INFO, log_file=None):
    """Configure root logging; `log_level` may be a level name from config."""
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)


def setup_logging_from_config(config):
    """Configure logging from the [logging] section (level, file) of a ConfigManager."""
    setup_logging(config.logging_level, config.logging_file)


def get_logger(name):
    return logging.getLogger(name)
