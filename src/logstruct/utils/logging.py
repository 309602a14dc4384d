import logging
import sys

# ANSI escape sequences for coloring
RESET = "\033[0m"
COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[95m",  # Magenta
}


# Custom formatter to add color to log levels
class ColoredFormatter(logging.Formatter):
    def format(self, record):
        log_color = COLORS.get(record.levelname, RESET)
        record.levelname = f"{log_color}{record.levelname}{RESET}"
        return super().format(record)


def get_logger():
    return logging.getLogger("logstruct")


def setup_logger(level=logging.WARNING, stream=None):
    logger = get_logger()
    logger.setLevel(level)

    # stdout carries the tree dump, diagnostics go to stderr
    stream_handler = logging.StreamHandler(
        stream if stream is not None else sys.stderr
    )
    stream_handler.setLevel(level)

    formatter = ColoredFormatter("%(levelname)s - %(message)s")
    stream_handler.setFormatter(formatter)

    # Avoid stacking handlers when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(stream_handler)
    return logger
