import logging
import sys


def setup_logging(log_file=None, level=logging.INFO, debug=False):
    """
    Set up logging for the command-line tool.

    Args:
        log_file: Optional path to a log file. Console output is always on.
        level: Logging level (default: INFO).
        debug: If True, enables DEBUG level with file/line context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    if debug:
        logging.debug("DEBUG MODE ENABLED - Verbose logging active")
