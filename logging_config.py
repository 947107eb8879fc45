"""
Log setup for the rover command line.

Rover results own stdout, so every log record is written to stderr and,
when asked for, copied into a log file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Attach the stderr handler (and the optional file handler) to the root logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Threshold for records from the parsing, rover, grid and simulation modules.
        log_file: Path of a log file to overwrite with the same records, if given.
    """
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.debug(f"Logging at {logging.getLevelName(level)}"
               + (f", copying to {log_file}" if log_file else ""))
