# --- Copyright Notice ---
# Copyright (c) 2024 Jim Maastricht
"""
--- File Context and Purpose ---

FILE: bblogger.py
DESCRIPTION: Configures and manages the logging system for the franchise
simulation using the loguru library. Handlers are set up for console (stderr)
output and a rotating file (logs/bbfranchise.log). The match engine itself
reports play-by-play through the event sink; this logger carries diagnostics
for the league, schedule, standings and season layers.

PRIMARY FUNCTION:
- configure_logger(): Initializes or reconfigures the loguru logger with a
  specified logging level, and optionally turns the file handler off.

EXPORTS:
- logger: The configured loguru logger instance.
- configure_logger: The function to adjust logging levels at runtime.
"""

from loguru import logger
import sys
import os

# IDs for handlers to enable removal/reconfiguration
console_handler_id = None
file_handler_id = None
LOG_DIR = "logs"
LOG_FILE = os.path.join(LOG_DIR, "bbfranchise.log")


def configure_logger(log_level="INFO", log_to_file=True):
    """
    Configure the logger with the specified log level

    :param log_level: The logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param log_to_file: write to logs/bbfranchise.log in addition to stderr
    :return: None
    """
    global console_handler_id, file_handler_id

    # Remove existing handlers if they exist
    if console_handler_id is not None:
        logger.remove(console_handler_id)
        console_handler_id = None
    if file_handler_id is not None:
        logger.remove(file_handler_id)
        file_handler_id = None
    else:
        logger.remove()  # drop loguru's default handler on first run

    console_handler_id = logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    if log_to_file:
        os.makedirs(LOG_DIR, exist_ok=True)
        file_handler_id = logger.add(
            LOG_FILE,
            rotation="1 MB",
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
    return


# Initialize with default level, console only until a caller asks for the file
configure_logger("INFO", log_to_file=False)

# Export logger and configuration function
__all__ = ["logger", "configure_logger"]
