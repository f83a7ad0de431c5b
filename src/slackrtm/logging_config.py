"""
Logging setup for applications built on slackrtm.

Every module logs to ``logging.getLogger(__name__)`` under the ``slackrtm``
tree. The decoder and dispatcher write one DEBUG line per frame; those are
kept separate so a DEBUG package level stays readable on a busy stream.

Example:
    setup_logging(logging.DEBUG)                  # package DEBUG, frames quiet
    setup_logging(logging.INFO, log_frames=True)  # trace every frame
"""

import logging

PACKAGE_LOGGER = "slackrtm"

# Loggers that emit per-frame DEBUG records
FRAME_LOGGERS = ("slackrtm.events.decoder", "slackrtm.dispatch")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_frames: bool = False) -> logging.Logger:
    """
    Show slackrtm logs at ``level`` and hide dependency noise below WARNING.

    Args:
        level: Level for the slackrtm logger tree.
        log_frames: Log every decoded frame at DEBUG. When False, the frame
            loggers are held at INFO or ``level``, whichever is higher.

    Returns:
        The package logger.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    frame_level = logging.DEBUG if log_frames else max(level, logging.INFO)
    for name in FRAME_LOGGERS:
        logging.getLogger(name).setLevel(frame_level)

    return package_logger
