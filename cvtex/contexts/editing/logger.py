"""
Editing context logger.

Messages are prefixed with [store]. Editing modules log through these helpers
rather than importing loguru directly.
"""

from pathlib import Path

from loguru import logger

from cvtex.utils.logger import LOG_DIR, setup_logger

CONTEXT_PREFIX = "[store]"


def setup_editing_logger(log_dir: Path = LOG_DIR, store_path: Path = None) -> Path:
    """
    Start an editing log session.

    Args:
        log_dir: Directory for this session's log files
        store_path: Record store file, shown in the session header

    Returns:
        Path to log file
    """
    provenance = {"Store": store_path} if store_path else None
    return setup_logger("store", log_dir=log_dir, extra_provenance=provenance)


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")
