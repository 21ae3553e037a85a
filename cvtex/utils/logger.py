"""
Shared loguru setup for cvtex commands.

Each context wraps setup_logger in contexts/{context}/logger.py and adds its own
message prefix. A session writes one log file per context under a directory
named after the command and its start time.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

import cvtex

load_dotenv()
LOG_DIR = Path(os.getenv("CVTEX_LOG_DIR", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(command: str, base_dir: Path = LOG_DIR) -> Path:
    """
    Directory for one command run, e.g. outs/logs/latex_20251113_101500.

    Args:
        command: CLI command name
        base_dir: Parent directory for all sessions

    Returns:
        Path (not created yet)
    """
    return base_dir / f"{command}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def setup_logger(
    context_name: str,
    log_dir: Path = LOG_DIR,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Route loguru output to a context log file and to stderr.

    The file sink keeps DEBUG and above. The console sink shows INFO and above on
    stderr, leaving stdout free for rendered documents.

    Args:
        context_name: Log file stem (e.g., "template", "store")
        log_dir: Directory for this session's log files
        extra_provenance: Extra key-value pairs written in the session header
        level_colors: Console colors merged over LEVEL_COLORS

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "template",
            log_dir=session_log_dir("latex"),
            extra_provenance={"Target": "latex"},
        )
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write a session header: command line, working directory, interpreter and
    cvtex versions, plus any extra context.
    """
    header = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "cvtex": cvtex.__version__,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
