"""
Templating context logger.

Messages are prefixed with [template]. Templating modules log through these
helpers rather than importing loguru directly.
"""

from pathlib import Path

from loguru import logger

from cvtex.utils.logger import LOG_DIR, setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path = LOG_DIR, target: str = "latex") -> Path:
    """Start a templating log session for a "latex" or "preview" render."""
    return setup_logger("template", log_dir=log_dir, extra_provenance={"Target": target})


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render_result(resume_name: str, target: str, output_path: Path, elapsed_time: float) -> None:
    """
    Log a finished render.

    Example output:
        [template] Juan J. Desarrollador: latex written (0.04s)
        [template]   -> outs/cv.tex
    """
    _log_success(f"{resume_name}: {target} written ({elapsed_time:.2f}s)")
    _log_info(f"  -> {output_path}")
