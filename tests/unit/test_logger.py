"""Unit tests for loguru session setup and context prefixes."""

from pathlib import Path

import pytest
from loguru import logger

from cvtex.contexts.editing.logger import setup_editing_logger
from cvtex.contexts.templating.logger import _log_debug, setup_templating_logger
from cvtex.utils.logger import session_log_dir


@pytest.fixture(autouse=True)
def reset_loguru():
    yield
    logger.remove()


@pytest.mark.unit
def test_session_log_dir_named_after_command(tmp_path):
    log_dir = session_log_dir("latex", base_dir=tmp_path)

    assert log_dir.parent == tmp_path
    assert log_dir.name.startswith("latex_")
    assert not log_dir.exists()


@pytest.mark.unit
def test_templating_log_file_has_provenance_and_prefix(tmp_path):
    log_file = setup_templating_logger(tmp_path, target="preview")
    _log_debug("rendering")

    content = log_file.read_text(encoding="utf-8")
    assert log_file == tmp_path / "template.log"
    assert "Target: preview" in content
    assert "cvtex: " in content
    # DEBUG messages reach the file sink
    assert "[template] rendering" in content


@pytest.mark.unit
def test_editing_log_records_store_path(tmp_path):
    log_file = setup_editing_logger(tmp_path / "session", store_path=Path("data/store.json"))

    assert log_file.parent.is_dir()
    assert "Store: data/store.json" in log_file.read_text(encoding="utf-8")
