"""
Layout Configuration Resolution

Loads the document layout and locale settings (headings, labels, separators,
LaTeX preamble options) shared by the LaTeX and preview renderers.

Examples:
    >>> layout = load_layout_config()
    >>> layout["headings"]["experience"]
    'Experiencia Laboral'

    # Override single values (nested keys merge, later wins)
    >>> layout = load_layout_config(overrides={"labels": {"present": "Actualidad"}})
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
LAYOUT_CONFIG_PATH = Path(
    os.getenv("CVTEX_LAYOUT_CONFIG_PATH", Path(__file__).parent / "config" / "layout.yaml")
)

REQUIRED_SECTIONS = ("document", "headings", "labels", "separators")


def load_layout_config(
    config_path: Path = None, overrides: Dict[str, Any] = None
) -> Dict[str, Any]:
    """
    Load layout.yaml, merge optional overrides and resolve interpolations.

    Args:
        config_path: Optional path to layout file (defaults to CVTEX_LAYOUT_CONFIG_PATH)
        overrides: Nested dict merged on top of the file contents

    Returns:
        Plain dict with 'document', 'headings', 'labels' and 'separators'

    Raises:
        FileNotFoundError: If the layout file doesn't exist
        ValueError: If a required top-level section is missing
    """
    if config_path is None:
        config_path = LAYOUT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Layout config not found at {config_path}")

    config = OmegaConf.load(config_path)
    if overrides:
        config = OmegaConf.merge(config, OmegaConf.create(overrides))

    layout = OmegaConf.to_container(config, resolve=True)

    missing = [section for section in REQUIRED_SECTIONS if section not in layout]
    if missing:
        raise ValueError(f"Layout config {config_path} is missing sections: {missing}")

    return layout
