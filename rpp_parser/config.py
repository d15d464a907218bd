"""Loading parse options from YAML configuration."""
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .models import ParseOptions

logger = logging.getLogger(__name__)


def options_from_dict(config_dict: Optional[Dict[str, Any]]) -> ParseOptions:
    """
    Build parse options from a mapping.

    Accepts the keys at the top level or under a ``parse_options`` section.
    Missing keys keep their defaults.
    """
    config_dict = config_dict or {}
    section = config_dict.get("parse_options", config_dict) or {}

    defaults = ParseOptions()
    return ParseOptions(
        convert_volume_to_db=bool(section.get("convert_volume_to_db", defaults.convert_volume_to_db)),
        normalize_pan=bool(section.get("normalize_pan", defaults.normalize_pan))
    )


def load_options(config_path: Path) -> ParseOptions:
    """Load parse options from a YAML file."""
    logger.info(f"Loading parse options from {config_path}")
    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    return options_from_dict(config_dict)
