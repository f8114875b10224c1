import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from matecheck.rules.models import Rules

logger = logging.getLogger(__name__)

# Shipped alongside this module as package data
DEFAULT_RULES_PATH = Path(__file__).with_name("matecheck_rules.yaml")


class RulesError(ValueError):
    """Raised when the rules file cannot be parsed or fails validation."""


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises RulesError if YAML or schema invalid.
    """
    rules_path = Path(path) if path is not None else DEFAULT_RULES_PATH

    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RulesError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise RulesError(f"Rules file {rules_path} must contain a mapping")

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise RulesError(f"Rules validation failed:\n{e}") from e

    logger.debug(f"Loaded rules {rules.project.rules_version} from {rules_path}")
    return rules
