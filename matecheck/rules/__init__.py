from matecheck.rules.loader import DEFAULT_RULES_PATH, RulesError, load_rules
from matecheck.rules.models import KnightRules, MoveRules, ProjectRules, Rules

__all__ = [
    "DEFAULT_RULES_PATH",
    "KnightRules",
    "MoveRules",
    "ProjectRules",
    "Rules",
    "RulesError",
    "load_rules",
]
