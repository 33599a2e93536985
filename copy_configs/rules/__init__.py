from copy_configs.rules.parser import default_rule_set, parse_rule_line, parse_rule_lines
from copy_configs.rules.repository import RuleFileRepository
from copy_configs.rules.safety import is_safe_path, validate_path

__all__ = [
    "RuleFileRepository",
    "default_rule_set",
    "is_safe_path",
    "parse_rule_line",
    "parse_rule_lines",
    "validate_path",
]
