"""Parse copy rules from rule-file lines."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from copy_configs.constants import DEFAULT_COPY_PATTERNS, RULE_COMMENT, RULE_SEPARATOR
from copy_configs.models import Rule, RuleSet
from copy_configs.rules.safety import describe_rejection, validate_path


def parse_rule_line(line: str, diagnostics: Optional[list[str]] = None) -> Optional[Rule]:
    """Turn one rule-file line into a Rule.

    Blank and comment-only lines yield None silently. Lines whose source or
    destination is unsafe also yield None, with a message appended to
    ``diagnostics`` when a list is given.
    """
    text = line.rstrip("\n").removesuffix("\r")
    text = text.split(RULE_COMMENT, 1)[0].strip()
    if not text:
        return None

    if RULE_SEPARATOR in text:
        source, dest = text.split(RULE_SEPARATOR, 1)
        source, dest = source.strip(), dest.strip()
    else:
        source = dest = text

    for part in (source, dest):
        if not part:
            _report(diagnostics, f"Empty pattern or destination in rule: {text}")
            return None
        reason = validate_path(part)
        if reason is not None:
            _report(diagnostics, describe_rejection(part, reason))
            return None

    return Rule(source_pattern=source, dest_path=dest)


def parse_rule_lines(lines: Iterable[str], origin: Optional[Path] = None) -> RuleSet:
    rules: list[Rule] = []
    rejected: list[str] = []
    for number, line in enumerate(lines, start=1):
        diagnostics: list[str] = []
        rule = parse_rule_line(line, diagnostics)
        if rule is not None:
            rules.append(rule)
            continue
        rejected.extend(f"line {number}: {message}" for message in diagnostics)
    return RuleSet(rules=tuple(rules), origin=origin, rejected=tuple(rejected))


def parse_rule_file(path: Path) -> RuleSet:
    with path.open("r", encoding="utf-8") as handle:
        return parse_rule_lines(handle, origin=path)


def default_rule_set() -> RuleSet:
    return RuleSet(
        rules=tuple(Rule(source_pattern=p, dest_path=p) for p in DEFAULT_COPY_PATTERNS)
    )


def _report(diagnostics: Optional[list[str]], message: str) -> None:
    if diagnostics is not None:
        diagnostics.append(message)
