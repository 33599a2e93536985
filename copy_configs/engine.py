"""Drive rule resolution and copying for every requested target."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from copy_configs.conflicts import ConflictResolver
from copy_configs.errors import NoTargetsError
from copy_configs.executor import Copier, CopyExecutor, build_copier
from copy_configs.matcher import PatternMatcher
from copy_configs.models import RuleSet, RunOptions, RunSummary, TargetSummary
from copy_configs.rules.repository import RuleFileRepository
from copy_configs.tui import CopyConsoleUI
from copy_configs.workspaces import WorkspaceService


class RuleEngine:
    """Resolve the rule set once, then apply it to each target in order.

    Structural problems (no targets, missing copier, unreadable explicit
    config, missing source root) raise. Everything below the target level
    is reported and counted, never raised.
    """

    def __init__(
        self,
        options: RunOptions,
        ui: Optional[CopyConsoleUI] = None,
        workspace_service: Optional[WorkspaceService] = None,
        copier: Optional[Copier] = None,
        stamp: Optional[str] = None,
    ) -> None:
        self.options = options
        self.ui = ui or CopyConsoleUI.quiet()
        self.workspace_service = workspace_service or WorkspaceService(ui=self.ui)
        self._copier = copier
        self._stamp = stamp

    def load_rule_set(self, source_root: Path) -> RuleSet:
        repository = RuleFileRepository(source_root)
        rule_set = repository.load(self.options.config_override)
        if rule_set.is_default:
            patterns = " ".join(rule.source_pattern for rule in rule_set)
            self.ui.info(f"No config file found, using default patterns: {patterns}")
        else:
            self.ui.info(f"Using config: {rule_set.origin}")
        for message in rule_set.rejected:
            self.ui.warn(f"Ignoring rule ({message})")
        return rule_set

    def run(self, targets: Sequence[str]) -> RunSummary:
        raw_targets = [item for item in targets if item.strip()]
        if not raw_targets:
            raise NoTargetsError()

        copier = self._copier or build_copier(self.options)
        self.ui.debug(f"Copier: {copier.name}")
        source_root = self.workspace_service.resolve_source_root(
            self.options.source_override
        )
        rule_set = self.load_rule_set(source_root)

        executor = CopyExecutor(
            copier=copier,
            resolver=ConflictResolver(self.options.conflict_mode, stamp=self._stamp),
            ui=self.ui,
        )
        matcher = PatternMatcher(source_root)

        self.ui.info(f"Processing {len(raw_targets)} target path(s)")
        summary = RunSummary(rule_set=rule_set)
        for raw in raw_targets:
            target = self.workspace_service.resolve_target(raw)
            if target is None:
                summary.invalid_targets.append(raw)
                continue
            summary.targets.append(self.process_target(target, rule_set, matcher, executor))

        self.ui.ok("Done.")
        return summary

    def process_target(
        self,
        target: Path,
        rule_set: RuleSet,
        matcher: PatternMatcher,
        executor: CopyExecutor,
    ) -> TargetSummary:
        self.ui.info(f"Copying files into: {target}")
        result = TargetSummary(target=target)
        for rule in rule_set:
            self.ui.debug(f"Processing pattern: '{rule.source_pattern}'")
            count = 0
            for match in matcher.match(rule.source_pattern):
                count += 1
                result.outcomes.extend(
                    executor.apply(match, target, rule, dry_run=self.options.dry_run)
                )
            if count == 0:
                self.ui.verbose(f"skip (missing): {rule.source_pattern}")
            else:
                self.ui.verbose(f"Found matches for '{rule.source_pattern}': {count}")
        return result
