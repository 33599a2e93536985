import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Protocol

from copy_configs.conflicts import ConflictResolver
from copy_configs.constants import RSYNC_COMMAND
from copy_configs.errors import CopyBackendError, MissingDependencyError
from copy_configs.models import (
    ConflictMode,
    CopierKind,
    CopyOutcome,
    CopyStatus,
    DecisionKind,
    MatchResult,
    Rule,
    RunOptions,
)
from copy_configs.tui import CopyConsoleUI
from copy_configs.utils import is_real_dir, is_under, path_exists, relative_display


class Copier(Protocol):
    name: str

    def copy(self, source: Path, destination: Path, is_dir: bool) -> str: ...


def copy_replacing_links(src, dst, *, follow_symlinks: bool = True):
    """``shutil.copy2`` that replaces a symlink at ``dst`` instead of writing through it."""
    if os.path.islink(dst):
        os.unlink(dst)
    return shutil.copy2(src, dst, follow_symlinks=follow_symlinks)


class NativeCopier:
    """Attribute-preserving copy built on shutil."""

    name = "native"

    def copy(self, source: Path, destination: Path, is_dir: bool) -> str:
        try:
            if is_dir:
                shutil.copytree(
                    source,
                    destination,
                    symlinks=True,
                    dirs_exist_ok=True,
                    copy_function=copy_replacing_links,
                )
                return ""
            if source.is_symlink() and path_exists(destination):
                if is_real_dir(destination):
                    raise IsADirectoryError(f"Destination is a directory: {destination}")
                destination.unlink()
            copy_replacing_links(source, destination, follow_symlinks=False)
        except OSError as exc:
            raise CopyBackendError(source, destination, str(exc)) from exc
        return ""


class RsyncCopier:
    """Delegates to ``rsync -a``; arguments never pass through a shell."""

    name = "rsync"

    def __init__(self, executable: str, verbose: bool = False) -> None:
        self.executable = executable
        self.verbose = verbose

    def command(self, source: Path, destination: Path, is_dir: bool) -> list[str]:
        args = [self.executable, "-a"]
        if self.verbose:
            args.append("-v")
        if is_dir:
            args.extend(["--", f"{source}/", f"{destination}/"])
        else:
            args.extend(["--", str(source), str(destination)])
        return args

    def copy(self, source: Path, destination: Path, is_dir: bool) -> str:
        try:
            result = subprocess.run(
                self.command(source, destination, is_dir),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CopyBackendError(source, destination, str(exc)) from exc
        if result.returncode != 0:
            detail = result.stderr.strip() or f"rsync exited with {result.returncode}"
            raise CopyBackendError(source, destination, detail)
        return result.stdout


def probe_rsync() -> Optional[str]:
    return shutil.which(RSYNC_COMMAND)


def build_copier(options: RunOptions) -> Copier:
    if options.copier == CopierKind.NATIVE:
        return NativeCopier()
    if options.rsync_path is not None:
        return RsyncCopier(options.rsync_path, verbose=options.show_verbose)
    if options.copier == CopierKind.RSYNC:
        raise MissingDependencyError(RSYNC_COMMAND)
    return NativeCopier()




class CopyExecutor:
    """Apply one match to one target under the run's conflict policy.

    Every failure below this point becomes a ``failed`` outcome. A directory
    whose destination already exists as a directory is merged entry by entry,
    so the conflict policy applies to each file inside it.
    """

    def __init__(
        self,
        copier: Copier,
        resolver: Optional[ConflictResolver] = None,
        ui: Optional[CopyConsoleUI] = None,
    ) -> None:
        self.copier = copier
        self.resolver = resolver or ConflictResolver(ConflictMode.SKIP)
        self.ui = ui or CopyConsoleUI.quiet()

    @staticmethod
    def destination_for(match: MatchResult, target: Path, rule: Optional[Rule]) -> Path:
        if rule is None or not rule.is_explicit:
            return target / match.relative_path
        destination = target / rule.dest_path.rstrip("/")
        if not rule.dest_path.endswith("/"):
            return destination
        # "dir/:into/" copies the contents; "dir:into/" nests dir under into/.
        if match.is_dir and rule.source_pattern.endswith("/"):
            return destination
        return destination / match.source_path.name

    def apply(
        self,
        match: MatchResult,
        target: Path,
        rule: Optional[Rule] = None,
        dry_run: bool = False,
    ) -> list[CopyOutcome]:
        destination = self.destination_for(match, target, rule)
        if match.is_dir:
            try:
                merge = is_real_dir(destination)
            except OSError as exc:
                return [self._inspect_failed(match, destination, target, exc)]
            if merge:
                return self._merge(match, destination, target, dry_run)
        return [
            self._copy_entry(match, destination, target, self._describe(match, rule), dry_run)
        ]

    def copy(
        self,
        match: MatchResult,
        target: Path,
        rule: Optional[Rule] = None,
        dry_run: bool = False,
    ) -> CopyOutcome:
        """Copy ``match`` as a single entry, never merging into an existing directory."""
        destination = self.destination_for(match, target, rule)
        return self._copy_entry(
            match, destination, target, self._describe(match, rule), dry_run
        )

    def _merge(
        self, match: MatchResult, destination: Path, target: Path, dry_run: bool
    ) -> list[CopyOutcome]:
        try:
            children = sorted(match.source_path.iterdir())
        except OSError as exc:
            return [
                self._failed(match, destination, f"Cannot read {match.relative_path}: {exc}")
            ]

        outcomes: list[CopyOutcome] = []
        for child in children:
            relative = f"{match.relative_path}/{child.name}"
            child_destination = destination / child.name
            try:
                is_dir = is_real_dir(child)
                merge = is_dir and is_real_dir(child_destination)
            except OSError as exc:
                entry = MatchResult(relative, child, is_dir=False)
                outcomes.append(self._inspect_failed(entry, child_destination, target, exc))
                continue
            entry = MatchResult(relative, child, is_dir)
            if merge:
                outcomes.extend(self._merge(entry, child_destination, target, dry_run))
            else:
                outcomes.append(
                    self._copy_entry(
                        entry,
                        child_destination,
                        target,
                        relative_display(child_destination, target),
                        dry_run,
                    )
                )
        return outcomes

    def _copy_entry(
        self,
        match: MatchResult,
        destination: Path,
        target: Path,
        description: str,
        dry_run: bool,
    ) -> CopyOutcome:
        shown = relative_display(destination, target)

        if not is_under(destination.parent, target):
            return self._failed(match, destination, f"Destination escapes target: {shown}")

        try:
            decision = self.resolver.decide(destination)
        except OSError as exc:
            return self._inspect_failed(match, destination, target, exc)
        if decision.kind == DecisionKind.SKIP:
            self.ui.warn(f"keep (exists): {shown}")
            return CopyOutcome(
                CopyStatus.SKIPPED, match.source_path, destination, "keep (exists)"
            )

        backup_shown = (
            relative_display(decision.backup_path, target)
            if decision.backup_path is not None
            else None
        )

        if dry_run:
            detail = f"Would copy: {match.relative_path} -> {shown}"
            if backup_shown is not None:
                detail = f"{detail} (backup: {backup_shown})"
            self.ui.dry(detail)
            return CopyOutcome(
                CopyStatus.COPIED,
                match.source_path,
                destination,
                detail,
                simulated=True,
            )

        if decision.kind == DecisionKind.PROCEED_AFTER_BACKUP:
            try:
                os.rename(destination, decision.backup_path)
            except OSError as exc:
                return self._failed(match, destination, f"Backup failed for {shown}: {exc}")
            self.ui.info(f"backup: {shown} -> {backup_shown}")
        else:
            try:
                if destination.is_symlink():
                    destination.unlink()
            except OSError as exc:
                return self._failed(match, destination, f"Cannot replace link {shown}: {exc}")

        self._ensure_parent(destination)
        try:
            output = self.copier.copy(match.source_path, destination, match.is_dir)
        except (CopyBackendError, OSError) as exc:
            return self._failed(match, destination, str(exc))

        if output.strip():
            self.ui.debug(output.strip())
        self.ui.ok(f"copied: {description}")
        return CopyOutcome(CopyStatus.COPIED, match.source_path, destination, description)

    def _ensure_parent(self, destination: Path) -> None:
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self.ui.debug(f"Could not create {destination.parent}: {exc}")

    def _inspect_failed(
        self, match: MatchResult, destination: Path, target: Path, exc: OSError
    ) -> CopyOutcome:
        shown = relative_display(destination, target)
        return self._failed(match, destination, f"Cannot inspect {shown}: {exc}")

    def _failed(self, match: MatchResult, destination: Path, message: str) -> CopyOutcome:
        self.ui.error(message)
        return CopyOutcome(
            CopyStatus.FAILED, match.source_path, destination, message, error=message
        )

    @staticmethod
    def _describe(match: MatchResult, rule: Optional[Rule]) -> str:
        if rule is not None and rule.is_explicit:
            return f"{match.source_path.name} -> {rule.dest_path}"
        return match.relative_path
