from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class ConflictMode(str, Enum):
    SKIP = "skip"
    OVERWRITE = "overwrite"
    BACKUP = "backup"


class CopierKind(str, Enum):
    AUTO = "auto"
    RSYNC = "rsync"
    NATIVE = "native"


class UnsafePathReason(str, Enum):
    TRAVERSAL = "traversal"
    ABSOLUTE = "absolute"
    HOME_RELATIVE = "home_relative"


class DecisionKind(str, Enum):
    PROCEED = "proceed"
    SKIP = "skip"
    PROCEED_AFTER_BACKUP = "proceed_after_backup"


class CopyStatus(str, Enum):
    COPIED = "copied"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class Rule:
    source_pattern: str
    dest_path: str

    @property
    def is_explicit(self) -> bool:
        return self.dest_path != self.source_pattern

    def __str__(self) -> str:
        if self.is_explicit:
            return f"{self.source_pattern}:{self.dest_path}"
        return self.source_pattern


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...]
    origin: Optional[Path] = None
    rejected: tuple[str, ...] = ()

    @property
    def is_default(self) -> bool:
        return self.origin is None

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class MatchResult:
    relative_path: str
    source_path: Path
    is_dir: bool


@dataclass(frozen=True)
class ConflictDecision:
    kind: DecisionKind
    backup_path: Optional[Path] = None

    @classmethod
    def proceed(cls) -> "ConflictDecision":
        return cls(DecisionKind.PROCEED)

    @classmethod
    def skip(cls) -> "ConflictDecision":
        return cls(DecisionKind.SKIP)

    @classmethod
    def after_backup(cls, backup_path: Path) -> "ConflictDecision":
        return cls(DecisionKind.PROCEED_AFTER_BACKUP, backup_path=backup_path)


@dataclass(frozen=True)
class CopyOutcome:
    status: CopyStatus
    source_path: Path
    dest_path: Path
    detail: str
    error: Optional[str] = None
    simulated: bool = False


@dataclass
class TargetSummary:
    target: Path
    outcomes: list[CopyOutcome] = field(default_factory=list)

    def _count(self, status: CopyStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def copied(self) -> int:
        return self._count(CopyStatus.COPIED)

    @property
    def skipped(self) -> int:
        return self._count(CopyStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(CopyStatus.FAILED)

    def as_dict(self) -> dict[str, int]:
        return {
            "copied": self.copied,
            "skipped": self.skipped,
            "failed": self.failed,
        }


@dataclass
class RunSummary:
    rule_set: RuleSet
    targets: list[TargetSummary] = field(default_factory=list)
    invalid_targets: list[str] = field(default_factory=list)

    @property
    def copied(self) -> int:
        return sum(item.copied for item in self.targets)

    @property
    def skipped(self) -> int:
        return sum(item.skipped for item in self.targets)

    @property
    def failed(self) -> int:
        return sum(item.failed for item in self.targets)

    def as_dict(self) -> dict[str, int]:
        return {
            "targets": len(self.targets),
            "invalid_targets": len(self.invalid_targets),
            "copied": self.copied,
            "skipped": self.skipped,
            "failed": self.failed,
        }


@dataclass(frozen=True)
class RunOptions:
    """Immutable run configuration built once from the command line."""

    config_override: Optional[Path] = None
    source_override: Optional[Path] = None
    conflict_mode: ConflictMode = ConflictMode.SKIP
    verbose: bool = False
    debug: bool = False
    dry_run: bool = False
    no_color: bool = False
    copier: CopierKind = CopierKind.AUTO
    rsync_path: Optional[str] = None

    @property
    def show_verbose(self) -> bool:
        return self.verbose or self.debug or self.dry_run
