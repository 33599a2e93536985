from typing import Optional

from rich.console import Console
from rich.text import Text

from copy_configs.models import RunOptions, RunSummary
from copy_configs.tui.enums import (
    LOG_LEVEL_PREFIX,
    LOG_LEVEL_STYLE,
    STDOUT_LEVELS,
    LogLevel,
)
from copy_configs.tui.tables import SummaryTable, TargetPanel


class CopyConsoleUI:
    """Leveled console output.

    ``info`` and ``ok`` go to stdout, everything else to stderr. ``verbose``,
    ``debug`` and ``dry`` lines are dropped unless the matching mode is on.
    Callers decide what enables verbose; see ``RunOptions.show_verbose``.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        verbose: bool = False,
        debug: bool = False,
        dry_run: bool = False,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.debug_enabled = debug
        self.dry_run = dry_run
        self.verbose_enabled = verbose

    @classmethod
    def from_options(cls, options: RunOptions) -> "CopyConsoleUI":
        return cls(
            console=Console(no_color=options.no_color, highlight=False),
            err_console=Console(stderr=True, no_color=options.no_color, highlight=False),
            verbose=options.show_verbose,
            debug=options.debug,
            dry_run=options.dry_run,
        )

    @classmethod
    def quiet(cls) -> "CopyConsoleUI":
        return cls(console=Console(quiet=True), err_console=Console(quiet=True))

    def enabled(self, level: LogLevel) -> bool:
        if level == LogLevel.VERBOSE:
            return self.verbose_enabled
        if level == LogLevel.DEBUG:
            return self.debug_enabled
        if level == LogLevel.DRY:
            return self.dry_run
        return True

    def log(self, level: LogLevel, message: str) -> None:
        if not self.enabled(level):
            return
        line = Text.assemble(
            (LOG_LEVEL_PREFIX[level], LOG_LEVEL_STYLE[level]), " ", message
        )
        console = self.console if level in STDOUT_LEVELS else self.err_console
        console.print(line, soft_wrap=True)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def ok(self, message: str) -> None:
        self.log(LogLevel.OK, message)

    def warn(self, message: str) -> None:
        self.log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def verbose(self, message: str) -> None:
        self.log(LogLevel.VERBOSE, message)

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def dry(self, message: str) -> None:
        self.log(LogLevel.DRY, message)

    def render_run_summary(self, summary: RunSummary) -> None:
        if self.verbose_enabled:
            for item in summary.targets:
                if item.outcomes:
                    self.console.print(TargetPanel.outcomes(item))
        if len(summary.targets) > 1:
            self.console.print(TargetPanel.targets(summary))
        if summary.invalid_targets:
            self.console.print(TargetPanel.invalid_targets(summary.invalid_targets))
        self.console.print(SummaryTable.stats_panel(summary, dry_run=self.dry_run))
