from rich.panel import Panel
from rich.table import Column, Table
from rich.text import Text

from copy_configs.models import CopyOutcome, RunSummary, TargetSummary
from copy_configs.tui.enums import COPY_STATUS_STYLE, UIStyle
from copy_configs.utils import compact_home_path


class OutcomeTable:
    @staticmethod
    def outcomes_table(outcomes: list[CopyOutcome]) -> Table:
        table = Table(
            Column(header="Status", width=8),
            Column(header="Destination", overflow="fold"),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for outcome in outcomes:
            style = COPY_STATUS_STYLE.get(outcome.status, UIStyle.WHITE.value)
            table.add_row(
                Text(outcome.status.value, style=style),
                Text(compact_home_path(outcome.dest_path)),
                Text(outcome.detail),
            )
        return table


class SummaryTable:
    @staticmethod
    def targets_table(summary: RunSummary) -> Table:
        table = Table(
            Column(header="Target", overflow="fold"),
            Column(header="Copied", width=7, justify="right"),
            Column(header="Skipped", width=7, justify="right"),
            Column(header="Failed", width=7, justify="right"),
            expand=True,
            header_style="bold",
        )
        for item in summary.targets:
            table.add_row(
                Text(compact_home_path(item.target)),
                str(item.copied),
                str(item.skipped),
                str(item.failed),
            )
        return table

    @staticmethod
    def stats_panel(summary: RunSummary, dry_run: bool = False) -> Panel:
        copied_label = "would copy" if dry_run else "copied"
        stats: dict[str, str] = {
            "targets": str(len(summary.targets)),
            copied_label: str(summary.copied),
            "skipped": str(summary.skipped),
            "failed": str(summary.failed),
        }
        if summary.invalid_targets:
            stats["invalid targets"] = str(len(summary.invalid_targets))
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="dry run" if dry_run else "summary",
            border_style=UIStyle.GREEN.value if summary.failed == 0 else UIStyle.RED.value,
        )


class TargetPanel:
    @staticmethod
    def outcomes(item: TargetSummary) -> Panel:
        return Panel(
            OutcomeTable.outcomes_table(item.outcomes),
            title=compact_home_path(item.target),
            subtitle=f"{item.copied} copied, {item.skipped} skipped, {item.failed} failed",
            border_style=UIStyle.CYAN.value,
            padding=(0, 1),
        )

    @staticmethod
    def targets(summary: RunSummary) -> Panel:
        return Panel(
            SummaryTable.targets_table(summary),
            title="targets",
            border_style=UIStyle.MAGENTA.value,
            padding=(0, 1),
        )

    @staticmethod
    def invalid_targets(invalid_targets: list[str]) -> Panel:
        body = Text("\n".join(f"- {compact_home_path(item)}" for item in invalid_targets))
        return Panel(
            body,
            title="skipped targets",
            border_style=UIStyle.YELLOW.value,
            padding=(0, 1),
        )
