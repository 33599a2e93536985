from io import StringIO
from pathlib import Path

from rich.console import Console

from copy_configs.models import (
    CopyOutcome,
    CopyStatus,
    RunOptions,
    RunSummary,
    TargetSummary,
)
from copy_configs.rules.parser import default_rule_set
from copy_configs.tui import CopyConsoleUI


def _ui(**flags) -> tuple[CopyConsoleUI, StringIO, StringIO]:
    out, err = StringIO(), StringIO()
    ui = CopyConsoleUI(
        console=Console(file=out, width=200, no_color=True),
        err_console=Console(file=err, width=200, no_color=True),
        **flags,
    )
    return ui, out, err


def test_levels_route_to_stdout_and_stderr() -> None:
    ui, out, err = _ui()
    ui.info("starting")
    ui.ok("copied: CLAUDE.md")
    ui.warn("keep (exists): .env")
    ui.error("boom")

    assert out.getvalue().splitlines() == [">> starting", "✓ copied: CLAUDE.md"]
    assert err.getvalue().splitlines() == ["-- keep (exists): .env", "!! boom"]


def test_gated_levels_hidden_by_default() -> None:
    ui, out, err = _ui()
    ui.verbose("v")
    ui.debug("d")
    ui.dry("Would copy")
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_debug_and_dry_run_imply_verbose() -> None:
    assert CopyConsoleUI.from_options(RunOptions(debug=True)).verbose_enabled is True
    assert CopyConsoleUI.from_options(RunOptions(dry_run=True)).verbose_enabled is True
    assert CopyConsoleUI.from_options(RunOptions()).verbose_enabled is False


def test_debug_lines_need_debug_mode() -> None:
    ui, _, err = _ui(verbose=True, debug=True)
    ui.verbose("v")
    ui.debug("d")
    assert err.getvalue().splitlines() == ["** v", "DD d"]


def test_dry_run_shows_dry_lines() -> None:
    ui, _, err = _ui(dry_run=True)
    ui.dry("Would copy: .env -> .env")
    assert err.getvalue().splitlines() == ["DRY Would copy: .env -> .env"]


def test_markup_in_messages_is_not_interpreted() -> None:
    ui, out, _ = _ui()
    ui.info("copied: [red]x[/red].env")
    assert "[red]x[/red].env" in out.getvalue()


def test_from_options_respects_flags() -> None:
    ui = CopyConsoleUI.from_options(RunOptions(verbose=True, no_color=True))
    assert ui.verbose_enabled is True
    assert ui.debug_enabled is False
    assert ui.console.no_color is True


def test_run_summary_panel(tmp_path: Path) -> None:
    ui, out, _ = _ui()
    target = TargetSummary(
        target=tmp_path,
        outcomes=[
            CopyOutcome(CopyStatus.COPIED, tmp_path / "a", tmp_path / "a", "a"),
            CopyOutcome(CopyStatus.SKIPPED, tmp_path / "b", tmp_path / "b", "keep (exists)"),
            CopyOutcome(CopyStatus.FAILED, tmp_path / "c", tmp_path / "c", "boom", error="boom"),
        ],
    )
    summary = RunSummary(rule_set=default_rule_set(), targets=[target], invalid_targets=["/nope"])

    ui.render_run_summary(summary)

    text = out.getvalue()
    assert "summary" in text
    assert "skipped targets" in text
    assert "/nope" in text
    assert summary.as_dict() == {
        "targets": 1,
        "invalid_targets": 1,
        "copied": 1,
        "skipped": 1,
        "failed": 1,
    }


def test_verbose_summary_lists_outcomes(tmp_path: Path) -> None:
    ui, out, _ = _ui(verbose=True)
    target = TargetSummary(
        target=tmp_path,
        outcomes=[CopyOutcome(CopyStatus.COPIED, tmp_path / "a", tmp_path / "dest.env", "a")],
    )
    ui.render_run_summary(RunSummary(rule_set=default_rule_set(), targets=[target]))
    assert "dest.env" in out.getvalue()


def test_target_panel_counts_outcomes(tmp_path: Path) -> None:
    ui, out, _ = _ui(verbose=True)
    target = TargetSummary(
        target=tmp_path,
        outcomes=[
            CopyOutcome(CopyStatus.COPIED, tmp_path / "a", tmp_path / "a", "a"),
            CopyOutcome(CopyStatus.SKIPPED, tmp_path / "b", tmp_path / "b", "keep (exists)"),
        ],
    )
    ui.render_run_summary(RunSummary(rule_set=default_rule_set(), targets=[target, target]))

    text = out.getvalue()
    assert "1 copied, 1 skipped, 0 failed" in text
    assert "targets" in text
