from pathlib import Path
from typing import Optional

import click

from copy_configs import __version__
from copy_configs.constants import EXIT_FATAL, EXIT_INTERRUPTED
from copy_configs.engine import RuleEngine
from copy_configs.errors import CopyConfigsError
from copy_configs.executor import probe_rsync
from copy_configs.models import ConflictMode, CopierKind, RunOptions
from copy_configs.tui import CopyConsoleUI


CONFLICT_VALUES = [mode.value for mode in ConflictMode]
COPIER_VALUES = [kind.value for kind in CopierKind]

EPILOG = """\b
Examples:
  echo "/path/to/target" | copy-configs
  copy-configs < target_paths.txt
  copy-configs -t /path/to/dir1 -t /path/to/dir2
  copy-configs -t ../feature-wt --conflict backup --dry-run
"""


def _read_stdin_targets(ui: CopyConsoleUI) -> list[str]:
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        return []
    ui.verbose("Reading target paths from stdin")
    return [line.strip() for line in stream if line.strip()]


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.option(
    "--target",
    "-t",
    "targets",
    multiple=True,
    help="Target directory (repeatable). Read from stdin when omitted.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path),
    help="Rules file (overrides the default search).",
)
@click.option(
    "--source",
    "-s",
    "source_root",
    type=click.Path(path_type=Path),
    help="Source root to copy from (default: git top level, then cwd).",
)
@click.option(
    "--conflict",
    "-C",
    "--copy-on-conflict",
    "conflict",
    type=click.Choice(CONFLICT_VALUES, case_sensitive=False),
    default=ConflictMode.SKIP.value,
    show_default=True,
    help="What to do when a destination already exists.",
)
@click.option(
    "--copier",
    type=click.Choice(COPIER_VALUES, case_sensitive=False),
    default=CopierKind.AUTO.value,
    show_default=True,
    help="Copy backend: rsync, native, or rsync when available.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug output.")
@click.option(
    "--dry-run", "-n", "dry_run", is_flag=True, help="Show what would be done."
)
@click.option("--no-color", "no_color", is_flag=True, help="Disable ANSI colors.")
@click.version_option(__version__, prog_name="copy-configs")
def cli(
    targets: tuple[str, ...],
    config_path: Optional[Path],
    source_root: Optional[Path],
    conflict: str,
    copier: str,
    verbose: bool,
    debug: bool,
    dry_run: bool,
    no_color: bool,
) -> None:
    """Copy untracked config files (.env*, CLAUDE.md, .cursor/, ...) into targets."""
    copier_kind = CopierKind(copier.lower())
    options = RunOptions(
        config_override=config_path,
        source_override=source_root,
        conflict_mode=ConflictMode(conflict.lower()),
        verbose=verbose,
        debug=debug,
        dry_run=dry_run,
        no_color=no_color,
        copier=copier_kind,
        rsync_path=None if copier_kind == CopierKind.NATIVE else probe_rsync(),
    )
    ui = CopyConsoleUI.from_options(options)
    ui.debug(
        f"Parsed arguments: verbose={options.show_verbose} debug={options.debug} "
        f"dry_run={options.dry_run}"
    )
    ui.debug(f"Config override: {config_path or '<none>'}")
    ui.debug(f"Conflict mode: {options.conflict_mode.value}")

    target_paths = list(targets) or _read_stdin_targets(ui)
    ui.debug(f"Target paths: {' '.join(target_paths) or '<none>'}")

    try:
        summary = RuleEngine(options, ui).run(target_paths)
    except CopyConfigsError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ui.render_run_summary(summary)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else EXIT_FATAL
    except click.ClickException as exc:
        exc.show()
        return EXIT_FATAL
    except click.exceptions.Abort:
        click.echo("-- Received signal, exiting...", err=True)
        return EXIT_INTERRUPTED
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
