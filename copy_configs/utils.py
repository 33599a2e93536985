import os
from datetime import datetime
from pathlib import Path

from copy_configs.constants import BACKUP_STAMP_FORMAT, BACKUP_SUFFIX


def now_stamp() -> str:
    return datetime.now().strftime(BACKUP_STAMP_FORMAT)


def path_exists(path: Path) -> bool:
    """True for existing entries and for dangling symlinks."""
    return path.exists() or path.is_symlink()


def is_real_dir(path: Path) -> bool:
    """A directory that is not reached through a symlink."""
    return path.is_dir() and not path.is_symlink()


def backup_path_for(path: Path, stamp: str) -> Path:
    candidate = Path(f"{path}{BACKUP_SUFFIX}{stamp}")
    counter = 1
    while path_exists(candidate):
        candidate = Path(f"{path}{BACKUP_SUFFIX}{stamp}-{counter}")
        counter += 1
    return candidate


def is_under(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
        return True
    except Exception:
        return False


def is_writable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.W_OK)


def is_readable_file(path: Path) -> bool:
    return path.exists() and not path.is_dir() and os.access(path, os.R_OK)


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def relative_display(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return compact_home_path(path)
