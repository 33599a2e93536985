import shutil
import subprocess
from pathlib import Path
from typing import Optional

from copy_configs.constants import GIT_COMMAND
from copy_configs.errors import SourceRootError
from copy_configs.tui import CopyConsoleUI
from copy_configs.utils import is_writable_dir


class WorkspaceService:
    def __init__(self, ui: Optional[CopyConsoleUI] = None, cwd: Optional[Path] = None) -> None:
        self.ui = ui or CopyConsoleUI.quiet()
        self._cwd = cwd

    @property
    def cwd(self) -> Path:
        return self._cwd or Path.cwd()

    def find_git_root(self) -> Optional[Path]:
        git = shutil.which(GIT_COMMAND)
        if git is None:
            return None
        try:
            result = subprocess.run(
                [git, "rev-parse", "--show-toplevel"],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            return None
        root = result.stdout.strip()
        if result.returncode != 0 or not root:
            return None
        return Path(root)

    def resolve_source_root(self, override: Optional[Path] = None) -> Path:
        if override is not None:
            root = override if override.is_absolute() else self.cwd / override
            self.ui.verbose(f"Source root (override): {root}")
        else:
            git_root = self.find_git_root()
            if git_root is not None:
                root = git_root
                self.ui.verbose(f"Source root (git): {root}")
            else:
                root = self.cwd
                self.ui.warn(
                    f"Not in a git repo; using current directory as source root: {root}"
                )

        if not root.is_dir():
            raise SourceRootError(root)
        return root.resolve()

    def resolve_target(self, raw: str) -> Optional[Path]:
        text = raw.strip()
        if not text:
            return None
        path = Path(text)
        if not path.is_absolute():
            path = self.cwd / path
            if not path.is_dir():
                self.ui.warn(f"Invalid target path: {text}")
                return None
            path = path.resolve()

        if not is_writable_dir(path):
            self.ui.error(f"Target path is not a writable directory: {path}")
            self.ui.warn(f"Skipping invalid target: {path}")
            return None
        return path
