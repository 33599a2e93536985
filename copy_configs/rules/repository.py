"""Locate and load the active rule file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from copy_configs.constants import CONFIG_FILENAME, GLOBAL_CONFIG_PATHS
from copy_configs.errors import ConfigFileError, UnreadableConfigError
from copy_configs.models import RuleSet
from copy_configs.rules.parser import default_rule_set, parse_rule_file
from copy_configs.utils import is_readable_file


class RuleFileRepository:
    def __init__(self, source_root: Path, home: Optional[Path] = None) -> None:
        self._source_root = source_root
        self._home = home or Path.home()

    @property
    def project_config_path(self) -> Path:
        return self._source_root / CONFIG_FILENAME

    @property
    def global_config_paths(self) -> list[Path]:
        return [self._home.joinpath(*parts) for parts in GLOBAL_CONFIG_PATHS]

    def candidates(self) -> list[Path]:
        return [self.project_config_path, *self.global_config_paths]

    def resolve(self, override: Optional[Path] = None) -> Optional[Path]:
        """Return the rule file to use, or None for the built-in defaults.

        An explicit override only has to be readable, so process-substitution
        paths such as ``/dev/fd/63`` work. Search-path candidates must be
        regular files.
        """
        if override is not None:
            if not is_readable_file(override):
                raise UnreadableConfigError(override)
            return override

        for candidate in self.candidates():
            if candidate.is_file() and is_readable_file(candidate):
                return candidate
        return None

    def load(self, override: Optional[Path] = None) -> RuleSet:
        path = self.resolve(override)
        if path is None:
            return default_rule_set()
        try:
            return parse_rule_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigFileError(path, f"Config file could not be read ({exc})") from exc
