from typing import Final


CONFIG_FILENAME: Final[str] = ".copyconfigs"

GLOBAL_CONFIG_PATHS: Final[tuple[tuple[str, ...], ...]] = (
    (".config", "copy-configs", "config"),
    (".config", "gwq", "copyconfigs"),
)

DEFAULT_COPY_PATTERNS: Final[tuple[str, ...]] = (
    ".env*",
    "CLAUDE.md",
    "GEMINI.md",
    "AGENTS.md",
    "AGENT.md",
    ".claude/",
    ".cursor/",
    ".augment/",
    ".clinerules/",
    ".vscode/settings.json",
)

RSYNC_COMMAND: Final[str] = "rsync"
GIT_COMMAND: Final[str] = "git"

BACKUP_SUFFIX: Final[str] = ".bak-"
BACKUP_STAMP_FORMAT: Final[str] = "%Y%m%d-%H%M%S"

RULE_COMMENT: Final[str] = "#"
RULE_SEPARATOR: Final[str] = ":"

EXIT_FATAL: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130
