from enum import Enum

from copy_configs.models import CopyStatus


class UIStyle(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    BRIGHT_CYAN = "bright_cyan"
    MAGENTA = "magenta"
    GREY = "bright_black"
    WHITE = "white"


class LogLevel(str, Enum):
    INFO = "info"
    OK = "ok"
    WARN = "warn"
    ERROR = "error"
    VERBOSE = "verbose"
    DEBUG = "debug"
    DRY = "dry"


LOG_LEVEL_PREFIX = {
    LogLevel.INFO: ">>",
    LogLevel.OK: "✓",
    LogLevel.WARN: "--",
    LogLevel.ERROR: "!!",
    LogLevel.VERBOSE: "**",
    LogLevel.DEBUG: "DD",
    LogLevel.DRY: "DRY",
}

LOG_LEVEL_STYLE = {
    LogLevel.INFO: UIStyle.CYAN.value,
    LogLevel.OK: UIStyle.GREEN.value,
    LogLevel.WARN: UIStyle.GREY.value,
    LogLevel.ERROR: UIStyle.RED.value,
    LogLevel.VERBOSE: UIStyle.MAGENTA.value,
    LogLevel.DEBUG: UIStyle.YELLOW.value,
    LogLevel.DRY: UIStyle.BRIGHT_CYAN.value,
}

STDOUT_LEVELS = frozenset({LogLevel.INFO, LogLevel.OK})

COPY_STATUS_STYLE = {
    CopyStatus.COPIED: UIStyle.GREEN.value,
    CopyStatus.SKIPPED: UIStyle.YELLOW.value,
    CopyStatus.FAILED: UIStyle.RED.value,
}
