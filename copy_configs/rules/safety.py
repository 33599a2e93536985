"""Path-safety checks for rule patterns and destinations."""

from __future__ import annotations

from typing import Optional

from copy_configs.models import UnsafePathReason


_REASON_TEXT = {
    UnsafePathReason.TRAVERSAL: "Path traversal detected in",
    UnsafePathReason.ABSOLUTE: "Absolute paths not allowed in config",
    UnsafePathReason.HOME_RELATIVE: "Home directory paths not allowed in config",
}


def validate_path(path: str) -> Optional[UnsafePathReason]:
    """Return the rejection reason for ``path``, or None when it is safe."""
    if ".." in path.split("/"):
        return UnsafePathReason.TRAVERSAL
    if path.startswith("/"):
        return UnsafePathReason.ABSOLUTE
    if path.startswith("~/"):
        return UnsafePathReason.HOME_RELATIVE
    return None


def is_safe_path(path: str) -> bool:
    return validate_path(path) is None


def describe_rejection(path: str, reason: UnsafePathReason) -> str:
    return f"{_REASON_TEXT[reason]}: {path}"
