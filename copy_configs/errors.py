from pathlib import Path


class CopyConfigsError(Exception):
    """Base user-facing application error."""


class MissingDependencyError(CopyConfigsError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Missing required command: {command}")


class NoTargetsError(CopyConfigsError):
    def __init__(self) -> None:
        super().__init__("No target paths provided")


class ConfigFileError(CopyConfigsError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class UnreadableConfigError(ConfigFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Config file not accessible")


class SourceRootError(CopyConfigsError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Source root does not exist: {path}")


class CopyBackendError(CopyConfigsError):
    def __init__(self, source: Path, destination: Path, detail: str) -> None:
        self.source = source
        self.destination = destination
        self.detail = detail
        super().__init__(f"Failed to copy {source} to {destination}: {detail}")
