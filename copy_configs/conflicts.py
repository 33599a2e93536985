from pathlib import Path
from typing import Optional

from copy_configs.models import ConflictDecision, ConflictMode
from copy_configs.utils import backup_path_for, now_stamp, path_exists


class ConflictResolver:
    """Map (destination exists, conflict mode) to a ConflictDecision.

    One backup stamp is shared by the whole run. When a backup name is
    already taken a numeric suffix is added, so earlier backups survive.
    """

    def __init__(self, mode: ConflictMode, stamp: Optional[str] = None) -> None:
        self.mode = mode
        self.stamp = stamp or now_stamp()

    def decide(self, destination: Path) -> ConflictDecision:
        if not path_exists(destination):
            return ConflictDecision.proceed()
        if self.mode == ConflictMode.SKIP:
            return ConflictDecision.skip()
        if self.mode == ConflictMode.BACKUP:
            return ConflictDecision.after_backup(
                backup_path_for(destination, self.stamp)
            )
        return ConflictDecision.proceed()
