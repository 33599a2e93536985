from copy_configs.tui.renderers import CopyConsoleUI

__all__ = ["CopyConsoleUI"]
