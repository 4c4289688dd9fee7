from rulebook.tui.renderers import RulebookConsoleUI

__all__ = ["RulebookConsoleUI"]
