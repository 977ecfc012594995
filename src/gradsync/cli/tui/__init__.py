"""
TUI Module - Textual front end for gradsync.
"""

from .app import GradsyncTUI, run_tui
from .presenter import TextualPresenter

__all__ = ["GradsyncTUI", "run_tui", "TextualPresenter"]
