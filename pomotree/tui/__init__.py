"""Terminal user interface for pomotree."""

from pomotree.tui.app import PomoTreeApp
from pomotree.tui.keys import KeyDecoder

__all__ = ["PomoTreeApp", "KeyDecoder"]
