"""Textual host adapter. The app module needs the ``textual`` package."""

from .controller import TextualCommandAdapter, TextualUIHooks

__all__ = ["TextualCommandAdapter", "TextualUIHooks"]
