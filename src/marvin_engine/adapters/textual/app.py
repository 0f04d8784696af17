"""Executable Textual app wiring the command engine to a TextArea."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo runs
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as TextAreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use marvin_engine.adapters.textual.app"
    ) from exc

from marvin_engine.buffer import BufferMirror
from marvin_engine.commands import CommandDispatcher, CommandId
from marvin_engine.runtime import telemetry

from .controller import TextualCommandAdapter, TextualUIHooks

COMMAND_KEYS: tuple[tuple[str, CommandId, str], ...] = (
    ("ctrl+w", CommandId.SELECT_CURRENT_WORD, "Word"),
    ("ctrl+n", CommandId.SELECT_NEXT_WORD, "Next"),
    ("ctrl+p", CommandId.SELECT_PREVIOUS_WORD, "Prev"),
    ("ctrl+up", CommandId.SELECT_WORD_ABOVE, "Above"),
    ("ctrl+down", CommandId.SELECT_WORD_BELOW, "Below"),
    ("ctrl+l", CommandId.SELECT_LINE_CONTENTS, "Line"),
    ("ctrl+d", CommandId.DUPLICATE_LINE, "Dup"),
    ("ctrl+o", CommandId.MOVE_TO_EOL_AND_INSERT_LF, "Open"),
)


class MarvinApp(App[None]):
    """TextArea editor with the engine's commands on priority bindings."""

    CSS = """
	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [Binding("ctrl+q", "quit", "Quit")] + [
        Binding(key, f"marvin('{command.value}')", label, priority=True)
        for key, command, label in COMMAND_KEYS
    ]

    def __init__(self, *, text: str = "") -> None:
        super().__init__()
        self._initial_text = text
        self.adapter: TextualCommandAdapter | None = None
        self._editor: TextArea | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea(self._initial_text, id="editor")
        yield self._editor
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualCommandAdapter(CommandDispatcher(), hooks)
        if self._editor is not None:
            self._editor.focus()

    def action_marvin(self, identifier: str) -> None:
        if self.adapter is None or self._editor is None:
            return
        selection = self._editor.selection
        self.adapter.sync_from_host(self._editor.text, selection.start, selection.end)
        self.adapter.handle_command(identifier)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._editor is None:
            return
        if mirror.text != self._editor.text:
            self._editor.load_text(mirror.text)
        start, end = mirror.selection
        self._editor.selection = TextAreaSelection(start=start, end=end)

    def _update_status(self, status: str) -> None:
        if self._status is not None:
            self._status.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("textual.adapter", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Marvin engine Textual demo.")
    parser.add_argument("file", nargs="?", help="Text file to open")
    parser.add_argument(
        "--log-file",
        default=os.environ.get("MARVIN_ENGINE_LOG_FILE", ""),
        help="Write engine logs to this file instead of the console",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    # console output would draw over the TUI
    os.environ["MARVIN_ENGINE_DISABLE_CONSOLE"] = "1"
    if args.log_file:
        os.environ["MARVIN_ENGINE_LOG_FILE"] = args.log_file
    telemetry.configure()
    text = Path(args.file).read_text(encoding="utf-8") if args.file else ""
    MarvinApp(text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
