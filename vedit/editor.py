"""Editor state machine: modes, cursor movement and the command prompt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

VERSION = "0.0.1"
INTRO = "VE - Text Editor"
TABSTOP = 8

HELLO_MESSAGE = "hello, world!"


class Mode(IntEnum):
    """Editing modes."""

    NORMAL = 0
    INSERT = 1
    PROMPT = 2


class Key(IntEnum):
    """Non-printable keys, numbered above the byte range."""

    UP = 1024
    DOWN = 1025
    LEFT = 1026
    RIGHT = 1027
    PAGEUP = 1028
    PAGEDOWN = 1029
    HOME = 1030
    END = 1031
    ENTER = 1032
    BACKSPACE = 1033
    DELETE = 1034
    ESC = 1035


_REPEATS = {
    Key.HOME: Key.LEFT,
    Key.END: Key.RIGHT,
    Key.PAGEDOWN: Key.DOWN,
    Key.PAGEUP: Key.UP,
}


def _is_printable(key: int) -> bool:
    return 32 <= key <= 126


@dataclass
class Editor:
    """The whole state of the editor, driven one key at a time."""

    ws_rows: int = field(default=0, init=False)
    ws_cols: int = field(default=0, init=False)
    cursor_row: int = field(default=0, init=False)
    cursor_col: int = field(default=0, init=False)
    offset_row: int = field(default=0, init=False)
    offset_col: int = field(default=0, init=False)
    rows: list[str] = field(default_factory=list, init=False)
    mode: Mode = field(default=Mode.NORMAL, init=False)
    running: bool = field(default=True, init=False)
    prompt: str = field(default="", init=False)
    message: str = field(default="", init=False)
    is_error: bool = field(default=False, init=False)
    show_message: bool = field(default=False, init=False)

    def __init__(self) -> None:
        self.ws_rows = 0
        self.ws_cols = 0
        self.cursor_row = 0
        self.cursor_col = 0
        self.offset_row = 0
        self.offset_col = 0
        self.rows = []
        self.mode = Mode.NORMAL
        self.running = True
        self.prompt = ""
        self.message = ""
        self.is_error = False
        self.show_message = False

    def set_window_size(self, rows: int, cols: int) -> None:
        """Set the size of the editing area; negative sizes are rejected."""
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid window size: {rows}x{cols}")
        self.ws_rows = rows
        self.ws_cols = cols

    def handle_key(self, key: int) -> None:
        """Advance the state by one key press."""
        self.show_message = False
        self.is_error = False

        if self.mode is Mode.NORMAL:
            self._normal(key)
        elif self.mode is Mode.PROMPT:
            self._prompt(key)
        # Insert mode does not react to keys yet.

    def _normal(self, key: int) -> None:
        if key in (Key.LEFT, ord("h")):
            if self.cursor_col != 0:
                self.cursor_col -= 1
        elif key in (Key.RIGHT, ord("l")):
            if self.cursor_col != self.ws_cols - 1:
                self.cursor_col += 1
        elif key in (Key.DOWN, ord("j")):
            if self.cursor_row != self.ws_rows - 1:
                self.cursor_row += 1
        elif key in (Key.UP, ord("k")):
            if self.cursor_row != 0:
                self.cursor_row -= 1
        elif key in _REPEATS:
            unit = _REPEATS[Key(key)]
            count = self.ws_rows if key in (Key.PAGEUP, Key.PAGEDOWN) else self.ws_cols
            for _ in range(count):
                self.handle_key(unit)
        elif key in (ord(":"), ord("/")):
            self.mode = Mode.PROMPT
            self.prompt = chr(key)

    def _prompt(self, key: int) -> None:
        if _is_printable(key):
            self.prompt += chr(key)
        if key == Key.BACKSPACE:
            self.prompt = self.prompt[:-1]
            if not self.prompt:
                self.mode = Mode.NORMAL
        if key == Key.ENTER:
            self._execute_prompt()
            self.mode = Mode.NORMAL
        if key == Key.ESC:
            self.mode = Mode.NORMAL

    def _execute_prompt(self) -> None:
        if not self.prompt.startswith(":"):
            return
        command = self.prompt[1:]
        if command == "quit":
            self.running = False
        elif command == "hello":
            self.message = HELLO_MESSAGE
            self.show_message = True
            self.is_error = True