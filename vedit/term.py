"""Terminal front end: key decoding, screen rendering and the main loop."""

from __future__ import annotations

import os
import signal
import sys
import termios

from vedit.editor import INTRO, VERSION, Editor, Key, Mode

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
RESET_STYLE = "\x1b[m"
TILDE = "\x1b[35m~\x1b[m"
ERROR_STYLE = "\x1b[41m"
ALT_SCREEN_ON = "\x1b[?1049h"
ALT_SCREEN_OFF = "\x1b[?1049l"

_READ_SIZE = 8
_STATUS_LIMIT = 79

_SPECIAL_KEYS = {ord("3"): Key.DELETE, ord("5"): Key.PAGEUP, ord("6"): Key.PAGEDOWN}
_ARROW_KEYS = {
    ord("A"): Key.UP,
    ord("B"): Key.DOWN,
    ord("C"): Key.RIGHT,
    ord("D"): Key.LEFT,
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}

_MODE_LETTERS = {Mode.NORMAL: "N", Mode.INSERT: "I", Mode.PROMPT: "P"}


def decode_key(data: bytes) -> int:
    """Turn one read from the terminal into a key code, 0 if unknown."""
    b = data[:_READ_SIZE].ljust(_READ_SIZE, b"\0")
    key = 0
    if 32 <= b[0] <= 126 and b[1] == 0:
        key = b[0]
    if b[0] == 0x0D and b[1] == 0:
        key = Key.ENTER
    if b[0] == 0x7F and b[1] == 0:
        key = Key.BACKSPACE
    if b[0] == 0x1B and b[1] == 0:
        key = Key.ESC
    if b[0] == 0x1B and b[1] == ord("[") and b[3] == ord("~") and b[4] == 0:
        key = _SPECIAL_KEYS.get(b[2], key)
    if b[0] == 0x1B and b[1] == ord("[") and b[3] == 0:
        key = _ARROW_KEYS.get(b[2], key)
    return int(key)


def render_row(editor: Editor, row: int) -> str:
    """Render one screen row, including the cursor move that places it."""
    parts = [f"\x1b[{row + 1};1H"]
    line_index = row + editor.offset_row
    if line_index >= len(editor.rows):
        parts.append(TILDE)
        if row == editor.ws_rows // 3 and not editor.rows:
            intro = f"{INTRO} | VERSION - {VERSION}"[: editor.ws_cols]
            padding = (editor.ws_cols - len(intro)) // 2
            parts.append(" " * padding)
            parts.append(intro)
    else:
        text = editor.rows[line_index]
        parts.append(text[editor.offset_col : editor.offset_col + editor.ws_cols])
    return "".join(parts)


def render_status(editor: Editor, last_key: int) -> str:
    """Render the status line below the text area."""
    status = (
        f"{editor.cursor_row + editor.offset_row + 1}/{len(editor.rows)},"
        f"{editor.cursor_col + editor.offset_col + 1} "
        f"[{_MODE_LETTERS[editor.mode]}] {last_key}"
    )[:_STATUS_LIMIT]

    parts = ["\r\n"]
    if editor.mode is Mode.PROMPT:
        parts.append(editor.prompt)
        return "".join(parts)

    remaining = editor.ws_cols
    if editor.is_error:
        parts.append(ERROR_STYLE)
    if editor.show_message:
        parts.append(editor.message)
        remaining -= len(editor.message)

    status_len = len(status)
    if status_len >= editor.ws_cols:
        status_len = max(remaining, 0)
    parts.append(" " * max(remaining - status_len, 0))
    parts.append(RESET_STYLE)
    parts.append(status[:status_len])
    return "".join(parts)


def render_frame(editor: Editor, last_key: int) -> str:
    """Render the whole screen as one string of escape sequences."""
    parts = [HIDE_CURSOR, CLEAR_SCREEN, CURSOR_HOME]
    parts.extend(render_row(editor, row) for row in range(editor.ws_rows))
    parts.append(render_status(editor, last_key))
    parts.append(
        f"\x1b[{editor.cursor_row - editor.offset_row + 1};"
        f"{editor.cursor_col - editor.offset_col + 1}H"
    )
    parts.append(SHOW_CURSOR)
    return "".join(parts)


class Terminal:
    """Drives an Editor from a terminal's input and output descriptors."""

    def __init__(self, stdin_fd: int | None = None, stdout_fd: int | None = None) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self.editor = Editor()
        self.last_key = 0
        self._saved_attrs: list | None = None

    def update_window_size(self) -> None:
        """Query the terminal size, reserve a status row and redraw."""
        size = os.get_terminal_size(self.stdout_fd)
        self.editor.set_window_size(max(size.lines - 1, 0), size.columns)
        self.render()

    def read_key(self) -> int:
        """Read one key press, feed it to the editor and return it."""
        key = decode_key(os.read(self.stdin_fd, _READ_SIZE))
        self.last_key = key
        self.editor.handle_key(key)
        return key

    def render(self) -> None:
        """Write the current frame to the output."""
        os.write(self.stdout_fd, render_frame(self.editor, self.last_key).encode())

    def run(self) -> None:
        """Run the editor until it is asked to quit."""
        self._enable_raw()
        try:
            os.write(self.stdout_fd, ALT_SCREEN_ON.encode())
            try:
                self.update_window_size()
                previous = signal.signal(signal.SIGWINCH, self._on_resize)
                try:
                    while self.editor.running:
                        self.render()
                        self.read_key()
                finally:
                    signal.signal(signal.SIGWINCH, previous)
            finally:
                os.write(self.stdout_fd, ALT_SCREEN_OFF.encode())
        finally:
            self._disable_raw()

    def _on_resize(self, signum, frame) -> None:
        self.update_window_size()

    def _enable_raw(self) -> None:
        attrs = termios.tcgetattr(self.stdin_fd)
        self._saved_attrs = [list(a) if isinstance(a, list) else a for a in attrs]
        iflag, oflag, cflag, lflag = attrs[0], attrs[1], attrs[2], attrs[3]
        iflag &= ~(termios.IXON | termios.ICRNL | termios.BRKINT | termios.INPCK | termios.ISTRIP)
        oflag &= ~termios.OPOST
        cflag |= termios.CS8
        lflag &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        attrs[0:4] = [iflag, oflag, cflag, lflag]
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, attrs)

    def _disable_raw(self) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attrs)
            self._saved_attrs = None


def main(argv: list[str] | None = None) -> int:
    """Start the editor on the controlling terminal."""
    try:
        Terminal().run()
    except (OSError, termios.error) as exc:
        print(f"vedit: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())