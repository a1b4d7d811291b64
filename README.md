# vedit

A small modal text editor shell that runs in your terminal. It switches the
terminal to raw mode and the alternate screen, draws the screen and a status
bar, and accepts vi-style keys.

## Install

```
pip install .
```

## Run

```
vedit
```

The editor starts in normal mode on an empty screen. Each empty row shows a
`~`, and the intro line `VE - Text Editor | VERSION - 0.0.1` is centred a
third of the way down. It needs a real POSIX terminal. If the terminal cannot
be set up, `vedit` prints the error to standard error and exits with status 1.

## Keys

Normal mode:

| Key                   | Action                                          |
|-----------------------|-------------------------------------------------|
| `h` / Left            | move the cursor one column left                 |
| `l` / Right           | move the cursor one column right                |
| `j` / Down            | move the cursor one row down                    |
| `k` / Up              | move the cursor one row up                      |
| Home / End            | move the cursor one screen width left or right  |
| Page Up / Page Down   | move the cursor one screen height up or down    |
| `:` or `/`            | open the prompt, starting with that character   |

The cursor stays inside the screen.

Prompt mode:

- Printable characters are added to the prompt.
- Backspace deletes the last character. It leaves the prompt once the prompt
  is empty.
- Escape leaves the prompt without running it.
- Enter runs the prompt and goes back to normal mode.

Commands:

- `:quit` leaves the editor and restores the terminal.
- `:hello` shows `hello, world!` in the status bar, on a red background.

Any other command, and any prompt that starts with `/`, does nothing when run.

## Status bar

The bottom line shows `row/total,col [mode] key`. `total` is the number of
text rows held by the editor. The mode is `N` for normal, `I` for insert or
`P` for prompt. `key` is the code of the last key pressed, or `0` for input
that is not recognised. In prompt mode the status bar shows the prompt instead.

## Using it as a library

`vedit.editor.Editor` holds the editor state and needs no terminal:

```python
from vedit.editor import Editor, Key, Mode

editor = Editor()
editor.set_window_size(24, 80)
editor.handle_key(ord("l"))
editor.handle_key(Key.DOWN)
assert (editor.cursor_row, editor.cursor_col) == (1, 1)

for ch in ":quit":
    editor.handle_key(ord(ch))
editor.handle_key(Key.ENTER)
assert not editor.running and editor.mode is Mode.NORMAL
```

`handle_key` takes integer key codes: the code of a printable character, or a
`Key` value. `set_window_size` raises `ValueError` for a negative size.

In `vedit.term`, `decode_key` turns raw input bytes into a key code,
`render_row`, `render_status` and `render_frame` build the escape sequences
for one screen, and `Terminal` ties an `Editor` to terminal file descriptors
and runs the main loop. The terminal is redrawn when its window is resized.

## What it does not do

vedit does not open, edit or save files. It has no way to load text, insert
mode cannot be entered and does not react to keys, and there is no search.
Only the empty screen, cursor movement, the prompt and the two commands above
work.