"""Terminal viewer: a TextBufferView driven by the scroll controller."""

import os
import select
import signal
from typing import Dict, Optional, Tuple

from . import commands as cmd
from .buffer import TextBufferView
from .config import ScrollConfig
from .constants import ScrollConstants
from .controller import ScrollController
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .terminal import TerminalInterface

KeyBinding = Tuple[KeyType, str]

# Single-key bindings
DEFAULT_BINDINGS: Dict[KeyBinding, str] = {
    (KeyType.CTRL, 'v'): cmd.SCROLL_VERTICAL_UP,
    (KeyType.ALT, 'v'): cmd.SCROLL_VERTICAL_DOWN,
    (KeyType.SPECIAL, 'page_down'): cmd.SCROLL_VERTICAL_UP,
    (KeyType.SPECIAL, 'page_up'): cmd.SCROLL_VERTICAL_DOWN,
    (KeyType.CTRL, 'l'): cmd.RECENTRE_ON_CARET,
    (KeyType.SPECIAL, 'up'): cmd.PREVIOUS_LINE,
    (KeyType.SPECIAL, 'down'): cmd.NEXT_LINE,
    (KeyType.CTRL, 'p'): cmd.PREVIOUS_LINE,
    (KeyType.CTRL, 'n'): cmd.NEXT_LINE,
    (KeyType.SPECIAL, 'left'): cmd.BACKWARD_CHAR,
    (KeyType.SPECIAL, 'right'): cmd.FORWARD_CHAR,
    (KeyType.CTRL, 'b'): cmd.BACKWARD_CHAR,
    (KeyType.CTRL, 'f'): cmd.FORWARD_CHAR,
    (KeyType.CTRL, 'a'): cmd.BEGINNING_OF_LINE,
    (KeyType.CTRL, 'e'): cmd.END_OF_LINE,
    (KeyType.SPECIAL, 'home'): cmd.BEGINNING_OF_LINE,
    (KeyType.SPECIAL, 'end'): cmd.END_OF_LINE,
}

# Bindings after the C-x prefix
CTRL_X_BINDINGS: Dict[KeyBinding, str] = {
    (KeyType.REGULAR, '<'): cmd.SCROLL_HORIZONTAL_LEFT,
    (KeyType.REGULAR, '>'): cmd.SCROLL_HORIZONTAL_RIGHT,
    (KeyType.REGULAR, 't'): cmd.TOGGLE_TRUNCATION,
    (KeyType.CTRL, 'n'): cmd.SET_GOAL_COLUMN,
}


class Viewer:
    """Main viewer application controller."""

    def __init__(self, config: Optional[ScrollConfig] = None,
                 terminal: Optional[TerminalInterface] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.controller = ScrollController(config)
        self.view = TextBufferView(num_rows=max(1, self.terminal.height),
                                   num_columns=max(1, self.terminal.width))
        self.controller.attach(self.view)
        self.filename: Optional[str] = None
        self.running = False
        self.status_message: Optional[str] = None
        # Emacs-style prefix state
        self._ctrl_x_pending = False
        self._prefix_arg: Optional[str] = None
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def load_file(self, filename: str) -> None:
        """Load a file into the viewer, replacing the buffer."""
        self.filename = filename
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError:
            self.status_message = f"New file: {filename}"
            return
        self.view.lines = text.split('\n') if text else [""]
        self.view.jump_to_document_start()

    def _handle_resize(self, signum, frame):
        del signum, frame  # Unused
        os.write(self._resize_pipe_w, ScrollConstants.RESIZE_PIPE_MARKER)

    def run(self) -> None:
        """Run the main viewer loop."""
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        try:
            with self.terminal.term.cbreak():
                self._draw()
                while self.running:
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        self.terminal.invalidate_frame()
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            self.handle_key_event(key_event)
                    self._draw()
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    def _draw(self) -> None:
        if self.terminal.width < ScrollConstants.MIN_TERMINAL_WIDTH:
            self.terminal.draw_error_message(
                ScrollConstants.TERMINAL_TOO_NARROW_MESSAGE.format(ScrollConstants.MIN_TERMINAL_WIDTH),
                ScrollConstants.CURRENT_WIDTH_MESSAGE.format(self.terminal.width),
            )
            return
        self.view.num_rows = max(1, self.terminal.height)
        self.view.num_columns = self.terminal.width
        if self.view.redraw_requested:
            self.terminal.invalidate_frame()
            self.view.redraw_requested = False
        y, x = self.view.visual_cursor()
        self.terminal.update_frame(self.view.render(), y, x, self.view.num_columns,
                                   status=self.status_line())

    def status_line(self) -> str:
        if self.status_message:
            return f" {self.status_message}"
        pos = self.view.cursor_position
        mode = "Trunc" if self.view.truncate_lines else "Wrap"
        name = self.filename or "*scratch*"
        return (f" {name}  L{pos.row + 1} C{pos.column}  "
                f"hscroll {self.view.get_horizontal_offset()}  {mode}")

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Translate a key into a command run, tracking C-x and C-u prefixes."""
        self.status_message = None
        key = (key_event.key_type, key_event.value)

        if key == (KeyType.CTRL, 'g'):
            self._ctrl_x_pending = False
            self._prefix_arg = None
            self.status_message = "Quit"
            return

        if self._ctrl_x_pending:
            self._ctrl_x_pending = False
            if key == (KeyType.CTRL, 'c'):
                self.running = False
                return
            self._run(CTRL_X_BINDINGS.get(key))
            return

        if key == (KeyType.CTRL, 'x'):
            self._ctrl_x_pending = True
            return
        if key == (KeyType.CTRL, 'q'):
            self.running = False
            return
        if key == (KeyType.CTRL, 'u'):
            self._prefix_arg = ""
            return
        if (self._prefix_arg is not None and key_event.key_type == KeyType.REGULAR
                and (key_event.value.isdigit() or (key_event.value == '-' and not self._prefix_arg))):
            self._prefix_arg += key_event.value
            return

        name = DEFAULT_BINDINGS.get(key)
        if name is not None:
            self._run(name)
        elif key_event.key_type == KeyType.REGULAR:
            self._run(cmd.INSERT_CHAR, key_event.value)
        elif key == (KeyType.SPECIAL, 'enter'):
            self._run(cmd.INSERT_CHAR, '\n')

    def _consume_prefix_arg(self) -> Optional[int]:
        prefix, self._prefix_arg = self._prefix_arg, None
        if prefix is None:
            return None
        if prefix in ("", "-"):
            return 4 if prefix == "" else -1
        return int(prefix)

    def _run(self, name: Optional[str], arg=None) -> None:
        prefix = self._consume_prefix_arg()
        if name is None:
            self.status_message = "Key not bound"
            return
        if arg is None:
            arg = prefix
        self.controller.execute(self.view, name, arg)
