"""
Terminal output for the renderer.

`TerminalController` prepares the terminal for an animation and restores it afterwards;
`TerminalDisplay` writes finished frames to a text stream.
"""

import sys
import time
import types
from typing import Optional, TextIO

# ANSI escape sequences for terminal control.
_CLEAR_SCREEN = "\033[2J"
_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"


class TerminalController:
    """
    Context manager to configure terminal state for animation.

    On enter, clears the screen and hides the cursor. On exit, shows the cursor and clears the
    screen to restore the terminal.

    Usage:
        ```python
        with TerminalController():
            driver.run()
        ```
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def __enter__(self) -> "TerminalController":
        """
        Prepare the terminal for rendering.

        Returns:
            TerminalController: The controller instance for use in a with-statement.
        """
        self.stream.write(_CLEAR_SCREEN)
        self.stream.write(_HIDE_CURSOR)
        self.stream.flush()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """
        Restore terminal state after rendering.

        Args:
            exc_type: Exception type if raised inside the context.
            exc_val: Exception value if raised inside the context.
            exc_tb: Traceback if exception was raised.
        """
        self.stream.write(_SHOW_CURSOR)
        self.stream.write(_CLEAR_SCREEN)
        self.stream.flush()


class TerminalDisplay:
    """
    Writes frames to a text stream, one after another.

    Frames carry their own cursor-home prefix, so each one overwrites the last.

    Attributes:
        stream (TextIO): Destination, `sys.stdout` by default.
        frame_delay (float): Seconds to sleep after each frame.
    """

    def __init__(self, stream: Optional[TextIO] = None, frame_delay: float = 0.0) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.frame_delay = frame_delay

    def show(self, frame: str) -> None:
        self.stream.write(frame)
        self.stream.flush()
        if self.frame_delay > 0:
            time.sleep(self.frame_delay)
