"""Line reader, process supervisor and the loop that drives them."""

from labsh.shell.loop import shell_loop
from labsh.shell.reader import read_line
from labsh.shell.supervisor import (
    create_child_context,
    replace_image,
    spawn,
    wait_child,
)

__all__ = [
    "create_child_context",
    "read_line",
    "replace_image",
    "shell_loop",
    "spawn",
    "wait_child",
]
