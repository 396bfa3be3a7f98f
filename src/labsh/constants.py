"""Shared constants for labsh."""

DEFAULT_PROMPT = "~ # "
DEFAULT_BANNER = "Running Shell..."

# Buffer size for one command line, terminator included.
MAX_LINE_LENGTH = 1024
LINE_TERMINATOR = b"\n"

ECHO_PREFIX = "\n Running command: "

# Status a child exits with when its image could not be replaced.
EXEC_FAILURE_STATUS = 1
