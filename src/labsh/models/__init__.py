"""Model package for labsh."""

from labsh.models.child import ChildHandle, ChildRole, ExitOutcome, ParentRole
from labsh.models.command_line import END_OF_STREAM, CommandLine, EndOfStream
from labsh.models.shell_config import ShellConfig
from labsh.models.shell_session import ShellReport, ShellSession

__all__ = [
    "END_OF_STREAM",
    "ChildHandle",
    "ChildRole",
    "CommandLine",
    "EndOfStream",
    "ExitOutcome",
    "ParentRole",
    "ShellConfig",
    "ShellReport",
    "ShellSession",
]
