"""Process-wide shell state."""

import sys
from dataclasses import dataclass, field
from typing import BinaryIO

from labsh.models.child import ExitOutcome
from labsh.models.shell_config import ShellConfig


@dataclass
class ShellSession:
    """Streams and loop state for one run of the shell."""

    stdin: BinaryIO
    stdout: BinaryIO
    stderr: BinaryIO
    config: ShellConfig = field(default_factory=ShellConfig)
    running: bool = True

    @classmethod
    def from_std(cls, config: ShellConfig | None = None) -> "ShellSession":
        return cls(
            # Unbuffered so no input meant for a child is read ahead.
            stdin=sys.stdin.buffer.raw,
            stdout=sys.stdout.buffer,
            stderr=sys.stderr.buffer,
            config=config or ShellConfig(),
        )


@dataclass
class ShellReport:
    """Summary returned when the loop terminates."""

    commands_run: int = 0
    last_outcome: ExitOutcome | None = None
