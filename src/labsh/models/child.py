"""Child process models used by the process supervisor."""

from dataclasses import dataclass


@dataclass
class ChildHandle:
    """A spawned process, owned by the supervisor until it is reaped."""

    pid: int
    reaped: bool = False


@dataclass(frozen=True)
class ChildRole:
    """Result of process creation as seen from inside the new child."""


@dataclass(frozen=True)
class ParentRole:
    """Result of process creation as seen from the original process."""

    handle: ChildHandle


@dataclass(frozen=True)
class ExitOutcome:
    """What happened to one dispatched command.

    ``returncode`` follows ``os.waitstatus_to_exitcode``: negative values mean
    the child was killed by that signal. Both ``pid`` and ``returncode`` are
    None when no child could be created.
    """

    command: str
    pid: int | None = None
    returncode: int | None = None

    @property
    def started(self) -> bool:
        return self.pid is not None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def signaled(self) -> bool:
        return self.returncode is not None and self.returncode < 0
