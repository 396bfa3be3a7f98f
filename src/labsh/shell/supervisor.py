"""Create, replace and reap child processes, one command at a time."""

import logging
import os
import sys
from typing import BinaryIO, NoReturn

from labsh.constants import EXEC_FAILURE_STATUS
from labsh.errors import ChildCreationError, HandleReapedError
from labsh.models import ChildHandle, ChildRole, CommandLine, ExitOutcome, ParentRole

log = logging.getLogger(__name__)


def create_child_context() -> ChildRole | ParentRole:
    """Fork, telling each side which one it is."""
    # Anything still buffered would otherwise be written twice.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError as e:
        raise ChildCreationError(str(e)) from e
    if pid == 0:
        return ChildRole()
    return ParentRole(ChildHandle(pid))


def replace_image(path: bytes) -> NoReturn:
    """Run ``path`` in place of the current process. Returns only by raising."""
    os.execv(path, [path])


def wait_child(handle: ChildHandle) -> int:
    """Block until the child behind ``handle`` terminates and return its exit code."""
    if handle.reaped:
        raise HandleReapedError(f"child {handle.pid} was already reaped")
    _, status = os.waitpid(handle.pid, 0)
    handle.reaped = True
    return os.waitstatus_to_exitcode(status)


def _report(stderr: BinaryIO, text: str) -> None:
    stderr.write(text.encode(errors="surrogateescape"))
    stderr.flush()


def _run_child(command: CommandLine, stderr: BinaryIO) -> NoReturn:
    try:
        replace_image(command.value)
    except (OSError, ValueError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        _report(stderr, f"exec failed: {command.text}: {reason}\n")
    finally:
        os._exit(EXEC_FAILURE_STATUS)


def spawn(command: CommandLine, stderr: BinaryIO | None = None) -> ExitOutcome:
    """Run ``command`` as a literal executable path and wait for it to exit.

    The line is not split: it is both the program path and its argv[0]. The
    child inherits the shell's standard streams. Creation and image
    replacement failures are reported on ``stderr`` (the process's binary
    stderr by default); when no child can be created an outcome without a
    pid is returned.
    """
    if stderr is None:
        stderr = sys.stderr.buffer
    try:
        role = create_child_context()
    except ChildCreationError as e:
        log.debug("fork failed for %r: %s", command.text, e)
        _report(stderr, f"fork failed: {e}\n")
        return ExitOutcome(command=command.text)

    if isinstance(role, ChildRole):
        _run_child(command, stderr)

    handle = role.handle
    log.debug("spawned pid %d for %r", handle.pid, command.text)
    returncode = wait_child(handle)
    log.debug("pid %d exited with %d", handle.pid, returncode)
    return ExitOutcome(command=command.text, pid=handle.pid, returncode=returncode)
