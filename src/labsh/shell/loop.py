"""The read, echo, dispatch loop."""

import logging
from typing import BinaryIO

from labsh.constants import ECHO_PREFIX
from labsh.models import EndOfStream, ExitOutcome, ShellReport, ShellSession
from labsh.shell.reader import read_line
from labsh.shell.supervisor import spawn

log = logging.getLogger(__name__)


def _write(stream: BinaryIO, text: str) -> None:
    # Flush on every write so child output lands after ours.
    stream.write(text.encode(errors="surrogateescape"))
    stream.flush()


def _format_outcome(outcome: ExitOutcome) -> str | None:
    if not outcome.started:
        return None
    if outcome.signaled:
        return f"[killed by signal {-outcome.returncode}]\n"
    return f"[exit {outcome.returncode}]\n"


def shell_loop(session: ShellSession) -> ShellReport:
    """Prompt, read, echo and run commands until the input stream ends."""
    config = session.config
    report = ShellReport()

    if config.banner:
        _write(session.stdout, config.banner + "\n")

    while session.running:
        _write(session.stdout, config.prompt)

        line = read_line(session.stdin, config.max_line_length)
        if isinstance(line, EndOfStream):
            session.running = False
            break

        if config.echo:
            _write(session.stdout, f"{ECHO_PREFIX}{line.text}\n")

        outcome = spawn(line, stderr=session.stderr)
        report.commands_run += 1
        report.last_outcome = outcome

        if config.report_status:
            status = _format_outcome(outcome)
            if status:
                _write(session.stderr, status)

    log.debug("input ended after %d commands", report.commands_run)
    return report
