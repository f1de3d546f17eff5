"""Real process runner using subprocess.Popen."""

import logging
import os
import signal
import subprocess
from collections.abc import Sequence

from nexus_retriever.errors import ProcessLaunchError, ProcessOutputError, ProcessTimeoutError
from nexus_retriever.gateway.process.abc import ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)

_POSIX = os.name == "posix"


def _terminate(process: subprocess.Popen[str]) -> None:
    """Kill the child and reap it without reading the rest of its output.

    On POSIX the child leads its own session, so the whole process group is
    killed and no grandchild keeps the output pipe open.
    """
    if _POSIX:
        try:
            os.killpg(process.pid, signal.SIGKILL)
        except (ProcessLookupError, PermissionError):
            pass
    else:
        process.kill()
    if process.stdout is not None:
        process.stdout.close()
    process.wait()


class RealProcessRunner(ProcessRunner):
    """Production implementation that launches the command without a shell.

    stderr is merged into stdout. The whole stream is read before waiting on
    the child, so a chatty process cannot block on a full pipe.
    """

    def __init__(self, *, timeout_seconds: float | None = None) -> None:
        """Create a runner.

        Args:
            timeout_seconds: Kill the child and anything it started if it runs
                longer than this. None waits indefinitely.
        """
        self._timeout_seconds = timeout_seconds

    def run(self, cmd: Sequence[str]) -> ProcessResult:
        argv = list(cmd)
        logger.debug("Running %s", argv)
        try:
            process = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
                start_new_session=_POSIX,
            )
        except OSError as e:
            msg = f"Failed to start {argv[0]}: {e}"
            raise ProcessLaunchError(msg) from e

        try:
            output, _ = process.communicate(timeout=self._timeout_seconds)
        except subprocess.TimeoutExpired as e:
            _terminate(process)
            msg = f"{argv[0]} did not finish within {e.timeout} seconds"
            raise ProcessTimeoutError(msg, timeout_seconds=e.timeout) from e
        except OSError as e:
            _terminate(process)
            msg = f"Failed to read output of {argv[0]}: {e}"
            raise ProcessOutputError(msg) from e

        logger.debug("%s exited with %d", argv[0], process.returncode)
        return ProcessResult(exit_code=process.returncode, output=output or "")
