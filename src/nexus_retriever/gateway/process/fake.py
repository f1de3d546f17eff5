"""Fake ProcessRunner implementation for testing.

FakeProcessRunner returns pre-configured results keyed by the executable
name, and records every command it is asked to run.
"""

from collections.abc import Sequence
from pathlib import Path

from nexus_retriever.errors import ProcessLaunchError
from nexus_retriever.gateway.process.abc import ProcessResult, ProcessRunner


class FakeProcessRunner(ProcessRunner):
    """In-memory fake that returns configured results.

    This class has NO public setup methods. All state is provided via constructor.

    Results are looked up by the executable's file name, so both
    ``/opt/maven/bin/mvn`` and ``mvn`` match the key ``"mvn"``. Commands with
    no configured result raise ProcessLaunchError, like a missing executable.
    """

    def __init__(
        self,
        *,
        results: dict[str, ProcessResult] | None = None,
        outputs_to_create: dict[Path, bytes] | None = None,
    ) -> None:
        """Create FakeProcessRunner with configured results.

        Args:
            results: Mapping of executable name to the result it produces
            outputs_to_create: Files written when any command succeeds,
                standing in for what the real tool would download
        """
        self._results = results if results is not None else {}
        self._outputs_to_create = outputs_to_create if outputs_to_create is not None else {}
        self._run_calls: list[list[str]] = []

    def run(self, cmd: Sequence[str]) -> ProcessResult:
        argv = list(cmd)
        self._run_calls.append(argv)

        key = Path(argv[0]).name
        if key not in self._results:
            msg = f"Failed to start {argv[0]}: not configured in FakeProcessRunner"
            raise ProcessLaunchError(msg)

        result = self._results[key]
        if result.succeeded:
            for path, content in self._outputs_to_create.items():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_bytes(content)
        return result

    @property
    def run_calls(self) -> list[list[str]]:
        """Commands run during the test, in order."""
        return [list(call) for call in self._run_calls]
