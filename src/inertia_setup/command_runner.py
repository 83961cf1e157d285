"""CommandRunner: runs external commands in the foreground.

Injected into ProjectScaffolder so tests can use FakeCommandRunner
instead of spawning real processes.
"""

import subprocess
from typing import List


class CommandRunner:
    """Runs a command to completion, inheriting the terminal.

    The generator may ask questions, so stdin/stdout/stderr are not captured.
    """

    def run(self, cmd: List[str], cwd: str) -> subprocess.CompletedProcess:
        return subprocess.run(cmd, cwd=cwd)
