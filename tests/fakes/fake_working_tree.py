"""FakeWorkingTree: test double for GitWorkingTree."""


class FakeWorkingTree:
    """Returns canned uncommitted paths.

    When given a runner, records how many commands it had run at each call
    so tests can check the warning came first.
    """

    def __init__(self, uncommitted=None, runner=None):
        self._uncommitted = list(uncommitted or [])
        self._runner = runner
        self.calls = 0
        self.runner_calls_seen = []

    def uncommitted_paths(self):
        self.calls += 1
        if self._runner is not None:
            self.runner_calls_seen.append(len(self._runner.calls))
        return list(self._uncommitted)
