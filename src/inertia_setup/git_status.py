"""GitWorkingTree: wraps GitPython to report uncommitted changes.

Provides an injectable interface so tests can use FakeWorkingTree
without a real repository.
"""

from typing import List


class GitWorkingTree:
    """Reports uncommitted changes in the git repository containing a directory."""

    def __init__(self, directory: str):
        self._directory = directory

    def uncommitted_paths(self) -> List[str]:
        """Return modified, staged and untracked paths.

        Returns an empty list whenever git cannot report on the directory.
        """
        # GitPython fails at import time without a git executable.
        try:
            from git import Repo
            from git.exc import GitError
        except ImportError:
            return []

        try:
            repo = Repo(self._directory, search_parent_directories=True)
            paths = [item.a_path or item.b_path for item in repo.index.diff(None)]
            if repo.head.is_valid():
                paths += [item.a_path or item.b_path for item in repo.index.diff("HEAD")]
            paths += repo.untracked_files
        except GitError:
            return []
        return sorted(set(paths))
