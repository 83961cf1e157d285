"""RailsProject value object: the target directory and its well-known paths."""

import os
import sys

GEMFILE = "Gemfile"
INITIALIZER_PATH = os.path.join("config", "initializers", "inertia_rails.rb")


class RailsProject:
    """Value object representing the Rails application being set up."""

    def __init__(self, directory: str):
        self._directory = directory

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def gemfile(self) -> str:
        return os.path.join(self._directory, GEMFILE)

    @property
    def initializer_file(self) -> str:
        return os.path.join(self._directory, INITIALIZER_PATH)

    def validate(self) -> "RailsProject":
        """Validate that the directory contains a Gemfile.

        Returns:
            self, for method chaining

        Raises:
            SystemExit: If the Gemfile does not exist
        """
        if not os.path.isfile(self.gemfile):
            print(
                f"Error: {GEMFILE} not found in {self._directory}. "
                "Run this from the root of a Rails application.",
                file=sys.stderr,
            )
            sys.exit(1)
        return self

    def declares_gem(self, name: str) -> bool:
        """Return True if the Gemfile bytes contain name anywhere."""
        with open(self.gemfile, "rb") as f:
            return name.encode("utf-8") in f.read()
