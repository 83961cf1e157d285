"""Shared fixtures for inertia-setup tests."""

import os
import sys

import pytest

# Make the fakes importable from any test directory.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "fakes"))

from fake_command_runner import FakeCommandRunner  # noqa: E402
from fake_working_tree import FakeWorkingTree  # noqa: E402

RAILS_GEMFILE = """\
source "https://rubygems.org"

gem "rails", "~> 8.0.0"
gem "puma", ">= 5.0"
"""

RAILS_GEMFILE_WITH_INERTIA = RAILS_GEMFILE + 'gem "inertia_rails", "~> 3.6"\n'


@pytest.fixture
def fake_runner():
    return FakeCommandRunner()


@pytest.fixture
def fake_working_tree():
    return FakeWorkingTree()


@pytest.fixture
def rails_app(tmp_path):
    """A directory holding a plain Rails Gemfile."""
    (tmp_path / "Gemfile").write_text(RAILS_GEMFILE)
    return tmp_path


EXPECTED_SUMMARY_LINES = (
    "Inertia Rails setup complete!",
    "Next steps:",
    "bin/dev",
    "http://localhost:3000/inertia-example",
)
