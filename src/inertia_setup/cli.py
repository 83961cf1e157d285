"""Click command for the inertia-setup CLI."""

import os

import click

from inertia_setup.command_builder import CommandBuilder
from inertia_setup.command_runner import CommandRunner
from inertia_setup.git_status import GitWorkingTree
from inertia_setup.project_scaffolder import ProjectScaffolder
from inertia_setup.rails_project import RailsProject
from inertia_setup.scaffold_opts import parse_scaffold_args


@click.command(
    "inertia-setup",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    """Set up Inertia.js in the Rails application in the current directory.

    \b
    Usage: inertia-setup [react|vue|svelte] [--typescript] [--tailwind] [--dry-run]

    Adds the inertia_rails gem if needed, runs the inertia:install generator
    and creates config/initializers/inertia_rails.rb if it is missing.
    """
    project_dir = os.getcwd()
    scaffolder = ProjectScaffolder(
        CommandBuilder(),
        CommandRunner(),
        GitWorkingTree(project_dir),
    )
    scaffolder.run(parse_scaffold_args(args), RailsProject(project_dir))
