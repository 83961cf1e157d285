"""Project setup: adds the gem, runs the generator, writes the initializer."""

import os
import sys

from inertia_setup.command_builder import GEM_NAME, command_string
from inertia_setup.initializer import ensure_initializer
from inertia_setup.scaffold_opts import SUPPORTED_FRAMEWORKS
from inertia_setup.template_renderer import render_template


class ProjectScaffolder:
    """Orchestrates Inertia Rails setup using injected dependencies.

    Args:
        command_builder: Builds the external command lists.
        runner: Runs commands; run(cmd, cwd) returns an object with returncode.
        working_tree: Reports uncommitted changes before any command runs.
    """

    def __init__(self, command_builder, runner, working_tree):
        self._command_builder = command_builder
        self._runner = runner
        self._working_tree = working_tree

    def run(self, opts, project):
        """Set up Inertia in project according to opts.

        Each step runs once, in order. The first failing command ends the
        process with that command's exit status.
        """
        project.validate()

        if not opts.is_supported_framework:
            print(
                f"Warning: '{opts.framework}' is not one of {', '.join(SUPPORTED_FRAMEWORKS)}; "
                "passing it to the generator unchanged.",
                file=sys.stderr,
            )

        add_gem_cmd = None
        if not project.declares_gem(GEM_NAME):
            add_gem_cmd = self._command_builder.build_add_gem_command()
        else:
            print(f"{GEM_NAME} already in Gemfile, skipping bundle add")
        generator_cmd = self._command_builder.build_generator_command(opts)

        if opts.dry_run:
            self._print_dry_run([cmd for cmd in (add_gem_cmd, generator_cmd) if cmd], project)
            return

        self._warn_uncommitted_changes()
        if add_gem_cmd:
            self._run_or_exit(add_gem_cmd, project.directory)
        self._run_or_exit(generator_cmd, project.directory)

        relative_initializer = os.path.relpath(project.initializer_file, project.directory)
        if ensure_initializer(project.initializer_file):
            print(f"Created {relative_initializer}")
        else:
            print(f"{relative_initializer} already exists, leaving it unchanged")

        print(render_template(
            "summary.j2",
            framework=opts.framework,
            typescript=opts.typescript,
            tailwind=opts.tailwind,
            initializer_file=relative_initializer,
        ), end="")

    def _run_or_exit(self, cmd, cwd):
        print(f"Running: {command_string(cmd)}", flush=True)
        result = self._runner.run(cmd, cwd=cwd)
        if result.returncode != 0:
            print(
                f"Error: command failed (exit {result.returncode}): {command_string(cmd)}",
                file=sys.stderr,
            )
            sys.exit(result.returncode)

    def _warn_uncommitted_changes(self):
        paths = self._working_tree.uncommitted_paths()
        if paths:
            print(
                f"Warning: {len(paths)} uncommitted path(s) in the working tree; "
                "generator output will be mixed with them.",
                file=sys.stderr,
            )

    def _print_dry_run(self, commands, project):
        for cmd in commands:
            print(f"Would run: {command_string(cmd)}")
        relative_initializer = os.path.relpath(project.initializer_file, project.directory)
        if os.path.exists(project.initializer_file):
            print(f"Would leave {relative_initializer} unchanged")
        else:
            print(f"Would create {relative_initializer}")
