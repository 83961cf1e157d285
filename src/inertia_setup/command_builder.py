"""CommandBuilder: builds the bundler and Rails generator command lists."""

import shlex
from typing import List

from inertia_setup.scaffold_opts import ScaffoldOpts, TAILWIND_FLAG, TYPESCRIPT_FLAG

GEM_NAME = "inertia_rails"


class CommandBuilder:
    """Builds external commands for each scaffolding step.

    Every method returns a command list suitable for subprocess; nothing
    here executes anything.
    """

    def build_add_gem_command(self) -> List[str]:
        """Build the command that adds the inertia_rails gem to the Gemfile."""
        return ["bundle", "add", GEM_NAME]

    def build_generator_command(self, opts: ScaffoldOpts) -> List[str]:
        """Build the inertia:install generator command.

        Flags are appended in a fixed order: framework, TypeScript, Tailwind.

        Args:
            opts: The parsed scaffolding options.

        Returns:
            Command list suitable for subprocess.
        """
        cmd = ["bin/rails", "generate", "inertia:install", f"--framework={opts.framework}"]
        if opts.typescript:
            cmd.append(TYPESCRIPT_FLAG)
        if opts.tailwind:
            cmd.append(TAILWIND_FLAG)
        return cmd


def command_string(cmd: List[str]) -> str:
    return shlex.join(cmd)
