"""Options dataclass for the inertia-setup command."""

from dataclasses import dataclass

SUPPORTED_FRAMEWORKS = ("react", "vue", "svelte")
DEFAULT_FRAMEWORK = "react"

TYPESCRIPT_FLAG = "--typescript"
TAILWIND_FLAG = "--tailwind"
DRY_RUN_FLAG = "--dry-run"


@dataclass(frozen=True)
class ScaffoldOpts:
    """All options for a single scaffolding run."""

    framework: str = DEFAULT_FRAMEWORK
    typescript: bool = False
    tailwind: bool = False
    dry_run: bool = False

    @property
    def is_supported_framework(self):
        return self.framework in SUPPORTED_FRAMEWORKS


def parse_scaffold_args(args) -> ScaffoldOpts:
    """Build ScaffoldOpts from raw command-line arguments.

    The first argument selects the framework unless it looks like a flag.
    Recognized flags may appear anywhere; everything else is ignored.
    """
    args = list(args)
    framework = DEFAULT_FRAMEWORK
    if args and args[0] and not args[0].startswith("-"):
        framework = args[0]

    return ScaffoldOpts(
        framework=framework,
        typescript=TYPESCRIPT_FLAG in args,
        tailwind=TAILWIND_FLAG in args,
        dry_run=DRY_RUN_FLAG in args,
    )
