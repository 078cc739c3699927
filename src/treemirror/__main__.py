"""Entry point: python -m treemirror SOURCE_DIRECTORY DESTINATION_DIRECTORY"""

from __future__ import annotations

import sys

from treemirror.app import run_backup
from treemirror.mirror.paths import base_name


def print_usage(app_name: str) -> None:
    print(
        "\n"
        f"USAGE: {app_name} SOURCE_DIRECTORY DESTINATION_DIRECTORY\n"
        "\n"
        "\tSOURCE DIRECTORY:         The path of the directory to copy from\n"
        "\tDESTINATION DIRECTORY:    The path of the directory to copy to\n",
        file=sys.stderr,
    )


def program_name(argv: list[str]) -> str:
    """Display name for usage output; ``python -m treemirror`` reports the package."""
    name = base_name(argv[0]) if argv else ""
    if not name or name == "__main__.py":
        return "treemirror"
    return name


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print_usage(program_name(argv))
        return 1

    return run_backup(argv[1], argv[2])


def run() -> None:
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
