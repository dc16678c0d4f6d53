"""``python -m termpixel_app`` entry point; with no arguments it draws the square demo."""
from __future__ import annotations

import sys

try:
    from .cli import main as _cli_main
except ImportError:  # run as a plain file, without a parent package
    from termpixel_app.cli import main as _cli_main

DEFAULT_COMMAND = ("square",)


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    return int(_cli_main(args or list(DEFAULT_COMMAND)))


if __name__ == "__main__":
    raise SystemExit(main())
