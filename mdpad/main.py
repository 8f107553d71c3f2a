from __future__ import annotations

import sys

from mdpad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdpad.main` or `python -m mdpad`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
