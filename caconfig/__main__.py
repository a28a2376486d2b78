"""
__main__ provides the console-script entrypoint for the caconfig package.
"""
from __future__ import annotations

import sys
import traceback

from caconfig.cli import CLI, run
from caconfig.errors import ReconcileError


def main(argv: list[str] | None = None) -> None:
    """
    main is the entrypoint for the `caconfig` console script.
    """
    try:
        code = run(CLI().parse_command(argv))
    except SystemExit as e:
        code = int(e.code) if isinstance(e.code, int) else 1
        if code == 0:
            raise
        sys.exit(code)
    except ReconcileError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        print(f"details: {e!r}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
