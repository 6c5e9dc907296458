"""Module entrypoint for ``python -m todotabs``.

All argument parsing and runtime setup happen in ``todotabs.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
