"""Module entrypoint for ``python -m oldest``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and error reporting happen in ``oldest.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
