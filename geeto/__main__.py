"""Module entrypoint for ``python -m geeto``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and session setup happen in ``geeto.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
