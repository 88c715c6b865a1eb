"""Module entrypoint for ``python -m termreflow``.

All argument parsing happens in ``termreflow.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
