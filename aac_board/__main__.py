"""Package entry point for ``python -m aac_board``.

Delegates to the CLI's main() function.
"""

from aac_board.cli import main

if __name__ == "__main__":
    main()
