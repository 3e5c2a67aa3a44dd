"""Run tma with ``python -m tma``."""

from .cli import main

if __name__ == "__main__":
    main()
