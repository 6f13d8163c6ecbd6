"""Package entry point for ``python -m puebi``; see puebi.cli."""

from puebi.cli import main

if __name__ == "__main__":
    main()
