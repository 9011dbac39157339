"""
Main entry point for the funcpatterns CLI.

    python -m funcpatterns

or after installation:

    funcpatterns
"""

from .cli import main

if __name__ == "__main__":
    main()
