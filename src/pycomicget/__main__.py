"""Main entry point for running pycomicget as a module.

Usage:
    python -m pycomicget search <query>
    python -m pycomicget --help
"""

from pycomicget.cli import main

if __name__ == '__main__':
    main()
