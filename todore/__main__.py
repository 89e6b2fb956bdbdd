"""
Entry point for running the package as a module.

Usage:
    $ python -m todore run
    $ python -m todore --help
"""

from .main import app

if __name__ == "__main__":
    app()
