"""
Convenience entry point for running periodsplitter as a module.

Usage: python -m periodsplitter [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
