"""
Entry point for running a3kit CLI as a module.

Usage: python -m a3kit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
