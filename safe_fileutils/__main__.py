#!/usr/bin/env python3
"""
Main entry point for safe_fileutils when run as a module.

This allows the package to be executed with: python -m safe_fileutils
"""

from .cli import main

if __name__ == '__main__':
    main()
