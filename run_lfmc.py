#!/usr/bin/env python3
"""
lfmc - Entry Point Wrapper

Runs lfmc from a source checkout without installing the package.
"""

from lfmc.cli import main

if __name__ == "__main__":
    main()
