#!/usr/bin/env python3
"""
Legacy runner - delegates to the sentex CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from sentex.cli.main import cli

if __name__ == "__main__":
    # No arguments: validate the default sentence
    if len(sys.argv) == 1:
        sys.argv.append('run')

    cli()
