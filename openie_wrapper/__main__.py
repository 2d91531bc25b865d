#!/usr/bin/env python3
"""
Entry point script for openie-wrapper CLI.
Can be used directly: python -m openie_wrapper
"""

if __name__ == "__main__":
    from openie_wrapper.cli.main import main
    import sys
    sys.exit(main())
