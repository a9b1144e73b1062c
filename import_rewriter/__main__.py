"""
Import Rewriter - Entry point for CLI execution.

Allows running the package as a module: python -m import_rewriter
"""

from import_rewriter.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
