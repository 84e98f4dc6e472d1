"""
Resolve CSS colors from the command line, e.g.:

    python -m csscolor '#fc0' rebeccapurple 'oklch(70% 0.1 120)'
"""
import sys

from .cli import main


sys.exit(main())
