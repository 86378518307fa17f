"""Allow `python -m terminal_donut`."""
import sys

from terminal_donut.cli import main

sys.exit(main())
