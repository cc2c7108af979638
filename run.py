"""Source-checkout launcher for Maze Adventure.

Equivalent to the installed `maze-adventure` script. Run `python run.py --help`
for details.
"""

import sys

from maze_adventure.cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
