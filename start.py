"""Simple launcher for the roads budget plan console.

Runs the interactive menu in the current directory, where the
cities.txt and roads.txt snapshots are written.
"""

from __future__ import annotations

import sys

from roadplan.app import main

if __name__ == "__main__":
    sys.exit(main())
