"""Module entrypoint for running demosdesk as ``python -m demosdesk``.

This module is also used by frozen desktop builds to provide a stable entry
script for the bundled executable.
"""

from __future__ import annotations

from demosdesk.cli import main


if __name__ == "__main__":
    main()
