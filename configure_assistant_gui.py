#!/usr/bin/env python3
"""GUI entry point for running from a source checkout.

The GUI implementation lives in `assistant_config.gui.app`.
"""

from assistant_config.gui import main


if __name__ == "__main__":
    main()
