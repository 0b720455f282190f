#!/usr/bin/env python3
"""Convenience entry point for running from a source checkout.

Equivalent to the installed ``assistant-config`` command.
"""

from assistant_config.cli import main as _main


if __name__ == "__main__":
    raise SystemExit(_main())
