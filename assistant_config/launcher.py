"""Spawn the real-time assistant process.

Only the spawn itself is checked; the assistant keeps running after the
editor exits and its output is not consumed here.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

DEFAULT_ASSISTANT_COMMAND: tuple = ("python", "-m", "src.realtime_api_async_python.main")

# Override the command line without touching the code, e.g.
#   export ASSISTANT_CONFIG_LAUNCH_CMD="uv run python -m src.realtime_api_async_python.main"
_ENV_LAUNCH_CMD = "ASSISTANT_CONFIG_LAUNCH_CMD"


def assistant_command(initial_prompt: Optional[str] = None, base: Optional[Sequence[str]] = None) -> List[str]:
    """Build the argv for the assistant.

    An empty or whitespace-only prompt is treated as no prompt.
    """
    if base is None:
        env = (os.environ.get(_ENV_LAUNCH_CMD) or "").strip()
        base = shlex.split(env) if env else DEFAULT_ASSISTANT_COMMAND
    argv = list(base)
    if initial_prompt is not None and initial_prompt.strip():
        argv += ["--prompts", initial_prompt]
    return argv


def launch_assistant(
    initial_prompt: Optional[str] = None,
    *,
    cwd: Union[str, Path, None] = None,
    command: Optional[Sequence[str]] = None,
) -> bool:
    """Start the assistant detached from this process.

    Returns True if the process was spawned, False (logged) otherwise.
    """
    argv = assistant_command(initial_prompt, base=command)
    if not argv:
        logger.error("Cannot launch assistant: empty command line")
        return False

    kwargs = {}
    if sys.platform.startswith("win"):
        kwargs["creationflags"] = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)
    else:
        kwargs["start_new_session"] = True

    try:
        proc = subprocess.Popen(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            stdin=subprocess.DEVNULL,
            **kwargs,
        )
    except (OSError, ValueError) as e:
        logger.error("Error launching assistant (%s): %s: %s", argv[0], type(e).__name__, e)
        return False

    logger.info("Launched assistant (pid %s): %s", proc.pid, argv[0])
    return True
