from __future__ import annotations

import os
from pathlib import Path


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Write *text* to *path* so readers see either the old or the new file.

    The content goes to a sibling ``.tmp`` file first and is then moved over
    the target with :func:`os.replace`. Raises ``OSError`` on I/O failure and
    ``UnicodeEncodeError`` when *text* cannot be encoded; the temp file is
    removed in either case.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")

    try:
        # newline="" keeps "\n" as-is on Windows too.
        with open(tmp, "w", encoding=encoding, newline="") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
