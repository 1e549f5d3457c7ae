# langyear/logging_setup.py
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logger(
    log_dir: str | Path | None = None,
    *,
    level: int = logging.INFO,
    filename_prefix: str = "langyear",
    console: bool = True,
    force: bool = False,
) -> Optional[Path]:
    """
    Configure root logging for scripts.

    Writes a timestamped log file under `log_dir` when given, and/or
    a console stream. Returns the log file path, or None when no file
    is written. Library modules only log; they never call this.
    """
    root = logging.getLogger()
    if force:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()

    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    log_path = None
    if log_dir is not None:
        d = Path(log_dir).expanduser()
        d.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = d / f"{filename_prefix}_{ts}.log"

        fhandler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        fhandler.setLevel(level)
        fhandler.setFormatter(fmt)
        root.addHandler(fhandler)

    if console:
        shandler = logging.StreamHandler()
        shandler.setLevel(level)
        shandler.setFormatter(fmt)
        root.addHandler(shandler)

    return log_path
