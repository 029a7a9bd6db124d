from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path


logger = logging.getLogger("chat-widget.env")


def load_local_env(env_path: Path | str = Path(".env"), *, override: bool = False) -> int:
    """Load key=value pairs from a local .env file without extra dependencies.

    Variables already present in the process environment are kept unless
    ``override`` is set. Returns the number of variables applied.
    """
    path = Path(env_path)
    if not path.exists():
        return 0

    applied = 0
    for raw_line in path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            logger.warning("Skipping malformed .env line: %s", raw_line)
            continue

        key, value = line.split("=", 1)
        clean_key = key.strip()
        clean_value = value.strip().strip('"').strip("'")
        if not override and clean_key in os.environ:
            continue
        os.environ[clean_key] = clean_value
        applied += 1
    return applied


def create_env_file(
    env_path: Path | str = Path(".env"),
    example_path: Path | str = Path("env.example"),
) -> bool:
    """Copy the example file to ``env_path`` unless it already exists.

    Returns True when a new file was written.
    """
    target = Path(env_path)
    if target.exists():
        logger.info("%s already exists; leaving it untouched.", target)
        return False

    example = Path(example_path)
    if not example.exists():
        raise FileNotFoundError(f"{example} not found")

    shutil.copyfile(example, target)
    logger.info("Created %s from %s", target, example)
    return True
