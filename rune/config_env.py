"""Load ``.env`` files for the CLI.

The variables that matter are ``RUNE_PUBLIC_ROLLS``, ``RUNE_SEED``,
``RUNE_CONFIG_DIR`` and ``RUNE_LOG_LEVEL``. Values already in the process
environment always win.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Earlier files win: nothing is overridden once set.
ENV_FILES = (".env.local", ".env")


def load_env(directory: Optional[Path] = None) -> List[Path]:
    """Load the env files found in ``directory`` (default: cwd).

    Returns the files that were read.
    """
    directory = Path(directory) if directory is not None else Path.cwd()
    loaded = []
    for name in ENV_FILES:
        path = directory / name
        if path.is_file():
            load_dotenv(path, override=False)
            loaded.append(path)

    config_dir = os.getenv("RUNE_CONFIG_DIR")
    if config_dir:
        os.environ["RUNE_CONFIG_DIR"] = str(Path(config_dir).expanduser())
    return loaded
