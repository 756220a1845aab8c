"""
codecondense Data Paths

Location of the per-user data directory that holds config.yaml.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".codecondense"


def get_data_path() -> Path:
    """Get the codecondense data directory path.

    CODECONDENSE_DATA_PATH overrides the default of ~/.codecondense.
    """
    data_path = os.environ.get("CODECONDENSE_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH
