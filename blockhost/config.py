"""Loading the server's TOML configuration."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Union

DEFAULT_CONFIG_PATH = Path("../server.toml")


def load_server_config(path: Union[str, os.PathLike] = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Parse the server configuration file at ``path``."""
    with open(path, "rb") as handle:
        return tomllib.load(handle)