"""
config.py
Default rendering configuration and loader. Very small helper to override defaults via JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict

# Default options used when rendering tables and inverse summaries.
DEFAULT_CONFIG: Dict[str, Any] = {
    "table_format": "simple",      # any tabulate tablefmt name
    "missing_marker": "-",         # shown where an inverse does not exist
    "summary_headers": ["Number", "Additive inverse", "Inverse"],
}


def load_config(path: str, base: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Load a JSON config file and merge it into base (shallow merge).

    :param path: path to JSON config file
    :param base: base configuration dictionary to update (if None use DEFAULT_CONFIG)
    :return: merged configuration dictionary
    """
    base = base.copy() if base is not None else DEFAULT_CONFIG.copy()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    # shallow merge
    for k, v in data.items():
        base[k] = v
    return base
