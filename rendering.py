"""
rendering.py

Plain-text rendering of operation tables and inverse summaries using tabulate.

API:
 - format_table(table, representatives, config=None) -> str
 - format_summary(records, config=None) -> str
"""

from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from tabulate import tabulate

from config import DEFAULT_CONFIG
from errors import InvalidArgument


def _merged(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg = DEFAULT_CONFIG.copy()
    if config:
        cfg.update(config)
    return cfg


def format_table(table: Any, representatives: Sequence[int], config: Optional[Dict[str, Any]] = None) -> str:
    """
    Render a size x size operation table with the representatives as header
    row and header column.
    """
    if table is None or len(table) == 0:
        raise InvalidArgument("`table` must be provided and have at least 1 row")
    if representatives is None or len(representatives) == 0:
        raise InvalidArgument("`representatives` must be provided and have at least 1 element")
    rows = np.asarray(table).tolist()
    if len(rows) != len(representatives):
        raise InvalidArgument(f"table has {len(rows)} rows but {len(representatives)} representatives were given")

    cfg = _merged(config)
    body = [[rep] + row for rep, row in zip(representatives, rows)]
    return tabulate(body, headers=[""] + list(representatives), tablefmt=cfg["table_format"])


def format_summary(records: List[Dict[str, Optional[int]]], config: Optional[Dict[str, Any]] = None) -> str:
    """
    Render the records produced by ModularRing.all_variables_summary().
    Missing inverses are shown as config["missing_marker"].
    """
    cfg = _merged(config)
    missing = cfg["missing_marker"]

    def cell(v):
        return missing if v is None else v

    body = [[r["variable"], cell(r["additive_inverse"]), cell(r["inverse"])] for r in records]
    return tabulate(body, headers=cfg["summary_headers"], tablefmt=cfg["table_format"])
