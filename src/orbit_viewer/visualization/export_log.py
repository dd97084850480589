from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from orbit_viewer.core.constants import KM_PER_AU
from orbit_viewer.core.frames import scale
from orbit_viewer.simulation.engine import AnimationLog

logger = logging.getLogger(__name__)


def export_log_to_json(log: AnimationLog, out_path: str = "out/orbit_log.json", units: str = "au") -> str:
    """
    Export playback data for an external viewer:
      {
        "body_id": "...",
        "units": "au",
        "curve": [[x,y,z], ...],
        "focus_marker": [x,y,z] | null,
        "positions": [{"theta": 0.0, "r": [x,y,z]}, ...]
      }
    """
    if units == "au":
        k = 1.0
    elif units == "km":
        k = KM_PER_AU
    else:
        raise ValueError(f"Unsupported units '{units}'. Expected 'au' or 'km'.")

    data: Dict[str, Any] = {
        "body_id": log.body_id,
        "units": units,
        "curve": [list(scale(r, k)) for r in log.curve_au],
        "focus_marker": list(scale(log.focus_marker_au, k)) if log.focus_marker_au is not None else None,
        "positions": [{"theta": theta, "r": list(scale(r, k))} for (theta, r) in log.positions_au],
    }

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    logger.info("Exported %d positions to %s", len(log.positions_au), out_path)
    return out_path
