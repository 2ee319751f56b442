from __future__ import annotations

import math
from typing import Any


def finite_floats(*values: Any) -> tuple[float, ...] | None:
    """Coerce ``values`` to floats, or ``None`` if any is missing, non-numeric or non-finite."""
    try:
        floats = tuple(float(v) for v in values)
    except (TypeError, ValueError):
        return None
    if not all(math.isfinite(v) for v in floats):
        return None
    return floats
