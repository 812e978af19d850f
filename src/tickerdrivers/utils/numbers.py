import math
from typing import Any


def parse_to_float(value: Any) -> float | None:
    """Coerce an API value into a finite ``float``.

    Numbers pass through, numeric strings such as ``"12.5"`` are parsed and
    surrounding whitespace is ignored.  ``None``, empty strings, booleans,
    values that cannot be parsed and non finite results (``nan``, ``inf``)
    all map to ``None``, the "not available" marker used by
    :class:`~tickerdrivers.drivers.base.Ticker`.  This function never raises.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        result = float(value)
    except (OverflowError, ValueError):
        # ints beyond float range, unparsable strings
        return None
    if not math.isfinite(result):
        return None
    return result
