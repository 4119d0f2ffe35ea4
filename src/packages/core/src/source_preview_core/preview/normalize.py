"""Record normalization utilities."""
from decimal import Decimal
from typing import Any


def normalize_value(v: Any) -> Any:
    """Normalize a value to JSON-serializable types."""
    if v is None:
        return None
    if isinstance(v, (str, int, float, bool)):
        return v
    if isinstance(v, Decimal):
        return int(v) if v == v.to_integral_value() else float(v)
    if isinstance(v, dict):
        return {str(k): normalize_value(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [normalize_value(x) for x in v]
    return str(v)


def normalize_record(row: Any) -> dict[str, Any]:
    """Normalize a sampled record; anything that is not a mapping becomes empty."""
    if not isinstance(row, dict):
        return {}
    return {str(k): normalize_value(v) for k, v in row.items()}
