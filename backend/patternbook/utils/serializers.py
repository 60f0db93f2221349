from enum import Enum
from typing import Any


PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def serialize(obj: Any):
    """
    Convert catalog objects into JSON-compatible structures.
    Deterministic: dict and field order are preserved as given.
    """

    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, (list, tuple)):
        return [serialize(item) for item in obj]

    if isinstance(obj, dict):
        return {str(k): serialize(v) for k, v in obj.items()}

    # Dataclass-like objects
    if hasattr(obj, "__dict__"):
        return {
            key: serialize(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_")
        }

    return str(obj)
