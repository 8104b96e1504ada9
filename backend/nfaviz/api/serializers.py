from typing import Any

from pydantic import BaseModel


PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def serialize_ir(obj: Any):
    """
    Safely serialize IR objects into JSON-compatible structures.
    Deterministic.
    Tolerant to primitives.
    """

    # ✅ Primitive values pass through
    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    # ✅ Pydantic models know how to dump themselves
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    # ✅ Lists / tuples: serialize each element
    if isinstance(obj, (list, tuple)):
        return [serialize_ir(item) for item in obj]

    # ✅ Dicts: serialize values
    if isinstance(obj, dict):
        return {k: serialize_ir(v) for k, v in obj.items()}

    # ✅ IR / dataclass-like objects
    if hasattr(obj, "__dict__"):
        return {
            key: serialize_ir(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_")
        }

    # 🔴 Fallback (should rarely happen)
    return str(obj)


def serialize_errors(errors) -> list:
    return [serialize_ir(e) for e in errors]
