import dataclasses
import math
import re

from typing import Any

from .exceptions import ConstructionError
from .types import JSONValue

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_case_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def to_json_value(value: Any) -> JSONValue:
    """Convert ``value`` into plain JSON data (dict, list, str, number, bool or None).

    Dataclass instances are expanded field by field and tuples become lists.
    NaN and infinities, and anything else, raise :class:`ConstructionError`.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ConstructionError(f"{value!r} is not a JSON number")
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        ret = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ConstructionError(f"JSON object keys must be strings, got {key!r}")
            ret[key] = to_json_value(item)
        return ret
    if isinstance(value, (list, tuple)):
        return [to_json_value(x) for x in value]
    raise ConstructionError(f"{type(value).__name__} is not a JSON value")
