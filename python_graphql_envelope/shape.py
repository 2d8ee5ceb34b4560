"""Conversion of decoded ``data`` into the caller's target shape."""

import dataclasses
import inspect
import types
import typing

from typing import Any, Dict

from .exceptions import DecodeError
from .utils import camel_case_to_snake

NoneType = type(None)

_UNION_ORIGINS = tuple(x for x in (typing.Union, getattr(types, "UnionType", None)) if x is not None)


def build(target: Any, value: Any) -> Any:
    """Build ``target`` from the raw JSON ``value``.

    ``target`` is one of:

    * ``None`` or ``typing.Any``: the raw value is returned as is,
    * a class with a ``deserialize`` classmethod (generated operation classes),
    * a dataclass, built recursively from the JSON object,
    * a typing construct such as ``typing.List[X]`` or ``typing.Optional[X]``,
    * any other callable, called with the raw value.
    """
    if target is None or target is Any:
        return value
    try:
        if inspect.isclass(target) and callable(getattr(target, "deserialize", None)):
            return target.deserialize(value)
        return _build(target, value, "data")
    except DecodeError:
        raise
    except (TypeError, ValueError, KeyError, NameError, AttributeError) as exc:
        raise DecodeError(f"cannot build {_type_name(target)} from data: {exc}") from exc


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _build(target: Any, value: Any, where: str) -> Any:
    origin = typing.get_origin(target)
    if origin in _UNION_ORIGINS:
        args = typing.get_args(target)
        if value is None:
            if NoneType in args:
                return None
            raise DecodeError(f"{where}: null is not allowed")
        candidates = [x for x in args if x is not NoneType]
        if len(candidates) == 1:
            return _build(candidates[0], value, where)
        for candidate in candidates:
            try:
                return _build(candidate, value, where)
            except (DecodeError, TypeError, ValueError, KeyError):
                continue
        raise DecodeError(f"{where}: value does not match {target}")
    if origin is list:
        if not isinstance(value, list):
            raise DecodeError(f"{where}: expected a list, got {type(value).__name__}")
        (item_type,) = typing.get_args(target) or (Any,)
        return [_build(item_type, item, f"{where}[{i}]") for i, item in enumerate(value)]
    if origin is dict:
        if not isinstance(value, dict):
            raise DecodeError(f"{where}: expected an object, got {type(value).__name__}")
        _, item_type = typing.get_args(target) or (str, Any)
        return {k: _build(item_type, v, f"{where}.{k}") for k, v in value.items()}
    if origin is typing.Literal:
        if value not in typing.get_args(target):
            raise DecodeError(f"{where}: {value!r} is not one of {typing.get_args(target)}")
        return value
    if target is Any:
        return value
    if value is None:
        raise DecodeError(f"{where}: null is not allowed")
    if dataclasses.is_dataclass(target) and inspect.isclass(target):
        return _build_dataclass(target, value, where)
    if target in (str, int, float, bool):
        return _build_scalar(target, value, where)
    if callable(target):
        return target(value)
    raise DecodeError(f"{where}: unsupported target {target!r}")  # pragma: no cover


def _build_scalar(target: type, value: Any, where: str) -> Any:
    if target is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if target is int and isinstance(value, bool):
        raise DecodeError(f"{where}: expected int, got bool")
    if not isinstance(value, target):
        raise DecodeError(f"{where}: expected {target.__name__}, got {type(value).__name__}")
    return value


def demangle(key: str) -> str:
    """Map wire names such as ``__typename`` to attribute names (``_typename``)."""
    if key.startswith("__"):
        return key[1:]
    return key


def _field_lookup(cls: type) -> Dict[str, dataclasses.Field]:
    return {f.name: f for f in dataclasses.fields(cls) if f.init}


def _build_dataclass(cls: type, value: Any, where: str) -> Any:
    if not isinstance(value, dict):
        raise DecodeError(f"{where}: expected an object for {cls.__name__}, got {type(value).__name__}")
    try:
        hints = typing.get_type_hints(cls)
    except NameError as exc:
        raise DecodeError(f"{where}: cannot resolve annotations of {cls.__name__}: {exc}") from exc
    fields = _field_lookup(cls)
    kwargs: Dict[str, Any] = {}
    for key, item in value.items():
        name = demangle(key)
        if name not in fields:
            name = camel_case_to_snake(name)
        if name not in fields:
            continue
        kwargs[name] = _build(hints.get(name, Any), item, f"{where}.{key}")

    for name, f in fields.items():
        if name in kwargs:
            continue
        has_default = f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING
        if has_default:
            continue
        if _is_optional(hints.get(name, Any)):
            kwargs[name] = None
            continue
        raise DecodeError(f"{where}: missing field {name!r} for {cls.__name__}")
    return cls(**kwargs)


def _is_optional(hint: Any) -> bool:
    return typing.get_origin(hint) in _UNION_ORIGINS and NoneType in typing.get_args(hint)

