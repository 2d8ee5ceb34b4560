"""GraphQL response envelopes.

A response body carries ``data``, ``errors``, both (partial success) or, for
lenient servers, neither::

    {"data": null, "errors": [{"message": "...", "locations": [{"line": 2, "column": 14}], "path": ["sensor"]}]}

``data`` and ``errors`` are decoded independently of each other. GraphQL
errors are returned as :class:`ErrorMsg` values; only a body that does not
have the response shape raises :class:`DecodeError`.
"""

import json
import logging

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from graphql import ExecutionResult, GraphQLError

from . import shape
from .config import merge_config
from .exceptions import DecodeError
from .types import Config, ErrorBody, JSONValue, LocationBody, PathSegment, ResponseBody
from .utils import to_json_value

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require(obj: Dict[str, Any], key: str, expected: type, where: str) -> Any:
    if key not in obj:
        raise DecodeError(f"{where}: missing required field {key!r}")
    value = obj[key]
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise DecodeError(f"{where}.{key}: expected {expected.__name__}, got {type(value).__name__}")
    return value


@dataclass
class Location:
    line: int
    column: int

    @classmethod
    def from_dict(cls, obj: Any, where: str = "location") -> "Location":
        if not isinstance(obj, dict):
            raise DecodeError(f"{where}: expected an object, got {type(obj).__name__}")
        return cls(line=_require(obj, "line", int, where), column=_require(obj, "column", int, where))

    def to_dict(self) -> LocationBody:
        return {"line": self.line, "column": self.column}

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass
class ErrorMsg:
    message: str
    locations: List[Location]
    path: Optional[List[PathSegment]] = None
    extensions: Optional[JSONValue] = None

    @classmethod
    def from_dict(cls, obj: Any, where: str = "error", require_locations: bool = False) -> "ErrorMsg":
        if not isinstance(obj, dict):
            raise DecodeError(f"{where}: expected an object, got {type(obj).__name__}")
        message = _require(obj, "message", str, where)

        if require_locations:
            raw_locations = _require(obj, "locations", list, where)
        else:
            raw_locations = obj.get("locations")
            if raw_locations is None:
                raw_locations = []
            elif not isinstance(raw_locations, list):
                raise DecodeError(f"{where}.locations: expected list, got {type(raw_locations).__name__}")
        locations = [
            Location.from_dict(x, f"{where}.locations[{i}]") for i, x in enumerate(raw_locations)
        ]

        path = obj.get("path")
        if path is not None:
            if not isinstance(path, list):
                raise DecodeError(f"{where}.path: expected list, got {type(path).__name__}")
            for i, segment in enumerate(path):
                # path segments are field names or list indices
                if isinstance(segment, bool) or not isinstance(segment, (str, int)):
                    raise DecodeError(f"{where}.path[{i}]: expected str or int, got {type(segment).__name__}")

        return cls(message=message, locations=locations, path=path, extensions=obj.get("extensions"))

    @classmethod
    def from_graphql_error(cls, error: GraphQLError) -> "ErrorMsg":
        return cls.from_dict(dict(error.formatted))

    def to_dict(self) -> ErrorBody:
        ret: Dict[str, Any] = {
            "message": self.message,
            "locations": [x.to_dict() for x in self.locations],
        }
        if self.path is not None:
            ret["path"] = self.path
        if self.extensions is not None:
            ret["extensions"] = self.extensions
        return ret  # type: ignore

    def __str__(self) -> str:
        if not self.locations:
            return self.message
        return f"{self.message} ({', '.join(str(x) for x in self.locations)})"


@dataclass
class Response(Generic[T]):
    data: Optional[T] = None
    errors: Optional[List[ErrorMsg]] = None
    # data as received, before conversion to the target shape
    raw_data: Optional[JSONValue] = field(default=None, repr=False, compare=False)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_execution_result(
        cls, result: ExecutionResult, target: Any = None, config: Optional[Config] = None
    ) -> "Response[Any]":
        return ResponseDecoder(config).decode_value(result.formatted, target)

    def to_dict(self) -> ResponseBody:
        ret: Dict[str, Any] = {}
        if self.raw_data is not None:
            ret["data"] = self.raw_data
        elif self.data is not None:
            ret["data"] = to_json_value(self.data)
        if self.errors is not None:
            ret["errors"] = [x.to_dict() for x in self.errors]
        return ret  # type: ignore


class ResponseDecoder:
    config: Config

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = merge_config(config)

    def decode(self, body: Union[str, bytes], target: Any = None) -> Response[Any]:
        if isinstance(body, (bytes, bytearray)):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError(f"response body is not valid UTF-8: {exc}") from exc
        try:
            obj = json.loads(body)
        except ValueError as exc:
            raise DecodeError(f"response body is not valid JSON: {exc}", body) from exc
        try:
            return self.decode_value(obj, target)
        except DecodeError as exc:
            if exc.body is None:
                exc.attach_body(body)
            raise

    def decode_value(self, obj: Any, target: Any = None) -> Response[Any]:
        if not isinstance(obj, dict):
            raise DecodeError(f"response must be a JSON object, got {type(obj).__name__}")

        raw_data = obj.get("data")
        raw_errors = obj.get("errors")
        if raw_data is None and raw_errors is None and not self.config["allow_empty_response"]:
            raise DecodeError("response has neither data nor errors")

        errors: Optional[List[ErrorMsg]] = None
        if raw_errors is not None:
            if not isinstance(raw_errors, list):
                raise DecodeError(f"errors: expected list, got {type(raw_errors).__name__}")
            errors = [
                ErrorMsg.from_dict(x, f"errors[{i}]", require_locations=self.config["require_locations"])
                for i, x in enumerate(raw_errors)
            ]

        data = None if raw_data is None else shape.build(target, raw_data)

        logger.debug(
            "decoded response data=%s errors=%d",
            "present" if data is not None else "absent",
            len(errors) if errors is not None else 0,
        )
        return Response(data=data, errors=errors, raw_data=raw_data)


def decode(body: Union[str, bytes], target: Any = None, config: Optional[Config] = None) -> Response[Any]:
    return ResponseDecoder(config).decode(body, target)
