# pylint: disable=inherit-non-class, duplicate-bases

from typing import Any, Dict, List, TypedDict, Union

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

PathSegment = Union[str, int]


class LocationBody(TypedDict):
    line: int
    column: int


ErrorBody__required = TypedDict("ErrorBody__required", {"message": str})
ErrorBody__not_required = TypedDict(
    "ErrorBody__not_required",
    {"locations": List[LocationBody], "path": List[PathSegment], "extensions": JSONValue},
    total=False,
)


class ErrorBody(ErrorBody__required, ErrorBody__not_required):
    pass


RequestBody__required = TypedDict("RequestBody__required", {"query": str})
RequestBody__not_required = TypedDict(
    "RequestBody__not_required",
    {"operationName": str, "variables": Dict[str, JSONValue]},
    total=False,
)


class RequestBody(RequestBody__required, RequestBody__not_required):
    pass


class ResponseBody(TypedDict, total=False):
    data: JSONValue
    errors: List[ErrorBody]


class Config(TypedDict, total=True):
    allow_empty_response: bool
    require_locations: bool
    compact: bool
    sort_keys: bool
