"""GraphQL request bodies.

A request is either *named* (it carries an ``operationName`` and accepts any
number of variables) or *anonymous*. An anonymous request that already holds
a variable is sealed: its variable set cannot grow.

::

    {
        "operationName": "createBook",
        "variables": {"book": {"title": "Rocket Engineering"}},
        "query": "mutation createBook($book: createBook!) { createBook(book: $book) { title } }"
    }
"""

import json
import logging

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config import merge_config
from .exceptions import ConstructionError, DecodeError
from .types import Config, JSONValue, RequestBody
from .utils import to_json_value

logger = logging.getLogger(__name__)


@dataclass
class Request:
    query: str
    operation_name: Optional[str] = None
    variables: Dict[str, JSONValue] = field(default_factory=dict)

    @classmethod
    def from_query(cls, query: str) -> "Request":
        return cls(query=query)

    @classmethod
    def from_query_with_variable(cls, query: str, variable_name: str, value: Any) -> "Request":
        """Anonymous query/mutation with its single variable."""
        return cls(query=query, variables={variable_name: to_json_value(value)})

    @classmethod
    def from_operation(cls, operation_name: str, query: str) -> "Request":
        return cls(query=query, operation_name=operation_name)

    @property
    def is_anonymous(self) -> bool:
        return self.operation_name is None

    @property
    def is_sealed(self) -> bool:
        return self.is_anonymous and bool(self.variables)

    def set_variable(self, name: str, value: Any) -> None:
        if self.is_sealed:
            logger.warning(
                "rejected variable %r: anonymous request already holds %s",
                name,
                ", ".join(sorted(self.variables)),
            )
            raise ConstructionError("Not possible to add variable when using anonymous query/mutation")
        self.variables[name] = to_json_value(value)

    def to_dict(self) -> RequestBody:
        ret: Dict[str, Any] = {}
        if self.operation_name is not None:
            ret["operationName"] = self.operation_name
        if self.variables:
            ret["variables"] = self.variables
        ret["query"] = self.query
        return ret  # type: ignore

    def serialize(self, config: Optional[Config] = None) -> str:
        return serialize(self, config)

    @classmethod
    def from_dict(cls, obj: Any) -> "Request":
        """Rebuild a request from its wire form, e.g. a body captured from a transport."""
        if not isinstance(obj, dict):
            raise DecodeError(f"request must be a JSON object, got {type(obj).__name__}")
        query = obj.get("query")
        if not isinstance(query, str):
            raise DecodeError("request: missing required field 'query'")
        operation_name = obj.get("operationName")
        if operation_name is not None and not isinstance(operation_name, str):
            raise DecodeError("request.operationName: expected str")
        variables = obj.get("variables")
        if variables is None:
            variables = {}
        elif not isinstance(variables, dict):
            raise DecodeError("request.variables: expected an object")
        return cls(query=query, operation_name=operation_name, variables=dict(variables))

    @classmethod
    def deserialize(cls, body: str) -> "Request":
        try:
            obj = json.loads(body)
        except ValueError as exc:
            raise DecodeError(f"request body is not valid JSON: {exc}", body) from exc
        return cls.from_dict(obj)


def serialize(request: Request, config: Optional[Config] = None) -> str:
    config = merge_config(config)
    separators = (",", ":") if config["compact"] else None
    logger.debug(
        "serializing request operation=%s variables=%s",
        request.operation_name or "<anonymous>",
        sorted(request.variables),
    )
    return json.dumps(
        request.to_dict(),
        separators=separators,
        sort_keys=config["sort_keys"],
        allow_nan=False,
    )
