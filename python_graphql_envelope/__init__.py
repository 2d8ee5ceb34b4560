"""Top-level package for python_graphql_envelope."""

from .config import DEFAULT_CONFIG, load_config_file, merge_config
from .exceptions import ConstructionError, DecodeError, GraphQLEnvelopeError
from .request import Request, serialize
from .response import ErrorMsg, Location, Response, ResponseDecoder, decode

__version__ = "0.1.0"

__all__ = [
    "ConstructionError",
    "DEFAULT_CONFIG",
    "DecodeError",
    "ErrorMsg",
    "GraphQLEnvelopeError",
    "Location",
    "Request",
    "Response",
    "ResponseDecoder",
    "decode",
    "load_config_file",
    "merge_config",
    "serialize",
]
