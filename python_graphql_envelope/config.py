import copy

from typing import Any, Mapping, Optional

import yaml

from .exceptions import GraphQLEnvelopeError
from .types import Config

DEFAULT_CONFIG: Config = {
    "allow_empty_response": True,
    "require_locations": False,
    "compact": True,
    "sort_keys": False,
}


def merge_config(overrides: Optional[Mapping[str, Any]] = None, base: Optional[Config] = None) -> Config:
    config = copy.deepcopy(base if base is not None else DEFAULT_CONFIG)
    if not overrides:
        return config
    if not isinstance(overrides, Mapping):
        raise GraphQLEnvelopeError(f"config must be a mapping, got {type(overrides).__name__}")
    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise GraphQLEnvelopeError(f"unknown config keys: {', '.join(unknown)}")
    for key, value in overrides.items():
        if not isinstance(value, bool):
            raise GraphQLEnvelopeError(f"config key {key!r} must be a boolean")
    config.update(overrides)  # type: ignore
    return config


def load_config_file(config_file: Optional[str]) -> Config:
    if not config_file:
        return merge_config()
    with open(config_file, encoding="utf-8") as fp:
        return merge_config(yaml.safe_load(fp))
