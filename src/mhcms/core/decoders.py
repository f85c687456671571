"""Pluggable decoders: custom header schemas and embedded object languages"""

import json
from typing import Any, Callable, Mapping, Optional

import yaml
from pydantic import BaseModel

from mhcms.core.errors import CustomHeaderDecodeError


HeaderSchema = Callable[[dict[str, str]], Any]
ObjectDecoder = Callable[[str], Any]

DEFAULT_OBJECT_DECODERS: dict[str, ObjectDecoder] = {
    "yaml": yaml.safe_load,
    "json": json.loads,
}


def string_map(raw: dict[str, str]) -> dict[str, str]:
    """Default custom header schema: accept any string-to-string mapping as-is."""
    for key, value in raw.items():
        if not isinstance(value, str):
            raise CustomHeaderDecodeError(f"Header '{key}' is not a string", raw)
    return dict(raw)


def model_schema(model: type[BaseModel]) -> HeaderSchema:
    """Build a custom header schema that validates the residual headers with a pydantic model."""
    def decode(raw: dict[str, str]) -> BaseModel:
        return model.model_validate(raw)
    decode.__name__ = f"{model.__name__}_schema"
    return decode


def object_decoders(extra: Optional[Mapping[str, Optional[ObjectDecoder]]] = None) -> dict[str, ObjectDecoder]:
    """Return the default object decoders with `extra` merged over them; None disables a language."""
    decoders = dict(DEFAULT_OBJECT_DECODERS)
    if extra:
        decoders.update(extra)
    return {tag: decode for tag, decode in decoders.items() if decode is not None}
