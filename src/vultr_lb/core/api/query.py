"""Query string encoding for list operations."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Union
from urllib.parse import urlencode

from pydantic import BaseModel

from ..exceptions import RequestBuildError
from ..resources.pagination import ListOptions

QueryOptions = Union[ListOptions, BaseModel, Mapping, None]


def _encode_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (str, int, float)):
        return str(value)
    raise RequestBuildError(
        f"Query parameter '{key}' has unsupported type {type(value).__name__}",
        {"key": key},
    )


def encode_query(options: Optional[QueryOptions] = None) -> str:
    """Encode list options into a canonical query string.

    Keys are sorted and None values dropped, so equal options always give the
    same string and ``None``/``ListOptions()`` give ``""``.

    Raises:
        RequestBuildError: If ``options`` is not a model or mapping, or holds a
            value that is not a scalar.
    """
    if options is None:
        return ""

    if isinstance(options, BaseModel):
        pairs = options.model_dump(exclude_none=True)
    elif isinstance(options, Mapping):
        pairs = {str(key): value for key, value in options.items() if value is not None}
    else:
        raise RequestBuildError(
            f"Cannot encode {type(options).__name__} as query parameters"
        )

    return urlencode(
        [(key, _encode_value(key, pairs[key])) for key in sorted(pairs)]
    )
