"""Helpers to build API paths and encoded parameter strings."""

import json
from typing import Any
from urllib.parse import quote, urlencode


def api_path(template: str, *args: Any) -> str:
    """Fill a %s path template, URL-encoding every argument.

    Example:
        api_path("/1/indexes/%s/synonyms/%s", "my index", "a/b")
        -> "/1/indexes/my%20index/synonyms/a%2Fb"
    """
    return template % tuple(quote(str(arg), safe="") for arg in args)


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_params_string(params: dict[str, Any]) -> str:
    """Encode search parameters as the `params` string of multi-index calls."""
    return urlencode(
        {key: _encode_value(value) for key, value in params.items()}
    )
