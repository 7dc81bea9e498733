from enum import Enum
from typing import Any


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def flatten_to_payload(
    payload: dict[str, str],
    prefix: str,
    data: Any,
    *,
    max_depth: int = 5,
    _current_depth: int = 0,
) -> None:
    """
    Flatten a nested value into Stripe's bracket-notation format.

    Dicts become ``prefix[key]`` entries and lists become ``prefix[index]``
    entries, recursively. The same flat mapping is used for the query string
    of GET/DELETE requests and for the form body of POST requests.

    Example:
        data = {"metadata": {"user_id": "123"}, "expand": ["default_source"]}
        flatten_to_payload(payload, "", data)
        Result: payload["metadata[user_id]"] = "123"
                payload["expand[0]"] = "default_source"

    Parameters
    ----------
    payload : dict[str, str]
        The payload dict to add flattened keys to.
    prefix : str
        The base key prefix. An empty prefix means ``data`` is the top level.
    data : Any
        The value to flatten.
    max_depth : int, optional
        Maximum nesting depth to prevent infinite recursion. Defaults to 5.
        Deeper values raise ``ValueError`` rather than being sent as a string.
    _current_depth : int
        Internal counter for recursion depth. Do not set manually.
    """
    if isinstance(data, dict):
        items = data.items()
    elif isinstance(data, (list, tuple)):
        items = enumerate(data)
    else:
        payload[prefix] = _scalar(data)
        return

    for key, value in items:
        full_key = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, (dict, list, tuple)):
            if _current_depth + 1 >= max_depth:
                raise ValueError(
                    f"Parameter {full_key!r} is nested deeper than {max_depth} levels"
                )
            flatten_to_payload(
                payload,
                full_key,
                value,
                max_depth=max_depth,
                _current_depth=_current_depth + 1,
            )
        else:
            payload[full_key] = _scalar(value)


def encode_params(params: dict[str, Any]) -> dict[str, str]:
    """Flatten a parameter mapping into the ``key -> string`` pairs sent on the wire."""
    payload: dict[str, str] = {}
    flatten_to_payload(payload, "", params)
    return payload


__all__ = ["flatten_to_payload", "encode_params"]
