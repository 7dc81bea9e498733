"""
Decoding of responses whose shape depends on a marker field.

Stripe returns either the live object or a deleted stub from the same
endpoint (``GET /customers/{id}`` on a deleted customer yields
``{"id": ..., "object": "customer", "deleted": true}``). The marker may appear
anywhere in the object, so the whole body is parsed first and the shape is
picked from the complete mapping. Validation then runs against that one shape
only; a body missing fields of the chosen shape is an error even when it would
satisfy the other one.
"""

import json
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, Discriminator, Tag, TypeAdapter, ValidationError

from stripekit.core.config import decode_logger
from stripekit.core.exceptions.types import StripeDecodeError

T = TypeVar("T")

LIVE_TAG = "live"
DELETED_TAG = "deleted"


def deleted_discriminator(value: Any) -> str | None:
    """Pick the shape tag for ``value``; None for anything that is not an object."""
    if isinstance(value, dict):
        return DELETED_TAG if value.get("deleted") is True else LIVE_TAG
    if isinstance(value, BaseModel):
        return DELETED_TAG if getattr(value, "deleted", False) is True else LIVE_TAG
    return None


def MaybeDeleted(live: type[Any], deleted: type[Any]) -> Any:
    """Build the ``live | deleted`` union type selected by the ``deleted`` marker."""
    return Annotated[
        Union[Annotated[live, Tag(LIVE_TAG)], Annotated[deleted, Tag(DELETED_TAG)]],
        Discriminator(
            deleted_discriminator,
            custom_error_type="invalid_object",
            custom_error_message=f"Expected a {live.__name__} or {deleted.__name__} object",
        ),
    ]


def describe_type(tp: Any) -> str:
    """Readable name for an output type, e.g. ``Customer | DeletedCustomer``."""
    if get_origin(tp) is Annotated:
        return describe_type(get_args(tp)[0])
    if get_origin(tp) is Union:
        return " | ".join(describe_type(arg) for arg in get_args(tp))
    return getattr(tp, "__name__", None) or repr(tp)


def decode_response(
    adapter: TypeAdapter[T], raw: bytes | str | dict[str, Any], target: str | None = None
) -> T:
    """
    Decode a buffered response body with ``adapter``.

    Parameters
    ----------
    adapter : TypeAdapter
        Adapter for the expected output type.
    raw : bytes | str | dict
        The complete response body, or an already parsed mapping.
    target : str, optional
        Name of the expected type, used in error messages.

    Returns
    -------
        The validated result. Decoding the same body twice yields equal values.

    Raises
    ------
        StripeDecodeError
            If the body is not valid JSON or does not match the expected shape.
    """
    target = target or "response"
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            decode_logger.warning(f"Invalid JSON while decoding {target}: {exc}")
            raise StripeDecodeError(
                message=f"Response body is not valid JSON: {exc}",
                target=target,
                errors=[{"type": "json_invalid", "msg": str(exc)}],
            ) from exc

    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        decode_logger.warning(
            f"Response does not match {target}: {exc.error_count()} error(s); first: {errors[0]['msg'] if errors else 'N/A'}"
        )
        raise StripeDecodeError(
            message=f"Response does not match {target}",
            target=target,
            errors=errors,
        ) from exc


__all__ = [
    "MaybeDeleted",
    "deleted_discriminator",
    "describe_type",
    "decode_response",
]
