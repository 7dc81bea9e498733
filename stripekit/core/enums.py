"""
String vocabularies used on the Stripe wire.

Two policies, one per direction:

- Outgoing request parameters are strict. ``StripeEnum.param`` only accepts a
  known member (or its wire string) and raises ``StripeParseError`` otherwise,
  including for the ``UNKNOWN`` placeholder of lenient vocabularies.
- Incoming response data is lenient for every ``LenientStripeEnum``: values the
  server introduced after this release decode to ``UNKNOWN`` instead of failing.
"""

from enum import Enum
from typing import Annotated, Any, TypeVar

from pydantic import GetCoreSchemaHandler, PlainSerializer, PlainValidator
from pydantic_core import core_schema

from stripekit.core.exceptions.types import StripeParseError

E = TypeVar("E", bound="StripeEnum")


class StripeEnum(str, Enum):
    """Closed vocabulary; ``parse`` rejects strings outside the accepted set."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls: type[E], value: Any) -> E:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise StripeParseError(
                f"Unknown value for {cls.__name__}: {value!r}",
                enum_name=cls.__name__,
                value=value,
            ) from exc

    @classmethod
    def param(cls: type[E], value: Any) -> E:
        """Resolve ``value`` for use as a request parameter."""
        member = None
        if isinstance(value, cls):
            member = value
        elif isinstance(value, str):
            member = cls._value2member_map_.get(value)
        if member is None or member._is_placeholder():
            raise StripeParseError(
                f"{value!r} is not a valid {cls.__name__} request value",
                enum_name=cls.__name__,
                value=value,
            )
        return member  # type: ignore[return-value]

    def _is_placeholder(self) -> bool:
        return False


class LenientStripeEnum(StripeEnum):
    """Open vocabulary for response data. Subclasses must declare ``UNKNOWN = "unknown"``."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls._value2member_map_.get("unknown")
        return None

    def _is_placeholder(self) -> bool:
        return self.value == "unknown"

    @classmethod
    def _validate(cls, value: Any) -> "LenientStripeEnum":
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"{cls.__name__} expects a string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate, serialization=core_schema.to_string_ser_schema()
        )


def param_enum(enum_cls: type[E]) -> Any:
    """Annotate a request-parameter field so it goes through ``enum_cls.param``."""
    return Annotated[
        enum_cls,
        PlainValidator(enum_cls.param),
        PlainSerializer(lambda member: member.value, return_type=str),
    ]


class StripeMethod(StripeEnum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


__all__ = [
    "StripeEnum",
    "LenientStripeEnum",
    "StripeMethod",
    "param_enum",
]
