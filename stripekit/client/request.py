"""
Request builders.

Every endpoint is a ``StripeRequest`` subclass: path identifiers and required
body fields go through the constructor, optional fields through chained setters
that record the value and return the builder. Only fields that were explicitly
set reach the wire; ``build()`` turns the builder into a ``RequestBuilder``
descriptor that a transport can send.
"""

from typing import Any, ClassVar, Generic, Literal, Self, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

from stripekit.client.encoding import encode_params
from stripekit.client.transport import StripeBlockingTransport, StripeTransport
from stripekit.core.enums import StripeMethod
from stripekit.types.polymorphic import decode_response, describe_type

Output = TypeVar("Output")


class RequestParams(BaseModel):
    """Base of every parameter struct. Unset fields are never serialized."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True, by_alias=True)


class RequestBuilder(BaseModel):
    """Transport-ready description of a single API call."""

    model_config = ConfigDict(frozen=True)

    method: StripeMethod
    path: str
    params: dict[str, Any] = {}

    @property
    def encoding(self) -> Literal["query", "form"]:
        return "form" if self.method == StripeMethod.POST else "query"

    def encode(self) -> dict[str, str]:
        return encode_params(self.params)


class StripeRequest(Generic[Output]):
    """
    Base class for endpoint builders.

    Subclasses declare:

    - ``method``: the HTTP verb.
    - ``output``: the type the response body decodes to.
    - ``params_model``: the ``RequestParams`` subclass holding the endpoint's
      fields, or None for endpoints without parameters.
    - ``path()``: the endpoint path with identifiers substituted.
    """

    method: ClassVar[StripeMethod] = StripeMethod.GET
    output: ClassVar[Any]
    params_model: ClassVar[type[RequestParams] | None] = None

    def __init__(self, **fields: Any) -> None:
        self._params = self.params_model(**fields) if self.params_model else None

    def path(self) -> str:
        raise NotImplementedError

    def _set(self, **fields: Any) -> Self:
        if self._params is None:
            raise TypeError(f"{type(self).__name__} takes no parameters")
        for name, value in fields.items():
            setattr(self._params, name, value)
        return self

    def _unset(self, *names: str) -> Self:
        """Forget fields so they are omitted from the payload again."""
        if self._params is None:
            return self
        for name in names:
            if name in self._params.model_fields_set:
                setattr(self._params, name, None)
                self._params.model_fields_set.discard(name)
        return self

    def has_param(self, name: str) -> bool:
        """True when ``name`` is a parameter this endpoint accepts."""
        return self.params_model is not None and name in self.params_model.model_fields

    def is_set(self, name: str) -> bool:
        """True when ``name`` has been explicitly set on this builder."""
        return self._params is not None and name in self._params.model_fields_set

    def params(self) -> dict[str, Any]:
        """The explicitly set fields, keyed by their wire names."""
        if self._params is None:
            return {}
        return self._params.to_payload()

    def build(self) -> RequestBuilder:
        return RequestBuilder(method=self.method, path=self.path(), params=self.params())

    @classmethod
    def _adapter(cls) -> TypeAdapter:
        adapter = cls.__dict__.get("_type_adapter")
        if adapter is None:
            adapter = TypeAdapter(cls.output)
            cls._type_adapter = adapter
        return adapter

    @classmethod
    def decode(cls, raw: bytes | str | dict[str, Any]) -> Output:
        """Decode a complete response body into ``output``."""
        return decode_response(cls._adapter(), raw, target=describe_type(cls.output))

    async def send(
        self,
        client: StripeTransport,
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> Output:
        request = self.build()
        raw = await client.send(
            request.method.value,
            request.path,
            request.encode(),
            idempotency_key=idempotency_key,
            stripe_account=stripe_account,
        )
        return self.decode(raw)

    def send_blocking(
        self,
        client: StripeBlockingTransport,
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> Output:
        request = self.build()
        raw = client.send(
            request.method.value,
            request.path,
            request.encode(),
            idempotency_key=idempotency_key,
            stripe_account=stripe_account,
        )
        return self.decode(raw)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.method.value} {self.path()} {self.params()!r})"


__all__ = [
    "RequestParams",
    "RequestBuilder",
    "StripeRequest",
]
