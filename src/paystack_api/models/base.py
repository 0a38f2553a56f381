"""
Base classes for request values, request builders and response models.

Request values are frozen pydantic models. They are normally produced by a
``RequestBuilder``, whose ``build()`` enforces required fields and field
constraints before anything is sent over the network. Only the fields that
were actually set end up in the request payload.
"""

import copy
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict, Type, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer, ValidationError

from paystack_api.errors import PayStackValidationError


def _decimal_to_json(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Shares and percentages go out as JSON numbers, not strings
JsonDecimal = Annotated[Decimal, PlainSerializer(_decimal_to_json, when_used="json")]


def check_amount(value: str) -> str:
    """Ensure an amount is a string of digits with a positive value."""
    if not value.isdigit() or int(value) <= 0:
        raise ValueError("amount must be a positive whole number in the currency subunit")
    return value


class PayStackModel(BaseModel):
    """Base for response models; unknown fields from the API are ignored."""
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


class PayStackRequest(BaseModel):
    """Immutable, validated payload for one API call."""
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body PayStack expects, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class RequestBuilder:
    """
    Fluent builder for a ``PayStackRequest``.

    Subclasses set ``request_model`` and expose one chainable setter per field.
    Calling a setter twice overwrites the earlier value. ``build()`` does not
    consume the builder, so it can be built again or branched with ``copy()``.

    Example:
        builder = TransactionRequestBuilder().amount("10000").email("a@b.com")
        ngn = builder.copy().currency(Currency.NGN).build()
        ghs = builder.copy().currency(Currency.GHS).build()
    """

    request_model: ClassVar[Type[PayStackRequest]]

    def __init__(self):
        self._values: Dict[str, Any] = {}

    def _set(self, name: str, value: Any):
        # None clears the field so it is left out of the payload
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value
        return self

    def copy(self):
        """Return an independent builder holding the same field values."""
        clone = self.__class__()
        clone._values = copy.deepcopy(self._values)
        return clone

    def build(self):
        """
        Validate the collected fields and return the request value.

        Raises:
            PayStackValidationError: If a required field was never set or a
                field fails its constraints. ``field`` names the culprit.
        """
        for name, field_info in self.request_model.model_fields.items():
            if field_info.is_required() and name not in self._values:
                raise PayStackValidationError(f"Missing required field: {name}", field=name)

        try:
            return self.request_model.model_validate(self._values)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise PayStackValidationError(f"Invalid value for {field}: {error['msg']}", field=field) from e
