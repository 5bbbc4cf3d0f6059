"""Payment models."""

from typing import Literal, TypeAlias

import pydantic

from .common import ApiModel, LinkedObject

PaymentStatus: TypeAlias = Literal[
    "Failed", "Authorised", "Pending", "Complete", "UserCancelled", "Initialised"
]

PaymentProvider: TypeAlias = Literal[
    "NotSet", "GlobalPayments", "Opayo", "Test", "Syntec", "DataCash"
]


class ProviderDatum(pydantic.BaseModel):
    """Provider-specific key/value pair. Keys are lowercase on the wire."""

    key: str
    value: str


class PaymentAmount(ApiModel):
    currency_code: str
    value: float


class CreatePaymentRequest(ApiModel):
    type_id: int | None = None
    amount: PaymentAmount | None = None
    authorisation_code: str | None = None
    transaction_reference: str | None = None
    reference: str | None = None
    token: str | None = None
    last4_digits: str | None = pydantic.Field(None, alias="Last4Digits")
    status: PaymentStatus | None = None
    provider: PaymentProvider | None = None
    provider_data: list[ProviderDatum] = []


class PaymentType(ApiModel):
    id: int
    name: str | None = None
    payment_method: str | None = None


class PaymentUser(ApiModel):
    id: int | None = None


class Payment(LinkedObject):
    id: int
    created_date_time: str = ""
    created_by: PaymentUser | None = None
    type: PaymentType | None = None
    payment_amount: PaymentAmount | None = None
    authorisation_code: str | None = None
    transaction_reference: str | None = None
    last4_digits: str | None = pydantic.Field(None, alias="Last4Digits")
    status: str | None = None
    provider_data: list[ProviderDatum] | None = None
    provider: str | None = None
    reference: str | None = None
    completed_date: str | None = None
    is_scheduled: bool | None = None
    scheduled_date: str | None = None
    is_scheduled_principal: bool | None = None
    is_scheduled_principal_candidate: bool | None = None
    is_scheduled_final: bool | None = None
