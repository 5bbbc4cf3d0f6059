"""Travel agent models."""

from .common import LinkedObject


class Agent(LinkedObject):
    id: int
    name: str = ""
    reference: str = ""
    type: str = ""
    tags: str = ""
    default_currency_code: str = ""
    group_id: int | None = None
    is_archived: bool | None = None
    commission_mode: int | None = None
    billing_type: str | None = None
    vat_number: str | None = None
    external_reference: str | None = None


class AgentStaff(LinkedObject):
    id: int
    name: str = ""
    reference: str = ""
    email: str = ""
