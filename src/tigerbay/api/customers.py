"""Customer management API actions."""

from collections.abc import Sequence

import httpx

from ..models.common import UpdateOperation
from ..models.customers import (
    CreateCustomerRequest,
    Customer,
    CustomerContact,
    CustomerDocument,
    CustomerSearchRequest,
)
from ..query import flatten_query
from .base import ApiGroup


class CustomersApi(ApiGroup):
    """Search and create customers."""

    def search(self, params: CustomerSearchRequest) -> list[Customer]:
        """Search existing customers.

        Filters are sent as ``search[...]`` query parameters.
        """
        data = self._get(
            "/sales/customers/search", params=flatten_query(params, "search")
        )
        return [Customer.model_validate(item) for item in data or []]

    def create(self, params: CreateCustomerRequest) -> Customer:
        path = "/sales/customers"
        return self._parse(Customer, self._post(path, params), path)

    def create_contact(self, customer_id: int, contact: CustomerContact) -> Customer:
        path = f"/sales/customers/{customer_id}/contacts"
        return self._parse(Customer, self._post(path, contact), path)


class CustomerApi(ApiGroup):
    """API actions bound to a single customer."""

    def __init__(self, http: httpx.Client, customer_id: int):
        super().__init__(http)
        self.customer_id = customer_id

    @property
    def path(self) -> str:
        return f"/sales/customers/{self.customer_id}"

    def find(self) -> Customer:
        return self._parse(Customer, self._get(self.path), self.path)

    def contacts(self) -> list[CustomerContact]:
        data = self._get(f"{self.path}/contacts")
        return [CustomerContact.model_validate(item) for item in data or []]

    def create_contact(self, contact: CustomerContact) -> Customer:
        path = f"{self.path}/contacts"
        return self._parse(Customer, self._post(path, contact), path)

    def documents(self) -> list[CustomerDocument]:
        """List documents issued to the customer."""
        data = self._get(f"{self.path}/documents")
        return [CustomerDocument.model_validate(item) for item in data or []]

    def update(self, updates: Sequence[UpdateOperation]) -> None:
        """Apply JSON-patch style updates to the customer record."""
        self._patch(self.path, updates)
