"""Payment API actions."""

import warnings

from ..models.payments import CreatePaymentRequest, Payment
from .base import ApiGroup


class PaymentsApi(ApiGroup):
    """Request, list, and inspect payments against reservations."""

    def create(self, reservation_id: int, payment: CreatePaymentRequest) -> Payment:
        """Request a new payment against a reservation.

        Args:
            reservation_id: ID of the reservation to add the payment to.
            payment: Parameters for the payment.
        """
        path = f"/3/sales/reservations/{reservation_id}/payments"
        return self._parse(Payment, self._post(path, payment), path)

    def find(self, reservation_id: int, id: int) -> Payment:
        path = f"/3/sales/reservations/{reservation_id}/payments/{id}"
        return self._parse(Payment, self._get(path), path)

    def list(self, reservation_id: int) -> list[Payment]:
        """List the payments made against a reservation."""
        data = self._get(f"/3/sales/reservations/{reservation_id}/payments")
        return [Payment.model_validate(item) for item in data or []]

    def finalize(self, reservation_id: int, payment_id: int | str) -> Payment:
        """Finalize an existing payment.

        Deprecated: payments created through :meth:`create` do not need
        finalizing.
        """
        warnings.warn(
            "PaymentsApi.finalize is deprecated",
            DeprecationWarning,
            stacklevel=2,
        )
        path = (
            f"/sales/reservations/{reservation_id}/payments/{payment_id}"
            "/completionRequest"
        )
        return self._parse(Payment, self._post(path), path)
