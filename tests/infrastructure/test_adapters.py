"""Tests for the local payment gateway and the outbox notifier."""

from email import message_from_bytes

import pytest

from productor.domain.exceptions import PaymentError
from productor.domain.model.configuration import BoxOptions, ProductConfiguration, ProductType
from productor.domain.model.order import Order
from productor.domain.model.value_objects import DeliveryDetails
from productor.domain.port.payment_gateway import PaymentRequest
from productor.domain.service.pricing import with_recomputed_price
from productor.infrastructure.adapters.local_payment_gateway import LocalPaymentGateway
from productor.infrastructure.adapters.outbox_notifier import OutboxOrderNotifier


def _request(**overrides) -> PaymentRequest:
    fields = {
        "amount_minor": 2800,
        "currency": "NGN",
        "customer_email": "ada@example.com",
        "order_reference": "ORD-000001",
        **overrides,
    }
    return PaymentRequest(**fields)


class TestLocalPaymentGateway:

    def test_approves_charge(self):
        receipt = LocalPaymentGateway().charge(_request())
        assert receipt.reference.startswith("PAY-")
        assert receipt.amount_minor == 2800

    def test_zero_amount_declined(self):
        with pytest.raises(PaymentError, match="greater than zero"):
            LocalPaymentGateway().charge(_request(amount_minor=0))

    def test_other_currency_declined(self):
        with pytest.raises(PaymentError, match="Unsupported currency"):
            LocalPaymentGateway().charge(_request(currency="USD"))


class TestOutboxOrderNotifier:

    def test_writes_customer_and_business_messages(self, tmp_path):
        config = with_recomputed_price(
            ProductConfiguration(
                product_type=ProductType.COOKIES,
                options=BoxOptions(box_size=6, box_flavors=("vanilla", "oatmeal")),
                delivery=DeliveryDetails("Ada Obi", "12 Marina Rd", "08012345678", "Lagos"),
            )
        )
        order = Order.create("ada@example.com", config)
        order.id = 3
        order.confirm("PAY-1")

        OutboxOrderNotifier(tmp_path, business_email="shop@example.com").order_placed(order)

        customer = message_from_bytes((tmp_path / "ORD-000003-customer.eml").read_bytes())
        business = message_from_bytes((tmp_path / "ORD-000003-business.eml").read_bytes())
        assert customer["To"] == "ada@example.com"
        assert customer["Subject"] == "Order Confirmation ORD-000003"
        assert business["To"] == "shop@example.com"
        body = customer.get_payload(decode=True).decode("utf-8")
        assert "Flavors: vanilla, oatmeal" in body
        assert "Total: ₦28" in body
