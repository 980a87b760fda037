"""Tests for receipt data models and input defaults."""

import dataclasses
from decimal import Decimal

import pytest

from flowreceipt.models import (
    Charge,
    ReceiptData,
    charge_from_dict,
    receipt_from_dict,
    receipt_to_dict,
    to_decimal,
)


class TestReceiptData:
    def test_frozen(self):
        """ReceiptData cannot be mutated after construction."""
        receipt = receipt_from_dict(today="01/01/2025")
        with pytest.raises(dataclasses.FrozenInstanceError):
            receipt.total_paid = Decimal("1")  # type: ignore[misc]

    def test_charges_list_becomes_tuple(self):
        """A list of charges is stored as a tuple in the same order."""
        charges = [
            Charge("A", "first", "01/01/2025", Decimal("1")),
            Charge("B", "second", "01/01/2025", Decimal("2")),
        ]
        receipt = ReceiptData(
            receipt_number="R1",
            date="01/01/2025",
            customer_name="Ana",
            customer_document="000",
            charges=charges,  # type: ignore[arg-type]
        )
        assert isinstance(receipt.charges, tuple)
        assert [c.id for c in receipt.charges] == ["A", "B"]


class TestReceiptFromDict:
    def test_defaults(self):
        """No input yields the demonstration receipt."""
        receipt = receipt_from_dict(today="19/10/2026")
        assert receipt.receipt_number == "FF-2025-12345"
        assert receipt.customer_name == "Maria Silva"
        assert receipt.customer_document == "123.456.789-00"
        assert receipt.date == "19/10/2026"
        assert receipt.payment_date == "19/10/2026"
        assert [c.id for c in receipt.charges] == ["CH001", "CH002", "CH003"]
        assert receipt.charges[0].amount == Decimal("99.90")
        assert receipt.subtotal == Decimal("154.80")
        assert receipt.total_paid == Decimal("154.80")
        assert receipt.discount == Decimal("0")
        assert receipt.transaction_id == "TRX-789456123"

    def test_default_date_uses_format(self):
        """Absent dates default to today in the given format."""
        receipt = receipt_from_dict({}, date_format="%Y")
        assert len(receipt.date) == 4
        assert receipt.date.isdigit()

    def test_camel_case_keys(self):
        """camelCase keys from JSON clients are accepted."""
        receipt = receipt_from_dict(
            {
                "receiptNumber": "X-1",
                "customerName": "João",
                "totalPaid": 10.5,
                "serviceFee": "1.25",
                "charges": [
                    {"id": "C1", "description": "d", "dueDate": "05/05/2025", "amount": 10}
                ],
            },
            today="01/01/2025",
        )
        assert receipt.receipt_number == "X-1"
        assert receipt.customer_name == "João"
        assert receipt.total_paid == Decimal("10.5")
        assert receipt.service_fee == Decimal("1.25")
        assert receipt.charges[0].due_date == "05/05/2025"

    def test_snake_case_keys(self):
        """snake_case keys are accepted too."""
        receipt = receipt_from_dict(
            {"receipt_number": "S-1", "payment_method": "Pix"}, today="01/01/2025"
        )
        assert receipt.receipt_number == "S-1"
        assert receipt.payment_method == "Pix"

    def test_falsy_values_are_kept(self):
        """Present zero amounts and empty lists are not replaced by defaults."""
        receipt = receipt_from_dict(
            {"subtotal": 0, "totalPaid": 0, "charges": []}, today="01/01/2025"
        )
        assert receipt.subtotal == Decimal("0")
        assert receipt.total_paid == Decimal("0")
        assert receipt.charges == ()

    def test_null_transaction_id(self):
        """An explicit null transaction id means the receipt has none."""
        receipt = receipt_from_dict({"transactionId": None}, today="01/01/2025")
        assert receipt.transaction_id is None

    def test_empty_transaction_id(self):
        receipt = receipt_from_dict({"transactionId": ""}, today="01/01/2025")
        assert receipt.transaction_id is None

    def test_null_fields_fall_back_to_defaults(self):
        """A null value is treated like an absent key."""
        receipt = receipt_from_dict(
            {"customerName": None, "charges": None, "totalPaid": None, "date": None},
            today="01/01/2025",
        )
        assert receipt.customer_name == "Maria Silva"
        assert [c.id for c in receipt.charges] == ["CH001", "CH002", "CH003"]
        assert receipt.total_paid == Decimal("154.80")
        assert receipt.date == "01/01/2025"

    def test_charges_must_be_a_list(self):
        with pytest.raises(ValueError, match="charges must be a list"):
            receipt_from_dict({"charges": "CH001"})

    def test_charge_entries_must_be_objects(self):
        with pytest.raises(ValueError, match="Charge must be an object"):
            receipt_from_dict({"charges": ["CH001"]})

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-inf", float("nan")])
    def test_non_finite_amount_rejected(self, amount):
        """Non-finite amounts fail at the boundary, before any rendering."""
        with pytest.raises(ValueError, match="monetary"):
            receipt_from_dict(
                {"charges": [{"id": "C1", "amount": amount}]}, today="01/01/2025"
            )
        with pytest.raises(ValueError, match="monetary"):
            receipt_from_dict({"subtotal": amount}, today="01/01/2025")

    def test_negative_amounts_pass_through(self):
        """Amounts are not validated."""
        receipt = receipt_from_dict({"discount": "-3.10"}, today="01/01/2025")
        assert receipt.discount == Decimal("-3.10")

    def test_invalid_amount(self):
        """A non-numeric amount raises ValueError."""
        with pytest.raises(ValueError, match="monetary"):
            receipt_from_dict({"tax": "abc"})


class TestConversions:
    def test_float_goes_through_str(self):
        assert to_decimal(99.9) == Decimal("99.9")

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            to_decimal(True)

    def test_charge_from_dict_defaults(self):
        charge = charge_from_dict({"id": "C9"})
        assert charge.id == "C9"
        assert charge.description == ""
        assert charge.amount == Decimal("0")

    def test_charge_from_dict_nulls(self):
        """Null charge fields become empty text and a zero amount."""
        charge = charge_from_dict(
            {"id": None, "description": None, "dueDate": None, "amount": None, "status": None}
        )
        assert (charge.id, charge.description, charge.due_date, charge.status) == ("", "", "", "")
        assert charge.amount == Decimal("0")

    def test_to_decimal_rejects_infinity(self):
        with pytest.raises(ValueError, match="Not a monetary amount"):
            to_decimal("Infinity")

    def test_receipt_to_dict(self):
        """Serialized receipts use camelCase keys and string amounts."""
        receipt = receipt_from_dict(today="01/01/2025")
        data = receipt_to_dict(receipt)
        assert data["receiptNumber"] == "FF-2025-12345"
        assert data["totalPaid"] == "154.80"
        assert data["charges"][1]["dueDate"] == "10/05/2025"
        assert receipt_from_dict(data) == receipt
