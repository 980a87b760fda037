"""Receipt data models and the input boundary that fills in defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as date_cls
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping


@dataclass(frozen=True)
class Charge:
    """A single billed item on the receipt."""

    id: str
    description: str
    due_date: str
    amount: Decimal
    status: str = ""


@dataclass(frozen=True)
class ReceiptData:
    """Everything printed on a payment receipt.

    Monetary fields share one currency. ``charges`` keeps the order in which
    rows are rendered.
    """

    receipt_number: str
    date: str
    customer_name: str
    customer_document: str
    charges: tuple[Charge, ...] = field(default_factory=tuple)
    subtotal: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    tax: Decimal = Decimal("0")
    service_fee: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    payment_method: str = ""
    payment_date: str = ""
    transaction_id: str | None = None

    def __post_init__(self) -> None:
        # Lists handed in by callers are frozen into a tuple.
        if not isinstance(self.charges, tuple):
            object.__setattr__(self, "charges", tuple(self.charges))


# Demonstration receipt used for every field the caller leaves out
_DEFAULT_CHARGES: list[dict[str, Any]] = [
    {
        "id": "CH001",
        "description": "Assinatura Mensal - Maio/2025",
        "dueDate": "10/05/2025",
        "amount": "99.90",
        "status": "Pago",
    },
    {
        "id": "CH002",
        "description": "Serviços Adicionais",
        "dueDate": "10/05/2025",
        "amount": "49.90",
        "status": "Pago",
    },
    {
        "id": "CH003",
        "description": "Taxa de Processamento",
        "dueDate": "10/05/2025",
        "amount": "5.00",
        "status": "Pago",
    },
]

_DEFAULTS: dict[str, Any] = {
    "receipt_number": "FF-2025-12345",
    "customer_name": "Maria Silva",
    "customer_document": "123.456.789-00",
    "subtotal": "154.80",
    "discount": "0",
    "tax": "0",
    "service_fee": "0",
    "total_paid": "154.80",
    "payment_method": "Cartão de Crédito",
    "transaction_id": "TRX-789456123",
}

# snake_case field -> camelCase key used by JSON clients
_CAMEL_KEYS: dict[str, str] = {
    "receipt_number": "receiptNumber",
    "customer_name": "customerName",
    "customer_document": "customerDocument",
    "service_fee": "serviceFee",
    "total_paid": "totalPaid",
    "payment_method": "paymentMethod",
    "payment_date": "paymentDate",
    "transaction_id": "transactionId",
    "due_date": "dueDate",
}

_MISSING = object()


def _lookup(data: Mapping[str, Any], name: str) -> Any:
    if name in data:
        return data[name]
    camel = _CAMEL_KEYS.get(name)
    if camel is not None and camel in data:
        return data[camel]
    return _MISSING


def to_decimal(value: Any) -> Decimal:
    """Convert a JSON/TOML number or numeric string to a Decimal.

    Floats go through ``str()`` so ``99.9`` becomes ``Decimal("99.9")``
    instead of its binary expansion.

    Raises:
        ValueError: If the value is not a number.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a monetary amount: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")
    return result


def _present(data: Mapping[str, Any], name: str) -> Any:
    """Like ``_lookup``, but a ``None`` value counts as missing."""
    value = _lookup(data, name)
    return _MISSING if value is None else value


def charge_from_dict(data: Mapping[str, Any]) -> Charge:
    """Build a Charge from a mapping with snake_case or camelCase keys.

    Absent or ``None`` fields become empty strings, or zero for the amount.

    Raises:
        ValueError: If ``data`` is not a mapping or the amount cannot be parsed.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Charge must be an object, got {type(data).__name__}")

    def text(name: str) -> str:
        value = _present(data, name)
        return "" if value is _MISSING else str(value)

    amount = _present(data, "amount")
    return Charge(
        id=text("id"),
        description=text("description"),
        due_date=text("due_date"),
        amount=to_decimal(0 if amount is _MISSING else amount),
        status=text("status"),
    )


def receipt_from_dict(
    data: Mapping[str, Any] | None = None,
    today: str | None = None,
    date_format: str = "%d/%m/%Y",
) -> ReceiptData:
    """Build a ReceiptData, filling absent fields with the demonstration receipt.

    A key that is present wins even when its value is falsy, so ``"discount": 0``
    stays zero and ``"charges": []`` renders an empty table. A ``None`` value
    falls back to the default like an absent key, except ``transactionId``:
    ``None`` or ``""`` there means the receipt has no transaction id.

    Args:
        data: Receipt fields, snake_case or camelCase. ``None`` yields the
            full demonstration receipt.
        today: Value used for absent ``date`` / ``payment_date``. Defaults to
            today's date in ``date_format``.
        date_format: strftime pattern for the default dates.

    Raises:
        ValueError: If a monetary field cannot be parsed or ``charges`` is
            not a list of objects.
    """
    data = data or {}
    if today is None:
        today = date_cls.today().strftime(date_format)

    def pick(name: str, default: Any) -> Any:
        value = _present(data, name)
        return default if value is _MISSING else value

    raw_charges = pick("charges", _DEFAULT_CHARGES)
    if not isinstance(raw_charges, (list, tuple)):
        raise ValueError(
            f"charges must be a list, got {type(raw_charges).__name__}"
        )
    transaction_id = _lookup(data, "transaction_id")
    if transaction_id is _MISSING:
        transaction_id = _DEFAULTS["transaction_id"]

    return ReceiptData(
        receipt_number=str(pick("receipt_number", _DEFAULTS["receipt_number"])),
        date=str(pick("date", today)),
        customer_name=str(pick("customer_name", _DEFAULTS["customer_name"])),
        customer_document=str(
            pick("customer_document", _DEFAULTS["customer_document"])
        ),
        charges=tuple(charge_from_dict(c) for c in raw_charges),
        subtotal=to_decimal(pick("subtotal", _DEFAULTS["subtotal"])),
        discount=to_decimal(pick("discount", _DEFAULTS["discount"])),
        tax=to_decimal(pick("tax", _DEFAULTS["tax"])),
        service_fee=to_decimal(pick("service_fee", _DEFAULTS["service_fee"])),
        total_paid=to_decimal(pick("total_paid", _DEFAULTS["total_paid"])),
        payment_method=str(pick("payment_method", _DEFAULTS["payment_method"])),
        payment_date=str(pick("payment_date", today)),
        transaction_id=None if transaction_id in (None, "") else str(transaction_id),
    )


def receipt_to_dict(receipt: ReceiptData) -> dict[str, Any]:
    """Serialize a receipt to JSON-friendly camelCase keys."""
    return {
        "receiptNumber": receipt.receipt_number,
        "date": receipt.date,
        "customerName": receipt.customer_name,
        "customerDocument": receipt.customer_document,
        "charges": [
            {
                "id": c.id,
                "description": c.description,
                "dueDate": c.due_date,
                "amount": str(c.amount),
                "status": c.status,
            }
            for c in receipt.charges
        ],
        "subtotal": str(receipt.subtotal),
        "discount": str(receipt.discount),
        "tax": str(receipt.tax),
        "serviceFee": str(receipt.service_fee),
        "totalPaid": str(receipt.total_paid),
        "paymentMethod": receipt.payment_method,
        "paymentDate": receipt.payment_date,
        "transactionId": receipt.transaction_id,
    }
