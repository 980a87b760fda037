"""Printed labels for each supported document locale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Labels:
    title: str
    receipt_info: str
    receipt_number: str
    date: str
    customer: str
    document: str
    charges: str
    continuation: str
    due: str
    totals: str
    subtotal: str
    discount: str
    service_fee: str
    tax: str
    total_paid: str
    payment: str
    method: str
    payment_date: str
    transaction_id: str
    authenticity_notice: str
    auth_code: str
    issued_at: str
    page_of: str

    def page_fragment(self, page: int, total: int) -> str:
        return self.page_of.format(page=page, total=total)


EN = Labels(
    title="PAYMENT RECEIPT",
    receipt_info="RECEIPT INFORMATION",
    receipt_number="RECEIPT NO.:",
    date="DATE:",
    customer="CUSTOMER:",
    document="DOCUMENT:",
    charges="CHARGES",
    continuation="(continuation)",
    due="Due",
    totals="AMOUNT SUMMARY",
    subtotal="SUBTOTAL:",
    discount="DISCOUNT:",
    service_fee="SERVICE FEE:",
    tax="TAX:",
    total_paid="TOTAL PAID:",
    payment="PAYMENT DETAILS",
    method="METHOD:",
    payment_date="DATE:",
    transaction_id="TRANSACTION ID:",
    authenticity_notice="This document is authentic and was generated electronically.",
    auth_code="Authentication code: {code}",
    issued_at="Issued at {timestamp}",
    page_of="page {page} of {total}",
)

PT_BR = Labels(
    title="COMPROVANTE DE PAGAMENTO",
    receipt_info="INFORMAÇÕES DO RECIBO",
    receipt_number="RECIBO Nº:",
    date="DATA:",
    customer="CLIENTE:",
    document="DOCUMENTO:",
    charges="COBRANÇAS",
    continuation="(continuação)",
    due="Venc",
    totals="RESUMO DE VALORES",
    subtotal="SUBTOTAL:",
    discount="DESCONTO:",
    service_fee="TAXA DE SERVIÇO:",
    tax="IMPOSTO:",
    total_paid="TOTAL PAGO:",
    payment="DETALHES DO PAGAMENTO",
    method="MÉTODO:",
    payment_date="DATA:",
    transaction_id="ID TRANSAÇÃO:",
    authenticity_notice="Este documento é autêntico e foi gerado eletronicamente.",
    auth_code="Código de autenticação: {code}",
    issued_at="Emitido em {timestamp}",
    page_of="página {page} de {total}",
)

_LOCALES: dict[str, Labels] = {
    "en": EN,
    "pt-BR": PT_BR,
}


def labels_for(locale: str) -> Labels:
    """Return the label set for ``locale``.

    Raises:
        ValueError: If the locale is not supported.
    """
    try:
        return _LOCALES[locale]
    except KeyError:
        raise ValueError(
            f"Unsupported locale: {locale!r} "
            f"(choose from {', '.join(sorted(_LOCALES))})"
        ) from None
