# app/domain/services/invoice_calculator.py
"""
Cálculo de subtotales, impuestos y totales de una factura.

El mismo código sirve para la vista previa (POST /invoices/calculate) y para
los totales que se guardan al crear la factura, así ambos coinciden siempre.
No se redondea aquí: el redondeo a 2 decimales es solo de presentación.
"""
import math
from typing import Any, Iterable

from app.domain.models.invoice import InvoiceTotals, LineItem


def to_number(value: Any) -> float:
    """Convierte a float; un valor ausente, no numérico o infinito vale 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def calculate_line_item(quantity: Any, unit_price: Any, tax_rate: Any) -> InvoiceTotals:
    quantity = to_number(quantity)
    unit_price = to_number(unit_price)
    tax_rate = to_number(tax_rate)

    subtotal = quantity * unit_price
    tax_amount = subtotal * (tax_rate / 100)
    return InvoiceTotals(subtotal=subtotal, tax_amount=tax_amount, total=subtotal + tax_amount)


def compute_line_item(item: LineItem) -> LineItem:
    """Devuelve una copia del ítem con sus campos derivados recalculados."""
    totals = calculate_line_item(item.quantity, item.unit_price, item.tax_rate)
    return item.model_copy(update=totals.model_dump())


def aggregate_totals(items: Iterable[LineItem]) -> InvoiceTotals:
    """
    Suma los subtotales e impuestos de los ítems ya calculados. El total de la
    factura es subtotal + impuesto, sin redondeos intermedios.
    """
    subtotal = 0.0
    tax_amount = 0.0
    for item in items:
        subtotal += item.subtotal
        tax_amount += item.tax_amount
    return InvoiceTotals(subtotal=subtotal, tax_amount=tax_amount, total=subtotal + tax_amount)


def format_currency(amount: float) -> str:
    return "{:,.2f}".format(amount or 0)
