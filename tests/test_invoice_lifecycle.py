"""Pruebas de las reglas de validación y de estado de las facturas."""

from datetime import datetime, timedelta

import pytest

from app.domain.exceptions import DeleteNotAllowedError, TransitionError
from app.domain.models.invoice import Invoice, InvoiceDraft, InvoiceStatus, LineItemDraft
from app.domain.services.invoice_lifecycle import InvoiceLifecycleGuard


def make_invoice(status: InvoiceStatus) -> Invoice:
    issued = datetime(2024, 5, 1, 10, 0)
    return Invoice(
        id="inv-1",
        invoice_number="F-0001",
        issue_date=issued,
        due_date=issued + timedelta(days=30),
        customer="c1",
        items=[],
        status=status,
    )


def valid_draft(**overrides) -> InvoiceDraft:
    data = {
        "invoice_number": "F-0001",
        "customer": "c1",
        "payment_method": "efectivo",
        "items": [LineItemDraft(product="p1", quantity=3, unit_price=100, tax_rate=16)],
    }
    data.update(overrides)
    return InvoiceDraft(**data)


def fields(errors):
    return [error["field"] for error in errors]


@pytest.mark.unit
class TestValidateCreation:
    """Validación de campos al crear una factura."""

    def test_valid_draft_has_no_errors(self):
        assert InvoiceLifecycleGuard().validate_creation(valid_draft()) == []

    def test_reports_all_header_errors_together(self):
        draft = valid_draft(invoice_number="  ", customer=None, payment_method="bitcoin", items=[])

        errors = InvoiceLifecycleGuard().validate_creation(draft)

        assert fields(errors) == ["invoiceNumber", "customer", "paymentMethod", "items"]

    def test_item_errors_use_their_position(self):
        draft = valid_draft(items=[
            LineItemDraft(product="p1", quantity=1, unit_price=10),
            LineItemDraft(product=None, quantity=0, unit_price=-1, tax_rate=-5),
        ])

        errors = InvoiceLifecycleGuard().validate_creation(draft)

        assert fields(errors) == [
            "items[1].product",
            "items[1].quantity",
            "items[1].unitPrice",
            "items[1].taxRate",
        ]

    def test_missing_numbers_are_reported(self):
        draft = valid_draft(items=[LineItemDraft(product="p1")])

        errors = InvoiceLifecycleGuard().validate_creation(draft)

        assert fields(errors) == ["items[0].quantity", "items[0].unitPrice"]
        assert errors[0]["message"] == "La cantidad debe ser un número"

    def test_fractional_quantity_above_one_is_valid(self):
        draft = valid_draft(items=[LineItemDraft(product="p1", quantity=1.5, unit_price=0)])

        assert InvoiceLifecycleGuard().validate_creation(draft) == []


@pytest.mark.unit
class TestStatusTransitions:
    """Cambios de estado en modo permisivo y en modo estricto."""

    @pytest.mark.parametrize("status", ["vencida", "EMITIDA", "", None])
    def test_unknown_status_is_rejected(self, status):
        with pytest.raises(TransitionError):
            InvoiceLifecycleGuard().check_transition(make_invoice(InvoiceStatus.EMITIDA), status)

    @pytest.mark.parametrize("current", list(InvoiceStatus))
    @pytest.mark.parametrize("target", list(InvoiceStatus))
    def test_permissive_mode_accepts_any_listed_status(self, current, target):
        result = InvoiceLifecycleGuard().check_transition(make_invoice(current), target.value)

        assert result == target

    def test_strict_mode_allows_forward_transitions(self):
        guard = InvoiceLifecycleGuard(strict=True)
        invoice = make_invoice(InvoiceStatus.EMITIDA)

        assert guard.check_transition(invoice, "pagada") == InvoiceStatus.PAGADA
        assert guard.check_transition(invoice, "cancelada") == InvoiceStatus.CANCELADA

    @pytest.mark.parametrize("current, target", [
        (InvoiceStatus.PAGADA, "emitida"),
        (InvoiceStatus.CANCELADA, "pagada"),
        (InvoiceStatus.CANCELADA, "emitida"),
    ])
    def test_strict_mode_rejects_leaving_final_states(self, current, target):
        with pytest.raises(TransitionError):
            InvoiceLifecycleGuard(strict=True).check_transition(make_invoice(current), target)

    def test_strict_mode_allows_same_status(self):
        guard = InvoiceLifecycleGuard(strict=True)

        assert guard.check_transition(make_invoice(InvoiceStatus.PAGADA), "pagada") == InvoiceStatus.PAGADA


@pytest.mark.unit
class TestDeletion:

    @pytest.mark.parametrize("status", [InvoiceStatus.EMITIDA, InvoiceStatus.PAGADA])
    def test_only_cancelled_invoices_can_be_deleted(self, status):
        with pytest.raises(DeleteNotAllowedError) as exc_info:
            InvoiceLifecycleGuard().check_deletable(make_invoice(status))

        assert isinstance(exc_info.value, TransitionError)
        assert exc_info.value.error_code == "DELETE_NOT_ALLOWED"

    def test_cancelled_invoice_is_deletable(self):
        InvoiceLifecycleGuard().check_deletable(make_invoice(InvoiceStatus.CANCELADA))


@pytest.mark.unit
class TestNonFiniteNumbers:
    """NaN e infinito no son números válidos para una factura."""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_quantity_and_price_must_be_finite(self, value):
        draft = valid_draft(items=[LineItemDraft(product="p1", quantity=value, unit_price=value, tax_rate=value)])

        errors = InvoiceLifecycleGuard().validate_creation(draft)

        assert fields(errors) == ["items[0].quantity", "items[0].unitPrice", "items[0].taxRate"]
        assert errors[0]["message"] == "La cantidad debe ser un número"
        assert errors[2]["message"] == "La tasa de impuesto debe ser un número"
