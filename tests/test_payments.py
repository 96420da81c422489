from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import select

from barbershop.core.exceptions import ConflictError, NotFoundError
from barbershop.modules.appointments.schemas import AppointmentCreate
from barbershop.modules.appointments.service import AppointmentService
from barbershop.modules.payments.models import Payment
from barbershop.modules.payments.schemas import PaymentCreate, PaymentQuery, PaymentUpdate
from barbershop.modules.payments.service import (
    APPOINTMENT_ALREADY_PAID,
    TRANSACTION_IN_USE,
    PaymentService,
)
from barbershop.shared.enums import PaymentStatus, ReportPeriod

BASE_SLOT = datetime(2025, 10, 26, 14, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def appointments(db_session, settings, staff, haircut):
    service = AppointmentService(db_session, settings)
    customers = [
        ("Juan Pérez", "juan@example.com"),
        ("Ana Gómez", "ana@example.com"),
        ("Luis Díaz", "luis@example.com"),
        ("Sofía Ruiz", "sofia@example.com"),
    ]
    booked = []
    for offset, (name, email) in enumerate(customers):
        booked.append(
            await service.create(
                AppointmentCreate(
                    fechaHora=BASE_SLOT + timedelta(hours=offset),
                    peluqueroId=staff.id,
                    servicioId=haircut.id,
                    clienteNombre=name,
                    clienteEmail=email,
                )
            )
        )
    return booked


def _payment(appointment_id: int, amount: str, **extra) -> PaymentCreate:
    return PaymentCreate(citaId=appointment_id, monto=Decimal(amount), **extra)


@pytest.mark.asyncio
async def test_one_payment_per_appointment(db_session, settings, appointments):
    service = PaymentService(db_session, settings)

    payment = await service.create(_payment(appointments[0].id, "50.00"))
    assert payment.amount == Decimal("50.00")
    assert payment.status == PaymentStatus.PENDING
    assert payment.appointment.customer_name == "Juan Pérez"

    with pytest.raises(ConflictError) as exc_info:
        await service.create(_payment(appointments[0].id, "50.00"))
    assert exc_info.value.detail == APPOINTMENT_ALREADY_PAID


@pytest.mark.asyncio
async def test_deleted_payment_allows_a_new_one(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    payment = await service.create(_payment(appointments[0].id, "50.00"))

    await service.remove(payment.id)
    replacement = await service.create(_payment(appointments[0].id, "45.00"))

    assert replacement.id != payment.id
    with pytest.raises(NotFoundError) as exc_info:
        await service.get(payment.id)
    assert exc_info.value.detail == "Pago no encontrado"


@pytest.mark.asyncio
async def test_payment_requires_existing_appointment(db_session, settings, appointments):
    service = PaymentService(db_session, settings)

    with pytest.raises(NotFoundError) as exc_info:
        await service.create(_payment(999, "10.00"))
    assert exc_info.value.detail == "Cita con ID 999 no encontrada"


@pytest.mark.asyncio
async def test_transaction_id_is_globally_unique(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    first = await service.create(_payment(appointments[0].id, "50.00", transaccionId="MP-1001"))
    second = await service.create(_payment(appointments[1].id, "30.00", transaccionId="MP-1002"))

    with pytest.raises(ConflictError) as exc_info:
        await service.create(_payment(appointments[2].id, "20.00", transaccionId="MP-1001"))
    assert exc_info.value.detail == TRANSACTION_IN_USE

    with pytest.raises(ConflictError):
        await service.update(second.id, PaymentUpdate(transaccionId="MP-1001"))

    # Keeping its own id is not a conflict.
    unchanged = await service.update(first.id, PaymentUpdate(transaccionId="MP-1001", monto=Decimal("55.00")))
    assert unchanged.amount == Decimal("55.00")

    # Soft-deleted payments keep their transaction id reserved.
    await service.remove(first.id)
    with pytest.raises(ConflictError):
        await service.create(_payment(appointments[3].id, "20.00", transaccionId="MP-1001"))


@pytest.mark.asyncio
async def test_transaction_uniqueness_enforced_by_storage(db_session, settings, appointments, monkeypatch):
    service = PaymentService(db_session, settings)
    await service.create(_payment(appointments[0].id, "50.00", transaccionId="MP-2001"))

    async def _skip(*args, **kwargs):
        return None

    monkeypatch.setattr(service, "_ensure_transaction_free", _skip)
    with pytest.raises(ConflictError) as exc_info:
        await service.create(_payment(appointments[1].id, "30.00", transaccionId="MP-2001"))
    assert exc_info.value.detail == TRANSACTION_IN_USE


@pytest.mark.asyncio
async def test_moving_payment_to_a_paid_appointment_conflicts(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    await service.create(_payment(appointments[0].id, "50.00"))
    second = await service.create(_payment(appointments[1].id, "30.00"))

    with pytest.raises(ConflictError):
        await service.update(second.id, PaymentUpdate(citaId=appointments[0].id))

    moved = await service.update(second.id, PaymentUpdate(citaId=appointments[2].id))
    assert moved.appointment_id == appointments[2].id


@pytest.mark.asyncio
async def test_stats_match_the_filtered_set(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    await service.create(_payment(appointments[0].id, "50.00", estado=PaymentStatus.COMPLETED, metodoPago="efectivo"))
    await service.create(_payment(appointments[1].id, "30.00", estado=PaymentStatus.PENDING, metodoPago="tarjeta"))
    await service.create(_payment(appointments[2].id, "20.00", estado=PaymentStatus.FAILED, metodoPago="tarjeta"))
    await service.create(_payment(appointments[3].id, "40.00", estado=PaymentStatus.COMPLETED, metodoPago="tarjeta"))

    page = await service.list_paginated(PaymentQuery(page=1, limit=2))
    assert page.meta.total == 4
    assert page.meta.total_pages == 2
    assert page.meta.has_next_page is True
    assert page.meta.has_prev_page is False
    assert len(page.data) == 2
    stats = page.stats
    assert stats.completed + stats.pending + stats.failed == page.meta.total
    assert stats.total_amount == Decimal("140.00")
    assert stats.average_ticket == Decimal("35.00")

    card = await service.list_paginated(PaymentQuery(search="TARJETA"))
    assert card.meta.total == 3
    assert card.stats.total_amount == Decimal("90.00")
    assert card.stats.completed + card.stats.pending + card.stats.failed == 3

    completed = await service.list_paginated(PaymentQuery(estado=PaymentStatus.COMPLETED))
    assert {p.appointment_id for p in completed.data} == {appointments[0].id, appointments[3].id}
    assert completed.stats.completed == 2
    assert completed.stats.pending == 0


@pytest.mark.asyncio
async def test_search_matches_customer_fields(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    await service.create(_payment(appointments[0].id, "50.00", transaccionId="ABC-77"))
    await service.create(_payment(appointments[1].id, "30.00"))

    by_name = await service.list_paginated(PaymentQuery(search="gómez"))
    assert [p.appointment.customer_name for p in by_name.data] == ["Ana Gómez"]

    by_email = await service.list_paginated(PaymentQuery(search="JUAN@EXAMPLE"))
    assert by_email.meta.total == 1

    by_transaction = await service.list_paginated(PaymentQuery(search="abc-7"))
    assert by_transaction.data[0].transaction_id == "ABC-77"


@pytest.mark.asyncio
async def test_empty_result_has_zero_stats(db_session, settings, appointments):
    service = PaymentService(db_session, settings)

    page = await service.list_paginated(PaymentQuery(search="nadie"))

    assert page.meta.total == 0
    assert page.meta.total_pages == 0
    assert page.meta.has_next_page is False
    assert page.stats.total_amount == Decimal("0.00")
    assert page.stats.average_ticket == Decimal("0.00")


@pytest.mark.asyncio
async def test_period_filter_uses_creation_time(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    recent = await service.create(_payment(appointments[0].id, "50.00"))
    old = await service.create(_payment(appointments[1].id, "30.00"))

    row = (await db_session.execute(select(Payment).where(Payment.id == old.id))).scalar_one()
    row.created_at = datetime.now(tz=timezone.utc) - timedelta(days=40)
    await db_session.commit()

    month = await service.list_paginated(PaymentQuery(periodo="mes"))
    assert [p.id for p in month.data] == [recent.id]

    everything = await service.list_paginated(PaymentQuery(periodo="all"))
    assert everything.meta.total == 2
    assert PaymentQuery(periodo="week").period == ReportPeriod.WEEK


@pytest.mark.asyncio
async def test_newest_payments_come_first(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    first = await service.create(_payment(appointments[0].id, "50.00"))
    second = await service.create(_payment(appointments[1].id, "30.00"))

    page = await service.list_paginated(PaymentQuery())

    assert [p.id for p in page.data] == [second.id, first.id]


@pytest.mark.asyncio
async def test_total_by_date_range(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    paid_at = datetime(2025, 10, 26, 18, 0, tzinfo=timezone.utc)
    await service.create(_payment(appointments[0].id, "50.00", fechaPago=paid_at))
    await service.create(_payment(appointments[1].id, "30.25", fechaPago=paid_at + timedelta(days=1)))
    await service.create(_payment(appointments[2].id, "99.00"))

    total = await service.total_by_date_range(paid_at - timedelta(hours=1), paid_at + timedelta(days=2))
    assert total == Decimal("80.25")

    empty = await service.total_by_date_range(datetime(2020, 1, 1, tzinfo=timezone.utc), datetime(2020, 1, 2, tzinfo=timezone.utc))
    assert str(empty) == "0.00"


@pytest.mark.asyncio
async def test_lookup_by_appointment_and_method(db_session, settings, appointments):
    service = PaymentService(db_session, settings)
    await service.create(_payment(appointments[0].id, "50.00", metodoPago="efectivo"))
    await service.create(_payment(appointments[1].id, "30.00", metodoPago="tarjeta"))

    by_appointment = await service.list_by_appointment(appointments[0].id)
    assert [p.payment_method for p in by_appointment] == ["efectivo"]

    by_method = await service.list_by_method("tarjeta")
    assert [p.appointment_id for p in by_method] == [appointments[1].id]
