import pytest
from httpx import ASGITransport, AsyncClient

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def _booking(staff_id: int, service_id: int, when: str = "2025-10-26T14:00:00Z") -> dict:
    return {
        "fechaHora": when,
        "peluqueroId": staff_id,
        "servicioId": service_id,
        "clienteNombre": "Juan Pérez",
        "clienteEmail": "juan@example.com",
        "clienteTelefono": "+54 11 5555-0000",
    }


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_booking_flow_over_http(client, admin_client, staff, haircut):
    created = await client.post("/citas", json=_booking(staff.id, haircut.id))
    assert created.status_code == 201
    body = created.json()
    assert body["estado"] == "Pendiente"
    assert body["peluqueroId"] == staff.id
    assert body["peluquero"]["nombre"] == "Carlos"
    assert body["servicio"]["nombre"] == "Corte clásico"

    duplicate = await client.post("/citas", json=_booking(staff.id, haircut.id))
    assert duplicate.status_code == 409
    assert duplicate.json() == {
        "success": False,
        "message": "Ya existe una cita para ese peluquero en ese horario",
    }

    later = await client.post("/citas", json=_booking(staff.id, haircut.id, "2025-10-26T15:00:00Z"))
    assert later.status_code == 201

    marked = await client.patch(f"/citas/{body['id']}", json={"estado": "Pagada"})
    assert marked.status_code == 200
    assert marked.json()["estado"] == "Pagada"

    listed = await client.get("/citas")
    assert [item["id"] for item in listed.json()] == [body["id"], later.json()["id"]]

    forbidden = await client.delete(f"/citas/{body['id']}")
    assert forbidden.status_code == 401

    deleted = await admin_client.delete(f"/citas/{body['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"deleted": True}

    missing = await client.get(f"/citas/{body['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Cita no encontrada"


@pytest.mark.asyncio
async def test_invalid_payload_is_a_400(client, staff, haircut):
    payload = _booking(staff.id, haircut.id)
    payload["clienteEmail"] = "not-an-email"
    payload["peluqueroId"] = 0

    response = await client.post("/citas", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert len(body["errors"]) == 2


@pytest.mark.asyncio
async def test_payments_over_http(client, admin_client, staff, haircut):
    appointment = (await client.post("/citas", json=_booking(staff.id, haircut.id))).json()

    paid = await client.post(
        "/pagos",
        json={"citaId": appointment["id"], "monto": 50.00, "metodoPago": "efectivo", "estado": "Completado"},
    )
    assert paid.status_code == 201
    assert paid.json()["citaId"] == appointment["id"]

    again = await client.post("/pagos", json={"citaId": appointment["id"], "monto": 50.00})
    assert again.status_code == 409
    assert again.json()["message"] == "Ya existe un pago para esta cita"

    assert (await client.get("/pagos")).status_code == 401

    page = await admin_client.get("/pagos", params={"page": 1, "limit": 10, "periodo": "hoy", "estado": "Completado"})
    assert page.status_code == 200
    body = page.json()
    assert body["meta"] == {
        "total": 1,
        "page": 1,
        "limit": 10,
        "totalPages": 1,
        "hasNextPage": False,
        "hasPrevPage": False,
    }
    assert body["stats"]["completados"] == 1
    assert body["data"][0]["cita"]["clienteNombre"] == "Juan Pérez"

    bad_limit = await admin_client.get("/pagos", params={"limit": 500})
    assert bad_limit.status_code == 400
    bad_period = await admin_client.get("/pagos", params={"periodo": "siglo"})
    assert bad_period.status_code == 400

    total = await admin_client.get(
        "/pagos/total", params={"inicio": "2020-01-01T00:00:00Z", "fin": "2020-12-31T23:59:59Z"}
    )
    assert total.status_code == 200
    assert total.json()["total"] == "0.00"


@pytest.mark.asyncio
async def test_stock_endpoint(client, admin_client, product):
    unauthenticated = await client.patch(f"/productos/{product.id}/stock", json={"quantity": -1})
    assert unauthenticated.status_code == 401

    short = await admin_client.patch(f"/productos/{product.id}/stock", json={"quantity": -5})
    assert short.status_code == 409
    assert short.json()["message"] == "Stock insuficiente"

    fractional = await admin_client.patch(f"/productos/{product.id}/stock", json={"quantity": 1.5})
    assert fractional.status_code == 409
    assert fractional.json()["message"] == "El ajuste de stock debe ser un número entero"

    sold = await admin_client.patch(f"/productos/{product.id}/stock", json={"quantity": -2})
    assert sold.status_code == 200
    assert sold.json()["stock"] == 1


@pytest.mark.asyncio
async def test_login_sets_cookie_and_me_uses_it(app, client, admin, settings):
    wrong = await client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong-password"})
    assert wrong.status_code == 401

    response = await client.post("/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    assert response.json()["admin"]["email"] == ADMIN_EMAIL
    token = response.cookies.get(settings.access_cookie_name)
    assert token
    assert "httponly" in response.headers["set-cookie"].lower()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={settings.access_cookie_name: token},
    ) as authed:
        me = await authed.get("/auth/me")
        assert me.status_code == 200
        assert me.json()["nombre"] == "Admin"

        logout = await authed.post("/auth/logout")
        assert logout.status_code == 200


@pytest.mark.asyncio
async def test_garbage_token_is_rejected(app, settings):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={settings.access_cookie_name: "not-a-jwt"},
    ) as client:
        response = await client.get("/auth/me")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_staff_and_catalog_admin_routes(client, admin_client):
    created = await admin_client.post(
        "/peluqueros",
        json={"nombre": "Pedro", "horarioInicio": "09:00:00", "horarioFin": "18:00:00"},
    )
    assert created.status_code == 201
    staff_id = created.json()["id"]

    assert (await client.post("/peluqueros", json={"nombre": "Intruso"})).status_code == 401
    duplicate = await admin_client.post("/peluqueros", json={"nombre": "Pedro"})
    assert duplicate.status_code == 409

    service = await admin_client.post("/servicios", json={"nombre": "Corte", "precio": 50, "duracion": 30})
    assert service.status_code == 201
    service_id = service.json()["id"]

    public = await client.get("/servicios/duracion", params={"max": 45})
    assert [s["nombre"] for s in public.json()] == ["Corte"]

    link = await admin_client.post("/peluqueros-servicios", json={"peluqueroId": staff_id, "servicioId": service_id})
    assert link.status_code == 201
    assert link.json()["servicio"]["nombre"] == "Corte"

    fetched = await admin_client.get(f"/peluqueros-servicios/{staff_id}/{service_id}")
    assert fetched.status_code == 200

    assert (await admin_client.delete(f"/peluqueros-servicios/{staff_id}/{service_id}")).status_code == 204
    assert (await admin_client.get(f"/peluqueros-servicios/{staff_id}/{service_id}")).status_code == 404
    assert (await admin_client.delete(f"/peluqueros/{staff_id}")).status_code == 204
    assert (await client.get(f"/peluqueros/{staff_id}")).status_code == 404
