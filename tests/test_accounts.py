import pytest
from sqlalchemy import select

from streeteats.domain.account import Vendor

from tests.conftest import ACCOUNT


class TestRegistration:

    async def test_register_vendor(self, client):
        resp = await client.post("/api/register", json=ACCOUNT)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Vendor registered"}

    async def test_register_supplier(self, client):
        resp = await client.post("/api/supplier/register", json=ACCOUNT)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Supplier registered"}

    async def test_same_contact_allowed_across_roles(self, client):
        assert (await client.post("/api/register", json=ACCOUNT)).status_code == 200
        assert (await client.post("/api/supplier/register", json=ACCOUNT)).status_code == 200

    @pytest.mark.parametrize(
        "overrides",
        [{"phone": "9999999999"}, {"email": "other@example.com"}],
    )
    async def test_duplicate_email_or_phone_conflicts(self, client, overrides):
        await client.post("/api/register", json=ACCOUNT)
        resp = await client.post("/api/register", json={**ACCOUNT, **overrides})
        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "CONFLICT"

    async def test_missing_required_field(self, client):
        body = {k: v for k, v in ACCOUNT.items() if k != "password"}
        resp = await client.post("/api/register", json=body)
        assert resp.status_code == 422

    async def test_password_is_hashed_by_default(self, client, session):
        await client.post("/api/register", json=ACCOUNT)
        vendor = (await session.execute(select(Vendor))).scalars().one()
        assert vendor.password != ACCOUNT["password"]
        assert "$" in vendor.password

    async def test_all_users_hides_password(self, client):
        await client.post("/api/register", json=ACCOUNT)
        everyone = (await client.get("/api/all-users")).json()
        assert len(everyone["vendors"]) == 1
        assert "password" not in everyone["vendors"][0]


class TestLogin:

    @pytest.mark.parametrize("user_id", [ACCOUNT["email"], ACCOUNT["phone"]])
    async def test_login_by_email_or_phone(self, client, user_id):
        await client.post("/api/register", json=ACCOUNT)
        resp = await client.post(
            "/api/vendor/login", json={"userId": user_id, "password": ACCOUNT["password"]}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["role"] == "vendor"
        assert body["name"] == ACCOUNT["fullName"]
        assert body["gst"] == ACCOUNT["gst"]
        assert body["shopname"] == ACCOUNT["shopname"]

    async def test_wrong_password(self, client):
        await client.post("/api/supplier/register", json=ACCOUNT)
        resp = await client.post(
            "/api/supplier/login", json={"userId": ACCOUNT["email"], "password": "nope"}
        )
        assert resp.status_code == 401
        assert resp.json()["error"]["message"] == "Invalid credentials"

    async def test_login_checks_the_right_role(self, client):
        await client.post("/api/register", json=ACCOUNT)
        resp = await client.post(
            "/api/supplier/login",
            json={"userId": ACCOUNT["email"], "password": ACCOUNT["password"]},
        )
        assert resp.status_code == 401

    async def test_plaintext_scheme(self, client, settings, session):
        settings.credential_scheme = "plaintext"
        await client.post("/api/register", json=ACCOUNT)

        vendor = (await session.execute(select(Vendor))).scalars().one()
        assert vendor.password == ACCOUNT["password"]

        resp = await client.post(
            "/api/vendor/login",
            json={"userId": ACCOUNT["phone"], "password": ACCOUNT["password"]},
        )
        assert resp.status_code == 200

    async def test_verification_gate(self, client, settings, register):
        settings.login_requires_verification = True
        vendor = await register("vendor")
        creds = {"userId": ACCOUNT["email"], "password": ACCOUNT["password"]}

        assert (await client.post("/api/vendor/login", json=creds)).status_code == 403

        await client.post("/api/verify-user", json={"userType": "vendor", "id": vendor["id"]})
        assert (await client.post("/api/vendor/login", json=creds)).status_code == 200


class TestShopStatus:

    async def test_toggle(self, client, register):
        supplier = await register("supplier")

        resp = await client.post(
            "/api/supplier/shop-status", json={"phone": supplier["phone"], "status": True}
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "message": "Shop status updated successfully",
            "isShopOpen": True,
        }

        pending = (await client.get("/api/unverified-users")).json()
        assert pending["suppliers"][0]["shopStatus"] is True
        assert pending["suppliers"][0]["verified"] is False

    async def test_unknown_supplier(self, client):
        resp = await client.post(
            "/api/supplier/shop-status", json={"phone": "000", "status": False}
        )
        assert resp.status_code == 404

    async def test_status_must_be_boolean(self, client, register):
        supplier = await register("supplier")
        resp = await client.post(
            "/api/supplier/shop-status", json={"phone": supplier["phone"], "status": "yes"}
        )
        assert resp.status_code == 422
