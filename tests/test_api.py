"""HTTP tests: routing, response envelopes and error mapping."""

import pytest

from app.domain.models.user import User

PURCHASE = {
    "product_code": "GT-1212",
    "company": "RAK",
    "caton": 1,
    "pcs": 0,
    "height": 12,
    "width": 12,
    "per_caton_to_pcs": 10,
    "date": "2025-07-25",
}

CUSTOMER = {"name": "Rahim Traders", "address": "12 Lake Road", "mobile": "01700000000"}


def sale_body(*lines, **extra):
    return {"customer": CUSTOMER, "date": "2025-07-25", "products": list(lines), **extra}


@pytest.fixture
def stocked(client):
    response = client.post("/api/purchase/create", json=PURCHASE)
    assert response.status_code == 201
    return response.json()["data"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["name"] == "Tiles Ledger"


# --- Companies and products ---

def test_company_lifecycle(client):
    created = client.post("/api/company/create", json={"company": "  RAK Ceramics "})
    assert created.status_code == 201
    assert created.json()["company"]["name"] == "rak ceramics"

    duplicate = client.post("/api/company/create", json={"company": "rak ceramics"})
    assert duplicate.status_code == 409
    assert duplicate.json()["success"] is False

    fetched = client.get("/api/company/company/RAK Ceramics")
    assert fetched.status_code == 200

    assert len(client.get("/api/company/all").json()["companies"]) == 1

    deleted = client.delete("/api/company/delete/rak ceramics")
    assert deleted.json()["company"]["name"] == "rak ceramics"
    assert client.get("/api/company/company/rak ceramics").status_code == 404


def test_product_lifecycle(client):
    body = {"company": "rak", "product_code": "GT-1", "height": 12, "width": 24, "per_caton_to_pcs": 6}
    created = client.post("/api/product/create", json=body)
    assert created.status_code == 201
    product = created.json()["product"]
    assert product["product_code"] == "gt-1"

    assert client.post("/api/product/create", json=body).status_code == 409

    other = client.post("/api/product/create", json={**body, "product_code": "gt-2"}).json()["product"]
    clash = client.put(f"/api/product/update/{other['id']}", json=body)
    assert clash.status_code == 409

    updated = client.put(f"/api/product/update/{product['id']}", json={**body, "width": 12})
    assert updated.json()["product"]["width"] == 12

    assert client.delete(f"/api/product/{product['id']}").status_code == 200
    assert client.get(f"/api/product/{product['id']}").status_code == 404


def test_product_rejects_non_positive_dimensions(client):
    body = {"company": "rak", "product_code": "gt-1", "height": 0, "width": 24, "per_caton_to_pcs": 6}
    response = client.post("/api/product/create", json=body)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "height" in response.json()["message"]


# --- Purchases and store ---

def test_purchase_creates_store_row(client, stocked):
    assert stocked["feet"] == pytest.approx(10)
    assert stocked["product_code"] == "gt-1212"

    store = client.get("/api/store/get-by-code/GT-1212").json()["data"]
    assert store["feet"] == pytest.approx(10)
    assert store["company"] == "rak"


def test_purchase_requires_a_quantity(client):
    response = client.post("/api/purchase/create", json={**PURCHASE, "caton": 0, "pcs": 0})

    assert response.status_code == 400
    assert "Either caton or pcs must be greater than 0" in response.json()["message"]


def test_purchase_update_and_delete(client, stocked):
    patched = client.patch(f"/api/purchase/update/{stocked['id']}", json={"pcs": 5})
    assert patched.status_code == 200
    assert patched.json()["data"]["feet"] == pytest.approx(15)
    assert client.get("/api/store/get-by-code/gt-1212").json()["data"]["feet"] == pytest.approx(15)

    assert client.delete(f"/api/purchase/{stocked['id']}").status_code == 200
    assert client.get("/api/store/get-by-code/gt-1212").json()["data"]["feet"] == 0
    assert client.get(f"/api/purchase/{stocked['id']}").status_code == 404


def test_purchase_update_of_unknown_id(client):
    response = client.patch("/api/purchase/update/99", json={"pcs": 1})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Purchase not found", "errors": {"id": 99}}


def test_purchase_history_pagination(client):
    for code in ("a", "b", "c"):
        client.post("/api/purchase/create", json={**PURCHASE, "product_code": code})

    body = client.get("/api/purchase/history", params={"page": 2, "limit": 2}).json()

    assert body["total"] == 3
    assert body["totalPages"] == 2
    assert body["page"] == 2
    assert [p["product_code"] for p in body["data"]] == ["a"]


@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "x"}])
def test_bad_pagination_is_400(client, params):
    assert client.get("/api/purchase/history", params=params).status_code == 400


def test_day_totals_require_a_date(client):
    assert client.get("/api/purchase/group/custom-date").status_code == 400
    assert client.get("/api/sale/group/custom-date", params={"date": "not-a-date"}).status_code == 400


def test_purchase_day_totals(client, stocked):
    client.post("/api/purchase/create", json={**PURCHASE, "caton": 0, "pcs": 3})

    body = client.get("/api/purchase/group/custom-date", params={"date": "2025-07-25"}).json()

    assert body["data"] == [
        {
            "product_code": "gt-1212",
            "company": "rak",
            "total_caton": 1,
            "total_pcs": 3,
            "total_feet": pytest.approx(13),
            "purchases": 2,
        }
    ]


def test_store_listings(client, stocked):
    client.post("/api/purchase/create", json={**PURCHASE, "product_code": "gt-2"})
    client.post(
        "/api/sale/create",
        json=sale_body({"product_code": "gt-2", "sell_caton": 1}),
    )

    all_rows = client.get("/api/store/all").json()
    in_stock = client.get("/api/store/in-stock/all").json()

    assert [r["product_code"] for r in all_rows["data"]] == ["gt-1212", "gt-2"]
    assert [r["product_code"] for r in in_stock["data"]] == ["gt-1212"]
    assert client.get("/api/store/get-by-code/missing").json()["message"] == "Product not found in store."


# --- Sales and invoices ---

def test_sale_flow(client, stocked):
    assert client.get("/api/invoice/next-invoice").json()["invoice_number"] == 1

    created = client.post("/api/sale/create", json=sale_body({"product_code": "GT-1212", "sell_pcs": 4}))
    assert created.status_code == 201
    body = created.json()
    assert body["invoice_number"] == 1
    assert body["data"]["customer"] == CUSTOMER
    assert body["data"]["products"][0]["sell_feet"] == pytest.approx(4)

    assert client.get("/api/invoice/next-invoice").json()["invoice_number"] == 2
    assert client.get("/api/store/get-by-code/gt-1212").json()["data"]["feet"] == pytest.approx(6)

    rejected = client.post("/api/sale/create", json=sale_body({"product_code": "gt-1212", "sell_pcs": 7}))
    assert rejected.status_code == 400
    assert rejected.json()["errors"]["product_code"] == "gt-1212"
    assert client.get("/api/invoice/next-invoice").json()["invoice_number"] == 2
    assert client.get("/api/sale").json()["total"] == 1


def test_sale_validation(client, stocked):
    no_lines = client.post("/api/sale/create", json=sale_body())
    zero_qty = client.post("/api/sale/create", json=sale_body({"product_code": "gt-1212"}))
    no_customer = client.post(
        "/api/sale/create",
        json={"date": "2025-07-25", "products": [{"product_code": "gt-1212", "sell_pcs": 1}]},
    )

    assert no_lines.status_code == 400
    assert zero_qty.status_code == 400
    assert no_customer.status_code == 400


def test_sale_update_and_delete(client, stocked):
    sale = client.post("/api/sale/create", json=sale_body({"product_code": "gt-1212", "sell_pcs": 4})).json()["data"]

    updated = client.put(
        f"/api/sale/update/{sale['id']}",
        json=sale_body({"product_code": "gt-1212", "sell_pcs": 8}),
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["invoice_number"] == sale["invoice_number"]
    assert client.get("/api/store/get-by-code/gt-1212").json()["data"]["feet"] == pytest.approx(2)

    assert client.delete(f"/api/sale/{sale['id']}").status_code == 200
    assert client.get(f"/api/sale/{sale['id']}").status_code == 404
    assert client.get("/api/store/get-by-code/gt-1212").json()["data"]["feet"] == pytest.approx(10)


def test_sale_listing_sort(client, stocked):
    for _ in range(3):
        client.post("/api/sale/create", json=sale_body({"product_code": "gt-1212", "sell_pcs": 1}))

    body = client.get("/api/sale", params={"sort": "invoice_number", "limit": 2}).json()

    assert [s["invoice_number"] for s in body["data"]] == [3, 2]
    assert client.get("/api/sale", params={"sort": "customer"}).status_code == 400


def test_sale_day_totals(client, stocked):
    client.post("/api/sale/create", json=sale_body({"product_code": "gt-1212", "sell_pcs": 2}))

    body = client.get("/api/sale/group/custom-date", params={"date": "2025-07-25"}).json()

    assert body["data"][0]["total_sell_feet"] == pytest.approx(2)
    assert client.get("/api/sale/group/custom-date", params={"date": "2025-07-26"}).json()["data"] == []


def test_stock_audit_endpoint(client, stocked):
    body = client.get("/api/store/audit").json()["data"]

    assert body["flagged_count"] == 0
    assert body["products"][0]["expected_feet"] == pytest.approx(10)


# --- Users and guides ---

def test_user_lookup(client, session_factory):
    session = session_factory()
    session.add(User(name="Owner", email="owner@example.com", role="admin", is_verified=True))
    session.commit()
    session.close()

    body = client.get("/api/user/email/Owner@Example.com").json()
    assert body["role"] == "admin"
    assert body["user"]["name"] == "Owner"

    assert client.get("/api/user/email/nobody@example.com").status_code == 404


def test_guide_video_link(client):
    assert client.get("/api/guide/video-link").status_code == 404

    created = client.post("/api/guide/create", json={"video_link": "https://videos.example/guide-1"})
    assert created.status_code == 201
    assert client.post("/api/guide/create", json={"video_link": "https://videos.example/guide-1"}).status_code == 409

    assert client.get("/api/guide/video-link").json()["video_link"] == "https://videos.example/guide-1"


def test_responses_carry_request_id(client):
    response = client.get("/health")

    assert response.headers.get("X-Request-ID")
