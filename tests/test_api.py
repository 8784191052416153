"""
HTTP 接口测试：认证、统一响应格式、错误码映射
"""
from app.services.core.section_service import SectionService


def test_requires_basic_auth(anonymous_client):
    response = anonymous_client.get("/api/section")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Basic"
    assert response.json()["code"] == 401


def test_rejects_wrong_password(anonymous_client):
    response = anonymous_client.get("/api/section", auth=("user", "wrong"))

    assert response.status_code == 401


def test_create_product_then_list(client):
    response = client.post("/api/product", json={"name": "Tablet", "price": 30.5})
    assert response.status_code == 200

    response = client.get("/api/product")
    body = response.json()
    assert body["code"] == 200
    assert len(body["data"]) == 1
    assert body["data"][0]["name"] == "Tablet"
    assert body["data"][0]["price"] == 30.5
    assert body["data"][0]["sectionId"] is None


def test_section_lifecycle(client):
    response = client.post("/api/section", json={"name": "Electronics"})
    assert response.status_code == 200
    section = response.json()["data"]
    assert section["name"] == "Electronics"
    assert section["storeId"] is None

    listed = client.get("/api/section").json()["data"]
    assert section in listed

    assert client.get(f"/api/section/{section['id']}").json()["data"] == section

    assert client.delete(f"/api/section/{section['id']}").status_code == 200

    response = client.get(f"/api/section/{section['id']}")
    assert response.status_code == 400
    assert response.json() == {
        "code": 400,
        "data": None,
        "msg": f"There is no section with the id {section['id']}",
    }


def test_section_with_store(client):
    store = client.post("/api/store", json={"name": "Downtown"}).json()["data"]

    section = client.post("/api/section", json={"name": "Toys", "storeId": store["id"]}).json()["data"]

    assert section["storeId"] == store["id"]


def test_section_with_unknown_store(client):
    response = client.post("/api/section", json={"name": "Toys", "storeId": 99})

    assert response.status_code == 400
    assert response.json()["msg"] == "There is no store with the id 99"
    assert client.get("/api/section").json()["data"] == []


def test_invalid_body_uses_envelope(client):
    response = client.post("/api/section", json={"storeId": 1})

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == 422
    assert body["data"][0]["loc"] == ["body", "name"]


def test_goodies_endpoint(client):
    response = client.post("/api/section/goodies")
    assert response.status_code == 200
    assert response.json()["data"] is None

    sections = client.get("/api/section").json()["data"]
    assert [s["name"] for s in sections] == ["Goodies"]

    products = client.get("/api/product").json()["data"]
    assert {p["name"] for p in products} == {f"The product with the ID {k}" for k in range(1, 11)}
    assert {p["sectionId"] for p in products} == {sections[0]["id"]}


def test_unexpected_error_is_server_fault(server_error_client, monkeypatch):
    def broken(db):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(SectionService, "get_all", staticmethod(broken))

    response = server_error_client.get("/api/section")

    assert response.status_code == 500
    assert response.json()["code"] == 500


def test_workflow_redirect(anonymous_client):
    response = anonymous_client.get("/workflow", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/workflow.html"

    page = anonymous_client.get("/workflow.html")
    assert page.status_code == 200
    assert "Workflow" in page.text


def test_health_check(anonymous_client):
    assert anonymous_client.get("/").json()["data"]["status"] == "online"
