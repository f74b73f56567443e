import pytest

from memdb.catalog import Catalog
from webapp.app import create_app


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def client(catalog):
    app = create_app(catalog)
    app.config["TESTING"] = True
    return app.test_client()


def api(client, sql):
    return client.post("/api/execute", json={"sql": sql})


def test_api_roundtrip(client, catalog):
    assert api(client, "CREATE TABLE student (id int, name string)").get_json()["ok"]
    res = api(client, "INSERT INTO student (id, name) VALUES (1, 'Alice')").get_json()
    assert res["count"] == 1
    body = api(client, "SELECT * FROM student").get_json()
    assert body["columns"] == ["id", "name"]
    assert body["rows"] == [{"id": 1, "name": "Alice"}]
    assert len(catalog.get_table("student")) == 1


def test_api_reports_errors(client):
    resp = api(client, "SELECT * FROM ghost")
    assert resp.status_code == 400
    assert resp.get_json() == {"ok": False, "error": "Table not found: ghost", "kind": "TableNotFound"}
    assert api(client, "").status_code == 400


def test_console_pages(client):
    assert client.get("/").status_code == 200
    resp = client.post("/execute", data={"sql": "CREATE TABLE t (id int)"})
    assert resp.status_code == 200
    assert b"/table/t" in resp.data
    client.post("/execute", data={"sql": "INSERT INTO t (id) VALUES (42)"})
    page = client.get("/table/t")
    assert page.status_code == 200
    assert b"<td>42</td>" in page.data
    assert client.get("/table/missing").status_code == 404
    bad = client.post("/execute", data={"sql": "DROP TABLE t"})
    assert bad.status_code == 400
    assert b"UnsupportedStatement" in bad.data


def test_api_rejects_malformed_bodies(client):
    resp = client.post("/api/execute", json=["SELECT * FROM t"])
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "SyntaxError"
    resp = client.post("/api/execute", json={"sql": 5})
    assert resp.status_code == 400
    assert resp.get_json() == {"ok": False, "error": "'sql' must be a string", "kind": "SyntaxError"}


def test_api_accepts_form_body(client):
    client.post("/api/execute", data={"sql": "CREATE TABLE t (id int)"})
    assert api(client, "SELECT * FROM T").get_json()["table"] == "t"


def test_table_page_only_shows_existing_tables(client):
    client.post("/execute", data={"sql": "CREATE TABLE T (id int)"})
    client.post("/execute", data={"sql": "INSERT INTO t (id) VALUES (1)"})
    client.post("/execute", data={"sql": "INSERT INTO t (id) VALUES (2)"})
    page = client.get("/table/t%20WHERE%20id%20%3D%201")
    assert page.status_code == 404
    page = client.get("/table/t")
    assert page.status_code == 200
    assert b"<td>1</td>" in page.data
    assert b"<td>2</td>" in page.data
