import json

import pytest

import server
from server import inject_webhook_url


@pytest.fixture
def client():
    server.app.config["TESTING"] = True
    with server.app.test_client() as c:
        yield c


def test_inject_replaces_placeholder():
    html = '<script>const u = "{{CHAT_WEBHOOK_URL}}";</script>'
    assert inject_webhook_url(html, "https://hook") == '<script>const u = "https://hook";</script>'


def test_inject_without_placeholder_is_identity():
    html = "<p>nothing here</p>"
    assert inject_webhook_url(html, "https://hook") == html


def test_inject_is_literal_no_escaping():
    assert inject_webhook_url("{{CHAT_WEBHOOK_URL}}", "a&b<c>") == "a&b<c>"


def test_index_uses_env_url(client, monkeypatch):
    monkeypatch.setenv("CHAT_WEBHOOK_URL", "https://example.test/hook")
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    body = resp.get_data(as_text=True)
    assert "https://example.test/hook" in body
    assert "{{CHAT_WEBHOOK_URL}}" not in body


def test_index_uses_config_file(client, monkeypatch, tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"chat.webhook.url": "https://from-file"}))
    monkeypatch.delenv("CHAT_WEBHOOK_URL", raising=False)
    monkeypatch.setattr(server, "CONFIG_PATH", cfg)
    assert "https://from-file" in client.get("/").get_data(as_text=True)


def test_missing_config_defaults_to_empty(monkeypatch, tmp_path):
    monkeypatch.delenv("CHAT_WEBHOOK_URL", raising=False)
    monkeypatch.setattr(server, "CONFIG_PATH", tmp_path / "absent.json")
    assert server.chat_webhook_url() == ""


def test_list_tools(client):
    resp = client.get("/tools")
    assert resp.status_code == 200
    names = [t["name"] for t in resp.get_json()["tools"]]
    assert names == ["exampleTool", "findChildrenOfParent"]


def test_tool_call(client):
    resp = client.post("/tool-call", json={"tool": "exampleTool", "input": "hi"})
    assert resp.status_code == 200
    assert resp.get_json() == {"result": "Echo: hi"}


def test_tool_call_lookup(client):
    resp = client.post("/tool-call", json={"tool": "findChildrenOfParent", "input": "xyz"})
    assert resp.get_json() == {"result": "No information found for: xyz"}


def test_tool_call_without_tool(client):
    resp = client.post("/tool-call", json={"input": "hi"})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_tool_call_bad_body(client):
    resp = client.post("/tool-call", data="not json", content_type="application/json")
    assert resp.status_code == 400


def test_tool_call_unknown_tool(client):
    resp = client.post("/tool-call", json={"tool": "nope", "input": "hi"})
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "No such tool: nope"}


def test_health(client):
    assert client.get("/health").get_json() == {"status": "healthy"}


def test_index_page_has_no_html_sinks(client, monkeypatch):
    monkeypatch.setenv("CHAT_WEBHOOK_URL", "https://example.test/hook")
    body = client.get("/").get_data(as_text=True)
    assert "insertAdjacentHTML" not in body
    assert "innerHTML" not in body
    assert "df-messenger" not in body
    assert "createTextNode" in body
