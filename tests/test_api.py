"""
Tests for the HTTP bindings in arsenal.api.arsenal.
"""
import pytest
from fastapi.testclient import TestClient

from arsenal.core.dependencies import get_arsenal_service
from arsenal.main import app


@pytest.fixture
def client(service):
    app.dependency_overrides[get_arsenal_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def initialized_client(client):
    assert client.post("/api/config/initialize").status_code == 200
    return client


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class TestConfigEndpoints:
    def test_unconfigured(self, client):
        assert client.get("/api/config/exists").json() == {"hasConfig": False}

        response = client.get("/api/config")
        assert response.status_code == 404
        assert "error" in response.json()

    def test_initialize_and_read_config(self, client, paths):
        response = client.post("/api/config/initialize")
        assert response.json() == {"dataPath": str(paths.default_data_path())}

        assert client.get("/api/config/exists").json() == {"hasConfig": True}
        assert client.get("/api/config").json() == {"dataPath": str(paths.default_data_path())}

    def test_set_data_path(self, client, tmp_path):
        target = tmp_path / "other.json"

        response = client.put("/api/config/data-path", json={"dataPath": str(target)})

        assert response.json() == {"success": True}
        assert client.get("/api/config").json() == {"dataPath": str(target)}
        # Pointing at a file that does not exist yet is allowed; reading it is not.
        assert client.get("/api/commands").status_code == 404

    def test_set_data_path_requires_value(self, client):
        assert client.put("/api/config/data-path", json={"dataPath": ""}).status_code == 422

    def test_malformed_store_is_a_server_error(self, initialized_client, paths):
        paths.default_data_path().write_text("{oops")

        response = initialized_client.get("/api/groups")

        assert response.status_code == 500
        assert "Malformed" in response.json()["error"]


class TestCrudEndpoints:
    def test_group_and_command_lifecycle(self, initialized_client):
        c = initialized_client
        assert c.put("/api/groups/tools", json={"name": "Tools", "icon": "wrench", "description": "d"}).json() == {
            "success": True
        }
        for cmd in ("ls", "pwd", "whoami"):
            c.post("/api/groups/tools/commands", json={"cmd": cmd, "tags": ["basic"]})

        c.delete("/api/groups/tools/commands/2")
        c.post("/api/groups/tools/commands", json={"cmd": "id"})
        c.put("/api/groups/tools/commands/1", json={"cmd": "ls -la", "description": "long"})

        group = c.get("/api/groups").json()["tools"]
        assert [(x["id"], x["cmd"]) for x in group["commands"]] == [(1, "ls -la"), (3, "whoami"), (4, "id")]
        assert group["commands"][0]["description"] == "long"
        assert group["commands"][0]["tags"] == []

        assert list(c.get("/api/commands").json()["groups"]) == ["tools"]

        c.delete("/api/groups/tools")
        assert c.get("/api/groups").json() == {}

    def test_missing_targets_still_succeed(self, initialized_client):
        c = initialized_client
        assert c.post("/api/groups/ghost/commands", json={"cmd": "ls"}).json() == {"success": True}
        assert c.put("/api/groups/ghost/commands/1", json={"cmd": "ls"}).json() == {"success": True}
        assert c.delete("/api/groups/ghost/commands/1").json() == {"success": True}
        assert c.delete("/api/groups/ghost").json() == {"success": True}
        assert c.get("/api/groups").json() == {}

    def test_command_body_requires_cmd(self, initialized_client):
        initialized_client.put("/api/groups/g", json={"name": "G"})

        assert initialized_client.post("/api/groups/g/commands", json={"description": "x"}).status_code == 422


def test_search_endpoint(initialized_client):
    c = initialized_client
    c.put("/api/groups/net", json={"name": "Network"})
    c.post("/api/groups/net/commands", json={"cmd": "ping -c 3 host", "description": "Reachability", "tags": ["ICMP"]})
    c.post("/api/groups/net/commands", json={"cmd": "traceroute host"})

    results = c.get("/api/search", params={"q": "icmp"}).json()

    assert len(results) == 1
    assert results[0]["groupKey"] == "net"
    assert results[0]["groupName"] == "Network"
    assert results[0]["command"]["cmd"] == "ping -c 3 host"
    assert len(c.get("/api/search").json()) == 2
