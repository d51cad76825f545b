from app.main import app, PUBLIC_PATHS
from app.auth import get_current_user

OPERATION_IDS = {
    "createScript",
    "updateScript",
    "listScripts",
    "createScriptVersion",
    "updateScriptVersion",
    "deleteScriptVersion",
    "listScriptVersions",
    "createScriptElement",
    "updateScriptElement",
    "deleteScriptElement",
    "listScriptElements",
}


def test_all_routes_protected():
    for route in app.routes:
        path = getattr(route, 'path', '')
        if not path.startswith('/api'):
            continue
        if path in PUBLIC_PATHS:
            continue
        if not hasattr(route, 'dependant'):
            continue
        deps = [d.call for d in route.dependant.dependencies]
        assert get_current_user in deps, f"{path} missing authentication"


def test_every_operation_is_routed():
    operation_ids = {getattr(route, "operation_id", None) for route in app.routes}
    assert OPERATION_IDS <= operation_ids


def test_public_endpoints(client):
    assert client.get("/healthz").json() == {"status": "ok"}
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "request_count" in metrics.text


def test_metrics_label_by_route_template(client):
    headers = {"X-User-Id": "metrics-user"}
    script_id = client.post("/api/scripts", json={"title": "Counted"}, headers=headers).json()["data"]["script"]["id"]
    client.get(f"/api/scripts/{script_id}/versions", headers=headers)
    text = client.get("/metrics").text
    assert 'endpoint="/api/scripts/{script_id}/versions"' in text
    assert script_id not in text


def test_malformed_id_is_validation_error(client):
    resp = client.get("/api/scripts/not-a-uuid/versions", headers={"X-User-Id": "someone"})
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "VALIDATION"
