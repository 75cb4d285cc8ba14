# tests/test_api.py
def test_health(client):
    assert client.get("/health").json() == {"ok": True}

def test_process_then_points(client, target_payload):
    r = client.post("/receipts/process", json=target_payload)
    assert r.status_code == 200
    receipt_id = r.json()["id"]

    r = client.get(f"/receipts/{receipt_id}/points")
    assert r.status_code == 200
    assert r.json() == {"points": 28}

def test_corner_market_points(client, corner_market_payload):
    receipt_id = client.post("/receipts/process", json=corner_market_payload).json()["id"]
    assert client.get(f"/receipts/{receipt_id}/points").json()["points"] == 99

def test_each_receipt_gets_its_own_id(client, target_payload):
    a = client.post("/receipts/process", json=target_payload).json()["id"]
    b = client.post("/receipts/process", json=target_payload).json()["id"]
    assert a != b

def test_invalid_total_is_400(client, target_payload):
    target_payload["total"] = "10"
    r = client.post("/receipts/process", json=target_payload)
    assert r.status_code == 400
    assert r.json()["detail"].startswith("The receipt is invalid.")
    assert "total" in r.json()["detail"]

def test_empty_items_is_400(client, target_payload):
    target_payload["items"] = []
    assert client.post("/receipts/process", json=target_payload).status_code == 400

def test_wrong_field_type_is_400(client, target_payload):
    target_payload["total"] = 35.35
    r = client.post("/receipts/process", json=target_payload)
    assert r.status_code == 400
    assert r.json() == {"detail": "The receipt is invalid."}

def test_malformed_json_is_400(client):
    r = client.post("/receipts/process", content=b"{not json",
                    headers={"Content-Type": "application/json"})
    assert r.status_code == 400

def test_unknown_id_is_404(client):
    r = client.get("/receipts/does-not-exist/points")
    assert r.status_code == 404
    assert r.json() == {"detail": "No receipt found for that ID."}

def test_apps_do_not_share_receipts(target_payload):
    from fastapi.testclient import TestClient
    from receipt_processor.main import create_app

    with TestClient(create_app()) as first, TestClient(create_app()) as second:
        receipt_id = first.post("/receipts/process", json=target_payload).json()["id"]
        assert second.get(f"/receipts/{receipt_id}/points").status_code == 404
