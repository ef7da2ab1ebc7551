"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from describesddl import VERSION
from describesddl.api import app


client = TestClient(app)


def test_get_info():
    response = client.get("/sddl")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": VERSION}


def test_decode_sddl():
    response = client.get("/sddl/O:BAG:SYD:(A;;FA;;;WD)")
    assert response.status_code == 200
    data = response.json()
    assert data["owner"] == "Built-in administrators"
    assert data["primary"] == "Local system"
    assert data["dacl"][0]["accountsid"] == "Everyone"
    assert data["dacl"][0]["rights"] == ["FILE_ALL_ACCESS"]
    assert data["daclInheritFlags"] == []
    assert data["sacl"] == []


def test_decode_malformed_sddl():
    response = client.get("/sddl/D:(A;;RP)")
    assert response.status_code == 400
    assert "ACE" in response.json()["detail"]
