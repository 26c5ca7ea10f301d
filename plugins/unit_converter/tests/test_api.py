import json

import pytest


def test_groups_endpoint_lists_catalog(client):
    response = client.get("/api/unit_converter/groups")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["quantities"] == ["weight", "distance", "temperature"]
    weight = payload["data"]["groups"][0]
    assert weight["primary"] == {"signature": "g", "name": "gram"}
    assert [unit["signature"] for unit in weight["minors"]] == ["lb", "p"]


def test_units_endpoint(client):
    response = client.get("/api/unit_converter/units/temperature")
    assert response.status_code == 200
    assert response.get_json()["data"]["primary"]["signature"] == "c"


def test_units_endpoint_unknown_quantity(client):
    response = client.get("/api/unit_converter/units/volume")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.unknown_quantity"


def test_convert_endpoint_success(client):
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1000, "from_unit": "g", "to_unit": "lb", "decimals": 2},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert abs(data["value"] - 2.20462) < 1e-5
    assert data["formatted"] == "2.20"
    assert data["quantity"] == "weight"


def test_convert_query_endpoint(client):
    response = client.get(
        "/api/unit_converter/convert",
        query_string={"value": "0", "from_unit": "c", "to_unit": "f"},
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["value"] == 32


def test_convert_rejects_unknown_unit(client):
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 5, "from_unit": "xx", "to_unit": "g"},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_unit"


def test_convert_rejects_cross_group_pair(client):
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 5, "from_unit": "g", "to_unit": "m"},
    )
    assert response.status_code == 422
    assert response.get_json()["error"]["code"] == "unit.dimension_mismatch"


def test_convert_rejects_bad_payload(client):
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": "heavy", "from_unit": "g", "to_unit": "lb"},
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"]["code"] == "unit.invalid_request"
    assert payload["error"]["details"]["errors"]

    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "g", "to_unit": "lb", "unit": "x"},
    )
    assert response.status_code == 400


def test_convert_rejects_negative_decimals(client):
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "g", "to_unit": "lb", "decimals": -1},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_precision"


def _strict_json(response):
    def reject(token):
        raise ValueError(f"non-standard JSON token {token}")

    return json.loads(response.get_data(as_text=True), parse_constant=reject)


@pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity"])
def test_convert_rejects_non_finite_value(client, raw):
    response = client.get(
        "/api/unit_converter/convert",
        query_string={"value": raw, "from_unit": "g", "to_unit": "lb"},
    )
    assert response.status_code == 400
    assert _strict_json(response)["error"]["code"] == "unit.invalid_request"


def test_convert_reports_overflow(client):
    response = client.get(
        "/api/unit_converter/convert",
        query_string={"value": "1e308", "from_unit": "p", "to_unit": "g"},
    )
    assert response.status_code == 422
    payload = _strict_json(response)
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.non_finite_result"


def test_legacy_convert(client):
    response = client.get("/convert?from=g&to=lb&value=1000")
    assert response.status_code == 200
    assert response.get_json() == {"result": "2.204624"}


def test_legacy_convert_ignores_unknown_keys(client):
    response = client.get("/convert?from=c&to=f&value=0&format=json")
    assert response.get_json() == {"result": "32.000000"}


def test_legacy_convert_invalid_value(client):
    response = client.get("/convert?from=g&to=lb&value=abc")
    assert response.status_code == 501
    assert response.get_data(as_text=True) == "Invalid value!"

    response = client.get("/convert?from=g&to=lb")
    assert response.status_code == 501
    assert response.get_data(as_text=True) == "Invalid value!"


def test_legacy_convert_unknown_conversion(client):
    response = client.get("/convert?from=g&to=m&value=5")
    assert response.status_code == 501
    assert response.get_data(as_text=True) == "Unknown conversion type!"


def test_unknown_method_or_command(client):
    for response in (client.post("/convert?from=g&to=lb&value=1"), client.get("/status")):
        assert response.status_code == 501
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "Unknown method or command used!"


def test_request_id_header(client):
    response = client.get("/api/unit_converter/groups", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert client.get("/api/unit_converter/groups").headers["X-Request-ID"]
