from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert "Unit Converter" in titles
    assert payload["data"]["title"] == "Unit Conversion Server"
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Content-Type-Options") == "nosniff"


def test_unknown_config_name_is_rejected():
    try:
        create_app("MissingConfig")
    except ValueError as exc:
        assert "MissingConfig" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("Expected ValueError for unknown config")
