"""Application factory for the unit conversion server."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Iterable

import yaml
from flask import Flask
from werkzeug.exceptions import HTTPException

from common.errors import ensure_app_error
from common.logging import get_logger, install_request_logging
from common.responses import fail, ok, text

from . import config as config_module
from .blueprints import register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"

logger = get_logger()


def _load_yaml_config(path: Path = CONFIG_PATH) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _discover_plugins(package: str = "plugins") -> Iterable[str]:
    """Yield import paths for all plugin packages."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return []
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _load_manifests(plugin_settings: dict) -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in _discover_plugins():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if not manifest:
            continue
        entry = dict(manifest)
        plugin_config = plugin_settings.get(entry.get("blueprint"), {}) or {}
        if plugin_config.get("summary"):
            entry["summary"] = plugin_config["summary"]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)

    yaml_config = _load_yaml_config(CONFIG_PATH)
    app.config["SITE_SETTINGS"] = yaml_config.get("site", {}) or {}
    app.config["PLUGIN_SETTINGS"] = yaml_config.get("plugins", {}) or {}

    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj is None:
            raise ValueError(f"Unknown configuration '{config_name}'.")
        app.config.from_object(config_obj)

    get_logger().setLevel(app.config["LOG_LEVEL"])
    install_request_logging(app)
    register_plugin_blueprints(app)
    app.config["PLUGIN_MANIFESTS"] = _load_manifests(app.config["PLUGIN_SETTINGS"])

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.route("/")
    def home():
        site = app.config.get("SITE_SETTINGS", {})
        return ok(
            {
                "title": site.get("title", "Unit Conversion Server"),
                "plugins": app.config["PLUGIN_MANIFESTS"],
            }
        )

    @app.errorhandler(404)
    @app.errorhandler(405)
    def unsupported(error: HTTPException):
        return text("Unknown method or command used!", status=501)

    @app.errorhandler(500)
    def server_error(error):  # pragma: no cover - last resort
        original = getattr(error, "original_exception", None) or error
        logger.error("unhandled error: %s", original)
        return fail(ensure_app_error(original, fallback_code="internal_error"), status=500)

    logger.info("application created with %d plugins", len(app.config["PLUGIN_MANIFESTS"]))
    return app


__all__ = ["create_app"]
