from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    @app.route(f"{prefix}/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return jsonify(container.stats_service.summary().to_dict())

    @app.route(f"{prefix}/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
