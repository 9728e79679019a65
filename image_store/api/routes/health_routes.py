from flask import Blueprint, current_app, jsonify

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def health():
    return jsonify({"status": "ok"}), 200


@bp_health.get("/storage")
def health_storage():
    storage = current_app.extensions["image_storage"]
    status = storage.check_health()

    payload = {
        "storage": "ok" if status.ok else "unavailable",
        "basePath": status.base_path,
        "exists": status.exists,
        "writable": status.writable,
    }
    return jsonify(payload), (200 if status.ok else 503)
