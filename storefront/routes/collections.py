from flask import Blueprint, current_app, jsonify, request

from ..extensions import store
from ..resources import Resource
from ..storage import RecordNotFound, StoreWriteError


def _json_object():
    """Request body as a dict; {} when empty, None when it is not an object."""
    if not request.get_data():
        return {}
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else None


def make_blueprint(resource: Resource) -> Blueprint:
    """
    CRUD routes for one collection:

      GET    /<name>        list (absent collection -> [])
      GET    /<name>/<id>   one record
      POST   /<name>        create, id assigned by the store
      PUT    /<name>/<id>   shallow merge over the stored record
      DELETE /<name>/<id>   remove and return the record
    """
    name = resource.name
    bp = Blueprint(name.replace("-", "_"), __name__)

    @bp.errorhandler(RecordNotFound)
    def not_found(e):
        return jsonify({"error": f"{resource.label} not found"}), 404

    @bp.errorhandler(StoreWriteError)
    def write_failed(e):
        current_app.logger.error("Persisting %s failed: %s", name, e)
        return jsonify({"error": str(e)}), 500

    @bp.get(f"/{name}")
    def list_records():
        return jsonify(store.list(name))

    @bp.get(f"/{name}/<record_id>")
    def get_record(record_id):
        return jsonify(store.get(name, record_id))

    @bp.post(f"/{name}")
    def create_record():
        payload = _json_object()
        if payload is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        record = store.create(name, payload)
        current_app.logger.info("Created %s/%s", name, record["id"])
        return jsonify(record), 201

    @bp.put(f"/{name}/<record_id>")
    def update_record(record_id):
        payload = _json_object()
        if payload is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        record = store.update(name, record_id, payload)
        current_app.logger.info("Updated %s/%s", name, record_id)
        return jsonify(record)

    @bp.delete(f"/{name}/<record_id>")
    def delete_record(record_id):
        removed = store.delete(name, record_id)
        current_app.logger.info("Deleted %s/%s", name, record_id)
        return jsonify(removed)

    return bp
