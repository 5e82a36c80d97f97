from flask import Blueprint, jsonify, request

from ..extensions import store
from ..resources import RESOURCES
from ..utils.search import search_records

bp = Blueprint("api", __name__)


@bp.get("/search")
def api_search():
    return jsonify(search_records(store, request.args.get("q", "")))


@bp.get("/stats")
def api_stats():
    # Admin dashboard tiles
    return jsonify({r.name: len(store.list(r.name)) for r in RESOURCES})
