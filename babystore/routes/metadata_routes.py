from flask import Blueprint, jsonify
from babystore.models import get_model, display_labels

metadata_bp = Blueprint("metadata", __name__)


@metadata_bp.route("/<entity>", methods=["GET"])
def get_entity_labels(entity):
    """Form labels for an entity, consumed by the UI generator"""
    try:
        model = get_model(entity)
    except LookupError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify({"entity": model.__name__, "labels": display_labels(model)}), 200
