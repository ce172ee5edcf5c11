# routes/preference_routes.py
from flask import Blueprint, current_app, jsonify, request
import logging

from services.errors import InvalidPreference, StorageError

logger = logging.getLogger(__name__)

bp = Blueprint("preference_routes", __name__)


def _preferences():
    return current_app.extensions["preference_store"]


@bp.route("/<user_id>", methods=["GET"])
def get_user_preferences(user_id):
    """
    GET /api/user-preferences/<userId>

    A user with no saved preferences gets an empty list, not a 404.
    """
    try:
        uid = int(user_id)
    except ValueError:
        return jsonify({"message": "Invalid user ID"}), 400

    try:
        prefs = _preferences().get_for_user(uid)
    except StorageError as e:
        logger.exception("Error fetching preferences for user %s: %s", uid, e)
        return jsonify({"message": "Failed to fetch user preferences"}), 500

    return jsonify([p.to_json() for p in prefs]), 200


@bp.route("", methods=["POST"])
def update_user_preference():
    """
    POST /api/user-preferences
    Body:
    {
        "userId": 1,
        "questionId": 7,
        "isFavorite": true,     // optional
        "isCompleted": false    // optional
    }
    Flags that are left out keep their stored value.
    """
    if not request.is_json:
        return jsonify({"message": "Invalid request: expected JSON body."}), 400

    try:
        pref = _preferences().upsert(request.get_json(silent=True))
    except InvalidPreference as e:
        return jsonify({"message": str(e)}), 400
    except StorageError as e:
        logger.exception("Error updating user preference: %s", e)
        return jsonify({"message": "Failed to update user preference"}), 500

    return jsonify(pref.to_json()), 200
