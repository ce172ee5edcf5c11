# routes/question_routes.py
from flask import Blueprint, current_app, jsonify, request
import logging

from models.question_model import DIFFICULTIES, normalize_difficulty
from models.view_model import ALL, FilterCriteria
from services import filter_pipeline
from services.errors import QuestionNotFound, StorageError

logger = logging.getLogger(__name__)

bp = Blueprint("question_routes", __name__)
meta_bp = Blueprint("meta_routes", __name__)


def _catalog():
    return current_app.extensions["question_catalog"]


def _preferences():
    return current_app.extensions["preference_store"]


def _flag(value) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _int_arg(name: str, default: int) -> int:
    try:
        return int(request.args.get(name, default))
    except (TypeError, ValueError):
        return default


@bp.route("", methods=["GET"])
def list_questions():
    """
    GET /api/questions[?difficulty=easy]

    A recognised difficulty (canonical or legacy label) narrows the list;
    anything else returns the full catalog.
    """
    difficulty = request.args.get("difficulty")
    try:
        if difficulty and normalize_difficulty(difficulty) is not None:
            questions = _catalog().get_by_difficulty(difficulty)
        else:
            questions = _catalog().get_all()
    except StorageError as e:
        logger.exception("Error fetching questions: %s", e)
        return jsonify({"message": "Failed to fetch questions"}), 500

    return jsonify([q.to_json() for q in questions]), 200


@bp.route("/<question_id>", methods=["GET"])
def get_question(question_id):
    """GET /api/questions/<id>"""
    try:
        qid = int(question_id)
    except ValueError:
        return jsonify({"message": "Invalid question ID"}), 400

    try:
        question = _catalog().get_by_id(qid)
    except QuestionNotFound:
        return jsonify({"message": "Question not found"}), 404
    except StorageError as e:
        logger.exception("Error fetching question with ID %s: %s", qid, e)
        return jsonify({"message": "Failed to fetch question"}), 500

    return jsonify(question.to_json()), 200


@bp.route("/view", methods=["GET"])
def question_view():
    """
    GET /api/questions/view?userId=1&search=rails&category=all&difficulty=all&favoritesOnly=false&page=1

    Runs the filter pipeline server-side for one user and returns a single page
    plus the counts the pager needs.
    """
    user_id = _int_arg("userId", current_app.config["DEFAULT_USER_ID"])
    criteria = FilterCriteria(
        search=request.args.get("search", ""),
        category=request.args.get("category") or ALL,
        difficulty=request.args.get("difficulty") or ALL,
        favorites_only=_flag(request.args.get("favoritesOnly")),
        page=_int_arg("page", 1),
    )

    try:
        questions = _catalog().get_all()
        prefs = _preferences().lookup_for_user(user_id)
    except StorageError as e:
        logger.exception("Error building question view for user %s: %s", user_id, e)
        return jsonify({"message": "Failed to fetch questions"}), 500

    page = filter_pipeline.build_page(questions, prefs, criteria)
    return jsonify(page.to_json()), 200


@meta_bp.route("/categories", methods=["GET"])
def list_categories():
    try:
        categories = _catalog().categories()
    except StorageError as e:
        logger.exception("Error fetching categories: %s", e)
        return jsonify({"message": "Failed to fetch categories"}), 500
    return jsonify(categories), 200


@meta_bp.route("/difficulties", methods=["GET"])
def list_difficulties():
    return jsonify(DIFFICULTIES), 200
