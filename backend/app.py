import logging
from typing import Optional
from flask import Flask, jsonify

from config import Settings, load_settings
from services.catalog_service import QuestionCatalog
from services.preference_service import PreferenceStore
from services.storage import Storage, create_storage

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None, seed: bool = True):
    """
    Flask application factory.
    Chooses the storage backend once, seeds the catalog if it is empty, and
    hands the catalog / preference services to the blueprints via app.extensions.
    Tests pass their own storage (and seed=False) to control the data set.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    if storage is None:
        storage = create_storage(settings)

    catalog = QuestionCatalog(storage)
    if seed:
        created = catalog.ensure_seeded()
        if created:
            logger.info("Seeded %d questions.", created)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["DEFAULT_USER_ID"] = settings.default_user_id
    app.extensions["storage"] = storage
    app.extensions["question_catalog"] = catalog
    app.extensions["preference_store"] = PreferenceStore(storage)

    from routes.question_routes import bp as question_bp, meta_bp
    from routes.preference_routes import bp as preference_bp

    app.register_blueprint(question_bp, url_prefix="/api/questions")
    app.register_blueprint(meta_bp, url_prefix="/api")
    app.register_blueprint(preference_bp, url_prefix="/api/user-preferences")

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({
            "status": "ok",
            "storage": storage.name
        }), 200

    return app


if __name__ == "__main__":
    # Run app for development
    import os

    host = os.getenv("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_RUN_PORT", "5000"))

    application = create_app()
    application.run(host=host, port=port, debug=True)
