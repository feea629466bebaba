import logging
from datetime import datetime, timezone

from flask import Flask, request, jsonify
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError

import config
from models import db
from storage import SQLStorage
from leaf_service import process_gratitude, process_thought, process_accomplishment
from entry_store import (
    save_gratitude,
    save_thought,
    save_accomplishment,
    get_gratitude_entries,
    get_thought_entries,
    get_accomplishment_entries,
)
from transcription import simulate_transcription
from garden import garden_overview

logger = logging.getLogger(__name__)


# category -> (process, save, list)
CATEGORIES = {
    "gratitude": (
        process_gratitude,
        lambda storage, text, reply: save_gratitude(storage, text, reply["message"]),
        get_gratitude_entries,
    ),
    "thoughts": (
        process_thought,
        lambda storage, text, reply: save_thought(storage, text, reply["message"], reply["tone"]),
        get_thought_entries,
    ),
    "accomplishments": (
        process_accomplishment,
        lambda storage, text, reply: save_accomplishment(storage, text, reply["message"]),
        get_accomplishment_entries,
    ),
}


def create_app(test_config=None):
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)

    # --- Database config (local SQLite unless DATABASE_URL says otherwise) ---
    app.config["SQLALCHEMY_DATABASE_URI"] = config.DATABASE_URL
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    if test_config:
        app.config.update(test_config)

    # Init DB
    db.init_app(app)
    with app.app_context():
        db.create_all()

    # Screens only talk to the core through this storage object
    storage = app.config.get("STORAGE") or SQLStorage()

    # --- CORS (allow the app's web origin if provided) ---
    if config.FRONTEND_ORIGIN:
        CORS(app, resources={r"/*": {"origins": [config.FRONTEND_ORIGIN]}})
    else:
        # Dev fallback: allow all
        CORS(app)

    # ---------- Routes ----------

    @app.route("/health")
    def health():
        """Simple health check + DB connectivity test."""
        db_ok = True
        try:
            db.session.execute(db.text("SELECT 1"))
        except SQLAlchemyError:
            db.session.rollback()
            db_ok = False
        return jsonify({
            "ok": True,
            "db_ok": db_ok,
            "model": config.OPENAI_MODEL,
            "ai_enabled": bool(config.OPENAI_API_KEY),
            "time": datetime.now(timezone.utc).isoformat(),
        }), 200

    @app.route("/<category>/record", methods=["POST"])
    def record(category):
        """Stand-in for the microphone: returns the category's fixed transcription."""
        if category not in CATEGORIES:
            return jsonify({"error": f"Unknown category '{category}'"}), 404
        return jsonify({
            "category": category,
            "transcription": simulate_transcription(category),
        }), 200

    @app.route("/<category>", methods=["POST"])
    def handle_entry(category):
        """Process one entry with Leaf, then store it."""
        if category not in CATEGORIES:
            return jsonify({"error": f"Unknown category '{category}'"}), 404

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        text = data.get("text")
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            return jsonify({"error": "Missing 'text'"}), 400

        process, save, _ = CATEGORIES[category]
        reply = process(text)
        save(storage, text, reply)
        logger.info("Saved %s entry", category)
        return jsonify(reply), 200

    @app.route("/<category>/entries", methods=["GET"])
    def list_entries(category):
        """List saved entries for a category (latest first)."""
        if category not in CATEGORIES:
            return jsonify({"error": f"Unknown category '{category}'"}), 404
        _, _, get_entries = CATEGORIES[category]
        return jsonify(get_entries(storage)), 200

    @app.route("/garden", methods=["GET"])
    def garden():
        return jsonify(garden_overview(storage)), 200

    return app


if __name__ == "__main__":
    create_app().run(
        host="0.0.0.0",
        port=config.PORT,
        debug=True
    )
