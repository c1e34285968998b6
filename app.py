# app.py
"""
SweatCheck Flask app.
Features:
 - Sweat strip form (glucose, pH, cortisol, salt zones)
 - Heuristic PCOS risk score
 - AI insight (Gemini by default, Groq / OpenAI selectable)
 - Supabase persistence of every analysed strip
 - Health endpoint for uptime monitoring

Requirements: see pyproject.toml
"""

import os
import time
import uuid

from flask import (
    Flask, render_template, request, flash, jsonify, session
)
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from config import Config
from auth_utils import get_supabase, get_user_from_token, resolve_user_id
from models import READING_FIELDS, SweatReadings
from analysis import (
    InsightRequester, ResultRecorder, SubmissionInProgress, SweatAnalysisOrchestrator,
    ErrorKind,
)
from analysis.providers import build_generator

# ============================================================
# App initialization
# ============================================================
app = Flask(__name__, static_folder='static', template_folder='templates')
CORS(app)
app.secret_key = Config.SECRET_KEY
app.config["TEMPLATES_AUTO_RELOAD"] = True
limiter = Limiter(get_remote_address, app=app, default_limits=["60 per minute"])

# ============================================================
# Collaborators
# ============================================================
_insight_requester = None


class _UnconfiguredProvider:
    """Stands in for a provider whose credentials are missing; always fails."""

    def __init__(self, reason):
        self.reason = reason

    def __call__(self, prompt):
        raise RuntimeError(self.reason)


def get_insight_requester() -> InsightRequester:
    global _insight_requester
    if _insight_requester is None:
        try:
            generate = build_generator(Config)
        except (RuntimeError, ValueError) as e:
            app.logger.warning("⚠️ Insight provider unavailable: %s", e)
            generate = _UnconfiguredProvider(str(e))
        _insight_requester = InsightRequester(generate)
    return _insight_requester


def get_recorder() -> ResultRecorder:
    return ResultRecorder(get_supabase(), table=Config.SWEAT_RESULTS_TABLE)


def flash_notification(notification):
    flash(f"{notification.title}: {notification.description}", notification.flash_category)


def build_orchestrator(notify=None) -> SweatAnalysisOrchestrator:
    return SweatAnalysisOrchestrator(
        get_insight_requester(),
        get_recorder(),
        notify=notify,
        max_score=Config.PCOS_SCORE_DENOMINATOR,
    )


def current_user_id(data=None):
    if data and data.get("user_id"):
        return data["user_id"]
    if session.get("user_id"):
        return session["user_id"]
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        try:
            user = get_user_from_token(auth_header[len("Bearer "):])
        except Exception as e:
            app.logger.warning("Token lookup failed: %s", e)
            user = None
        user_id = resolve_user_id(user)
        if user_id:
            return user_id
    return f"anon-{uuid.uuid4().hex[:8]}"

# ============================================================
# Routes - form, API, history, health
# ============================================================
@app.route("/")
@app.route("/sweat-analysis", methods=["GET"])
def sweat_form():
    return render_template("sweat_analysis.html", fields=READING_FIELDS, readings=SweatReadings())


@app.route("/sweat-analysis", methods=["POST"])
@limiter.limit(Config.ANALYZE_RATE_LIMIT)
def sweat_analysis():
    readings = SweatReadings.from_mapping(request.form)
    orchestrator = build_orchestrator(notify=flash_notification)
    outcome = orchestrator.submit(readings, user_id=current_user_id())
    status = 400 if outcome.error_kind == ErrorKind.MISSING_INPUT else 200
    return render_template(
        "sweat_analysis.html",
        fields=READING_FIELDS,
        readings=readings,
        pcos_score=outcome.score,
        ai_result=outcome.insight,
    ), status


@app.route("/api/sweat-analysis", methods=["POST"])
@limiter.limit(Config.ANALYZE_RATE_LIMIT)
def api_sweat_analysis():
    """
    JSON input:
    { "glucose": "Dark Blue", "ph": "Green", "cortisol": "Faint", "salt": "Yellow", "user_id": "..." }

    Response:
    { "score": 67, "insight": "...", "saved": true, "state": "done", ... }
    """
    data = request.get_json(silent=True) or {}
    readings = SweatReadings.from_mapping(data)
    try:
        outcome = build_orchestrator().submit(readings, user_id=current_user_id(data))
    except SubmissionInProgress as e:
        return jsonify({"error": "busy", "message": str(e)}), 409

    status = {
        None: 200,
        ErrorKind.MISSING_INPUT: 400,
        ErrorKind.INSIGHT_UNAVAILABLE: 502,
        ErrorKind.PERSIST_FAILED: 500,
    }[outcome.error_kind]
    return jsonify(outcome.to_dict()), status


@app.route("/sweat-results/<user_id>", methods=["GET"])
def sweat_results(user_id):
    recorder = get_recorder()
    if recorder.supabase is None:
        return jsonify({"error": "Result storage is not configured."}), 400
    try:
        return jsonify({"results": recorder.history(user_id)}), 200
    except Exception as e:
        app.logger.error("Supabase fetch failed: %s", e)
        return jsonify({"error": "Failed to fetch results", "details": str(e)}), 500


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "time": time.time()}), 200

# ============================================================
# Run
# ============================================================
if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG", "False") == "True")
