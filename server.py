"""server.py
Flask front-end for the tool server.

Highlights
----------
* `/` serves the chat page with the webhook URL spliced in.
* `/tools` + `/tool-call` let a host discover and invoke tools by name.
* Config read from a single absolute CONFIG_PATH; env var wins; never raises.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from conductor import ToolError, list_tools, run_tool_call

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Flask app
# ---------------------------------------------------------------------------

app = Flask(__name__)
CORS(app, resources={r"/*": {"origins": "*"}})

# ---------------------------------------------------------------------------
# Configuration handling
# ---------------------------------------------------------------------------

BASE_DIR = Path(__file__).parent.resolve()
CONFIG_PATH = BASE_DIR / "config.json"
PAGE_PATH = BASE_DIR / "templates" / "index.html"

WEBHOOK_KEY = "chat.webhook.url"
WEBHOOK_PLACEHOLDER = "{{CHAT_WEBHOOK_URL}}"

DEFAULT_CONFIG: Dict[str, Any] = {
    WEBHOOK_KEY: "",
}


def _read_cfg() -> Dict[str, Any]:
    """Return cfg dict; never raises."""
    cfg = DEFAULT_CONFIG.copy()
    try:
        cfg.update(json.loads(CONFIG_PATH.read_text()))
    except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
        logger.warning("Using default config, could not read %s: %s", CONFIG_PATH, exc)
    return cfg


def chat_webhook_url() -> str:
    env_url = os.getenv("CHAT_WEBHOOK_URL")
    if env_url is not None:
        return env_url
    return str(_read_cfg().get(WEBHOOK_KEY) or "")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def inject_webhook_url(html: str, url: str) -> str:
    """Literal replace of the placeholder; no escaping, no templating."""
    return html.replace(WEBHOOK_PLACEHOLDER, url)

# ---------------------------------------------------------------------------
# Page routes
# ---------------------------------------------------------------------------

@app.route("/", methods=["GET"])
def index() -> Response:
    """Chat page with the configured webhook URL filled in."""
    html = PAGE_PATH.read_text(encoding="utf-8")
    return Response(inject_webhook_url(html, chat_webhook_url()), mimetype="text/html")

# ---------------------------------------------------------------------------
# Tool endpoints
# ---------------------------------------------------------------------------

@app.route("/tools", methods=["GET"])
def tools_route():
    return jsonify({"tools": list_tools()})


@app.route("/tool-call", methods=["POST"])
def tool_call_route():
    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict) or not data.get("tool"):
        return jsonify({"error": "no tool supplied"}), 400

    try:
        result = run_tool_call(data)
    except ToolError as exc:
        return jsonify({"error": str(exc)}), 404
    return jsonify({"result": result})


@app.route("/health", methods=["GET"])
def health_check():
    return jsonify({"status": "healthy"})

# ---------------------------------------------------------------------------
# Run app
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    app.run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_DEBUG") == "1")
