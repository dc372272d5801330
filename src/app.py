# src/app.py
import logging

from flask import Flask, jsonify
from flask_cors import CORS

# ---- Core Config ----
from src.config import settings
from src.routes.pulse import pulse_bp

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# ---- Initialize Flask ----
app = Flask(__name__)
CORS(app)

# ---- Root Routes ----
@app.route("/")
def home():
    return "💓 token-pulse is live!"

@app.route("/healthz")
def healthz():
    return jsonify({"ok": True})

# ---- Blueprints ----
app.register_blueprint(pulse_bp, url_prefix="/api")

# ---- Run Server ----
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.PORT)
