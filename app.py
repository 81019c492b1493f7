"""
Riding Roney Video Generator - one-click riding story videos.
Port: 8080
"""
import os
import sys

from flask import Flask, jsonify, render_template_string, send_file
from loguru import logger

# Add services to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.settings import CHANNEL_NAME, SERVICE_NAME, SERVICE_PORT, SERVICE_VERSION
from services.riding_video import VideoGenerationError, VideoGenerator

app = Flask(__name__)

VIDEO_GENERATOR = VideoGenerator.from_settings()

HEALTH_MESSAGE = f"{CHANNEL_NAME} Video Generator is running!"

INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ channel_name }} Video Generator</title>
  <style>
    body { font-family: Arial, sans-serif; background: linear-gradient(135deg, #87ceeb, #4682b4);
           color: #fff; min-height: 100vh; margin: 0; display: flex; align-items: center;
           justify-content: center; text-align: center; }
    button { font-size: 2rem; padding: 1rem 3rem; border: none; border-radius: 12px;
             background: #ffd700; color: #1b3a57; cursor: pointer; }
  </style>
</head>
<body>
  <main>
    <h1>{{ channel_name }}</h1>
    <p>One click, one 30-second riding adventure.</p>
    <form method="post" action="{{ url_for('create_video') }}">
      <button type="submit">CREATE</button>
    </form>
    <footer><small>{{ service_name }} v{{ version }}</small></footer>
  </main>
</body>
</html>
"""


@app.route("/", methods=["GET"])
def home():
    """Landing page with the CREATE button."""
    return render_template_string(
        INDEX_HTML,
        channel_name=CHANNEL_NAME,
        service_name=SERVICE_NAME,
        version=SERVICE_VERSION,
    )


@app.route("/create", methods=["POST"])
def create_video():
    """Generate a riding video and return it as a download."""
    try:
        logger.info("Creating new riding video...")
        artifact = VIDEO_GENERATOR.generate()
        logger.info(f"Video created: {artifact.filename}")
        return send_file(
            artifact.path,
            mimetype="application/octet-stream",
            as_attachment=True,
            download_name=artifact.filename,
        )
    except VideoGenerationError as e:
        logger.error(f"Error creating video: {e}")
        return jsonify({"status": "error", "error": "video generation failed"}), 500
    except Exception:
        logger.exception("Unexpected error creating video")
        return jsonify({"status": "error", "error": "video generation failed"}), 500


@app.route("/health", methods=["GET"])
def health():
    """Liveness check."""
    return HEALTH_MESSAGE


if __name__ == "__main__":
    logger.info(f"{SERVICE_NAME} v{SERVICE_VERSION} starting on port {SERVICE_PORT}")
    logger.info(f"Open: http://localhost:{SERVICE_PORT}")
    app.run(host="0.0.0.0", port=SERVICE_PORT, debug=True)
