"""
Flask gateway: one stateless relay per backend operation.

Each route forwards to the rendering backend and relays its JSON untouched.
Any failure is logged here and answered with a generic ``{"error": ...}``
body and status 500, so backend error text never reaches the client.
"""

import logging
from flask import Flask, request, jsonify

from ascii_studio.connections.backend_connection import RenderingBackend
from ascii_studio.errors import BackendUnavailable

logger = logging.getLogger("gateway")

FONTS_ERROR = "Failed to fetch fonts"
GENERATE_ERROR = "Failed to generate ASCII art"
RANDOM_ERROR = "Failed to generate random ASCII art"


def setup_gateway_routes(app, backend):
    """Register the relay routes on ``app``"""

    @app.route("/")
    def index():
        logger.info("Health check endpoint accessed")
        return "ASCII Studio gateway is running."

    @app.route("/api/fonts", methods=["GET"])
    def list_fonts():
        try:
            return jsonify(backend.list_fonts())
        except BackendUnavailable as e:
            logger.error(f"Error fetching fonts: {e}")
            return jsonify({"error": FONTS_ERROR}), 500

    @app.route("/api/generate", methods=["POST"])
    def generate():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            logger.error("Error generating ASCII art: request body is not a JSON object")
            return jsonify({"error": GENERATE_ERROR}), 500
        try:
            return jsonify(backend.generate(body))
        except BackendUnavailable as e:
            logger.error(f"Error generating ASCII art: {e}")
            return jsonify({"error": GENERATE_ERROR}), 500

    @app.route("/api/random", methods=["GET"])
    def random_art():
        try:
            return jsonify(backend.random())
        except BackendUnavailable as e:
            logger.error(f"Error generating random ASCII art: {e}")
            return jsonify({"error": RANDOM_ERROR}), 500

    logger.info("Gateway routes registered")


def create_app(backend=None):
    app = Flask(__name__)
    # Keep relayed bodies in backend key order
    app.json.sort_keys = False
    setup_gateway_routes(app, backend or RenderingBackend())
    return app
