"""
pkxcore Flask Web Application

Decodes uploaded PKX records and returns their fields as JSON.

  GET  /api/formats         record sizes for every supported format
  POST /api/decode/<fmt>    decode a record sent as the ``pkx_file``
                            upload field or as the raw request body
  GET  /health              liveness check
"""

import os
import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from .. import __version__
from ..config import WebConfig
from ..core.errors import PKXError
from ..formats import FORMATS
from ..loader import decode

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "pkx_file"


def create_app(config: Optional[WebConfig] = None) -> Flask:
    """Build the Flask app from ``config`` (default: the environment)."""
    if config is None:
        config = WebConfig.from_env()

    # Configure logging
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))

    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.secret_key
    app.config['MAX_CONTENT_LENGTH'] = config.max_upload_bytes

    # Enable CORS for API endpoints
    CORS(app, resources={r"/api/*": {"origins": config.cors_origins}})

    # ── API Routes ────────────────────────────────────────────────────────────

    @app.route("/api/formats")
    def api_formats():
        """Supported formats and their record sizes."""
        return jsonify({
            "success": True,
            "formats": {
                name: {
                    "stored_size": cls.STORED_SIZE,
                    "party_size":  cls.PARTY_SIZE,
                    "block_size":  cls.BLOCK_SIZE,
                }
                for name, cls in FORMATS.items()
            },
        })

    @app.route("/api/decode/<fmt>", methods=["POST"])
    def api_decode(fmt):
        """Decode one encrypted record."""
        if UPLOAD_FIELD in request.files:
            data = request.files[UPLOAD_FIELD].read()
        else:
            data = request.get_data()
        if not data:
            return jsonify({"success": False, "error": "No record provided"}), 400

        try:
            pkx = decode(data, fmt)
            pokemon = pkx.to_dict()
        except PKXError as e:
            logger.warning(f"Rejected {fmt} upload: {e}")
            return jsonify({"success": False, "error": str(e)}), 400

        logger.info(f"Decoded {pkx.FORMAT_NAME} {pkx.species_name}")
        return jsonify({"success": True, "pokemon": pokemon})

    # ── Health Check ──────────────────────────────────────────────────────────

    @app.route("/health")
    def health_check():
        return jsonify({
            "status": "ok",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "formats": sorted(FORMATS),
        })

    # ── Error Handlers ────────────────────────────────────────────────────────

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"success": False, "error": "Endpoint not found"}), 404

    @app.errorhandler(413)
    def too_large(error):
        return jsonify({
            "success": False,
            "error": f"Upload larger than {config.max_upload_bytes} bytes",
        }), 413

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {error}")
        return jsonify({"success": False, "error": "Internal server error"}), 500

    return app


def main():
    app = create_app()
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("DEBUG", "False").lower() == "true"
    logger.info(f"Starting pkxcore on {host}:{port} (debug={debug})")
    app.run(debug=debug, host=host, port=port)


if __name__ == '__main__':
    main()
