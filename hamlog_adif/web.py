"""Flask transport for the converter: multipart upload in, JSON or ADIF out."""

import logging
import os

from flask import Flask, Response, jsonify, request, send_from_directory
from werkzeug.exceptions import NotFound

from hamlog_adif.adif import write_adif
from hamlog_adif.assembler import convert
from hamlog_adif.config import Config
from hamlog_adif.models import RequestContext, batch_to_dict
from hamlog_adif.stats import ConversionStats
from hamlog_adif.validator import REQUIRED_FILES, RequestValidator

logger = logging.getLogger(__name__)

FORM_FIELDS = ("activator_call", "operator", "my_qth", "references", "his_qth")
FILE_FIELD = REQUIRED_FILES[0]


def decode_upload(data: bytes, encoding: str) -> str:
    """Decode uploaded log bytes; undecodable bytes become U+FFFD."""
    return data.decode(encoding, errors="replace")


def create_app(config=None) -> Flask:
    """Flask application factory."""
    if config is None:
        config = Config(os.environ.get("CONFIG_PATH", "config.yaml"))

    app = Flask(__name__, static_folder=None)
    app.config["MAX_CONTENT_LENGTH"] = config["upload"]["max_bytes"]

    validator = RequestValidator(config["schema"]["path"])
    stats = ConversionStats()
    static_dir = os.path.abspath(config["static"]["dir"])
    index_file = config["static"]["index"]
    allowed_origins = set(config["cors"]["allowed_origins"])
    workers = int(config["conversion"]["workers"])
    encoding = config["upload"]["encoding"]

    # Store components on app for access in tests
    app.config["components"] = {
        "config": config,
        "validator": validator,
        "stats": stats,
    }

    def _read_request():
        """Return (context, log_text, errors) from the multipart form."""
        form = {name: request.form[name] for name in FORM_FIELDS if name in request.form}
        _, errors = validator.validate(form, request.files)
        if errors:
            return None, None, errors

        context = RequestContext(
            station=form["activator_call"],
            operator=form["operator"],
            my_references=form["references"],
            his_references=form.get("his_qth", ""),
            my_qth=form.get("my_qth", ""),
        )
        upload = request.files[FILE_FIELD]
        return context, decode_upload(upload.read(), encoding), []

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        if origin and ("*" in allowed_origins or origin in allowed_origins):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers.add("Vary", "Origin")
        return response

    # --- Routes ---

    @app.route("/health")
    def health():
        return jsonify({
            "status": "healthy",
            "conversions": stats.get_stats(),
            "validation_stats": validator.get_stats(),
        })

    @app.route("/api/ADIFcheck", methods=["POST"])
    def adif_check():
        context, log_text, errors = _read_request()
        if errors:
            return jsonify({"status": "invalid", "errors": errors}), 400

        result = convert(log_text, context, workers=workers)
        stats.record(result)
        return jsonify(batch_to_dict(result))

    @app.route("/api/ADIFgen", methods=["POST"])
    def adif_gen():
        context, log_text, errors = _read_request()
        if errors:
            return jsonify({"status": "invalid", "errors": errors}), 400

        logger.info("Generating log for %s on refs %s", context.station, context.my_references)
        result = convert(log_text, context, workers=workers)
        stats.record(result)
        if not result.ok:
            return jsonify(batch_to_dict(result)), 422

        filename = context.station.upper().replace("/", "-") + ".adi"
        return Response(
            write_adif(result),
            mimetype="application/octet-stream",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def static_files(path):
        if path:
            try:
                return send_from_directory(static_dir, path)
            except NotFound:
                pass
        return send_from_directory(static_dir, index_file)

    return app
