#!/usr/bin/env python3
"""
Flask web app for stackpack: upload files, get back one bundled file
"""

import asyncio
import io
import logging
import os

from flask import Flask, jsonify, request, send_file

from .bundler import bundle_classified, parse_output_kind
from .classifier import classify
from .errors import InvalidComponentName, InvalidOutputKind, MissingRequiredCategory, ReadFailure
from .models import InputFile, OutputKind
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)

MIMETYPES = {
    OutputKind.STANDALONE: "text/html",
    OutputKind.COMPONENT: "text/javascript",
}


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes

    def run_bundle():
        """Bundle the uploaded files of the current request"""
        uploads = request.files.getlist("files")
        inputs = [InputFile.from_bytes(f.filename or "", f.read()) for f in uploads]
        kind = parse_output_kind(request.form.get("output_kind") or settings.output_kind)
        component_name = request.form.get("component_name") or settings.component_name

        classified = classify(inputs)
        classified.require()
        logger.info(f"Bundling {classified.file_count} uploaded files as {kind.value}")
        return asyncio.run(bundle_classified(classified, kind, request.form.get("filename"), component_name))

    @app.errorhandler(MissingRequiredCategory)
    @app.errorhandler(InvalidComponentName)
    @app.errorhandler(InvalidOutputKind)
    def bad_request(e):
        return jsonify(error=str(e)), 400

    @app.errorhandler(ReadFailure)
    def read_failure(e):
        logger.error(f"Error reading upload: {e}")
        return jsonify(error=str(e)), 500

    @app.route('/health')
    def health():
        return jsonify(status="ok")

    @app.route('/bundle', methods=['POST'])
    def download_bundle():
        """Return the bundle as a file download"""
        result = run_bundle()
        return send_file(
            io.BytesIO(result.content.encode("utf-8")),
            mimetype=MIMETYPES[result.output_kind],
            as_attachment=True,
            download_name=result.filename,
        )

    @app.route('/api/bundle', methods=['POST'])
    def api_bundle():
        """Return the bundle and its metadata as JSON"""
        result = run_bundle()
        return jsonify(
            content=result.content,
            filename=result.filename,
            outputType=result.output_kind.value,
            fileCount=result.file_count,
        )

    return app


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    port = int(os.environ.get('PORT', 5000))
    create_app(settings).run(host='0.0.0.0', port=port)


if __name__ == '__main__':
    main()
