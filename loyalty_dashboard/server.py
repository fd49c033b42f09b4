"""
Static file server plus the CSV endpoint the dashboard tries first.

Run with `python -m loyalty_dashboard.server` (or the `loyalty-csv-server`
script); `PORT` and `CSV_DATA_PATH` override the defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, Response, jsonify

from loyalty_dashboard.config import PROJECT_ROOT, configure_logging, load_settings

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_DIR = PROJECT_ROOT / "public"


def create_app(data_path: Optional[Path] = None, public_dir: Optional[Path] = None) -> Flask:
    settings = load_settings()
    csv_path = Path(data_path) if data_path is not None else settings.data_path
    static_dir = Path(public_dir) if public_dir is not None else DEFAULT_PUBLIC_DIR

    app = Flask(__name__, static_folder=str(static_dir), static_url_path="")
    app.config["CSV_DATA_PATH"] = csv_path

    @app.after_request
    def _allow_cors(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.route("/api/csv")
    def api_csv():
        path = Path(app.config["CSV_DATA_PATH"])
        try:
            csv_data = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error reading CSV file %s: %s", path, exc)
            return jsonify({"error": "Failed to read CSV file"}), 500
        return Response(csv_data, mimetype="text/csv")

    return app


def main() -> None:
    load_dotenv()
    configure_logging()
    settings = load_settings()
    app = create_app()
    logger.info("🚀 Server is running on port %s", settings.port)
    logger.info("📊 CSV API available at http://localhost:%s/api/csv", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
