from datetime import datetime

from flask import Flask, jsonify, request

import settings
from main import LatestEarthquakeScraper
from scraper.errors import BulletinError, FetchError

app = Flask(__name__)


def get_scraper():
    # Fresh instance per request, nothing is cached between calls
    return LatestEarthquakeScraper()


def error_response(error):
    """JSON body for a failed fetch-and-parse"""
    if isinstance(error, FetchError):
        message = "Could not retrieve bulletin"
    else:
        message = "Bulletin format not recognised"
    return (
        jsonify(
            {
                "error": message,
                "detail": str(error),
                "type": type(error).__name__,
            }
        ),
        502,
    )


@app.route("/health")
def health_check():
    """Liveness check; does not contact the observatory"""
    return jsonify(
        {
            "status": "healthy",
            "source": settings.KANDILLI_URL,
            "timestamp": datetime.now().isoformat(),
        }
    )


@app.route("/api/latest")
def get_latest():
    """Most recent earthquake"""
    try:
        event = get_scraper().latest()
    except BulletinError as e:
        return error_response(e)

    return jsonify(event.to_dict())


@app.route("/api/latest/<int:count>")
def get_latest_n(count):
    """The ``count`` most recent earthquakes, newest first"""
    if count < 1:
        return jsonify({"error": "count must be at least 1"}), 400

    try:
        events = get_scraper().latest_n(count)
    except BulletinError as e:
        return error_response(e)

    return jsonify(
        {"total": len(events), "earthquakes": [event.to_dict() for event in events]}
    )


@app.route("/api/earthquakes")
def get_earthquakes():
    # Extract query parameters from the request
    count = request.args.get("count", default=settings.DEFAULT_EVENT_COUNT, type=int)
    return get_latest_n(count)


if __name__ == "__main__":
    app.run(host=settings.FLASK_HOST, port=settings.FLASK_PORT, debug=False)
