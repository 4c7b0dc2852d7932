"""WSGI entry point for the dashboard service."""

import os

try:
    from services.dashboard.dashboard_app import create_app
except ModuleNotFoundError:  # pragma: no cover - container/service-local fallback
    from dashboard_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5173")), threaded=True)
