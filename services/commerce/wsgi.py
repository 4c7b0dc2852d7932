"""WSGI entry point for the commerce service."""

import os

try:
    from services.commerce.commerce_app import create_app
except ModuleNotFoundError:  # pragma: no cover - container/service-local fallback
    from commerce_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "3001")), threaded=True)
