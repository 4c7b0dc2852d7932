"""Route blueprints for the dashboard service."""
