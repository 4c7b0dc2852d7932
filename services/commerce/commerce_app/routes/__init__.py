"""
Routes package for the commerce service.

This package contains route blueprints:
- health: public liveness probe at ``/health``
- api: JSON endpoints mounted under ``/api``
"""
