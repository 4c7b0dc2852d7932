"""
Repository-level test suite.

This package contains:
- performance/: Locust scenarios, the phased load shape and the CI
  threshold checker for the commerce API
- unit/: tests for the Locust-free parts of the performance tooling

Service tests live beside each service in ``services/<name>/tests``.
"""
