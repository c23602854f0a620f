"""
API package containing the HTTP routes.

``router`` in ``api.router`` aggregates the domain routers; each
domain lives in its own module under ``api/endpoints``.
"""
