"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Configuration, logging, the database handle and the
error boundary live in ``core``; the patterns domain is split into
``schemas`` (request and response bodies), ``services`` (table
queries) and ``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
