"""HTTP server wiring: app factory, lifespan and middleware."""

from localegate.server.server import create_app

__all__ = ["create_app"]
