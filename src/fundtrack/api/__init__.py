"""HTTP API for fundtrack."""

from fundtrack.api.app import create_app

__all__ = ["create_app"]
