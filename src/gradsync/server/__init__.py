"""
Server Module - Bundled graduate Record Store (FastAPI, in-memory).
"""

from .app import create_app, run_server
from .repository import GraduateRepository

__all__ = ["create_app", "run_server", "GraduateRepository"]
