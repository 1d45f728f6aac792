"""
Deep Thought Server - FastAPI layer that feeds table events to per-table
agents and answers action requests.
"""

from deepthought.server.app import create_app

__all__ = ["create_app"]
