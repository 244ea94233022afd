"""
JSON web API for decoding uploaded PKX records.
"""

from .app import create_app

__all__ = ['create_app']
