"""
Source loading helpers.
"""

from .source import read_source

__all__ = ["read_source"]
