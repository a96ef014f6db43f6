"""
Pydantic schemas for decoded registry data.
"""

from .legal_code import AdministrativeArea, remove_tail_code

__all__ = ["AdministrativeArea", "remove_tail_code"]
