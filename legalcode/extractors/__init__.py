"""
Registry decoders.
"""

from .legal_code import EXISTS_MARKER, LegalCodeDecoder, extract_name, parse_code_tsv

__all__ = ["EXISTS_MARKER", "LegalCodeDecoder", "extract_name", "parse_code_tsv"]
