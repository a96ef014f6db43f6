"""
legalcode - decode the legal district code (법정동 코드) registry TSV into records.
"""

from .errors import LegalCodeError, MalformedRowError, SourceReadError
from .extractors.legal_code import LegalCodeDecoder, parse_code_tsv
from .schema.legal_code import AdministrativeArea

__all__ = [
    "AdministrativeArea",
    "LegalCodeDecoder",
    "LegalCodeError",
    "MalformedRowError",
    "SourceReadError",
    "parse_code_tsv",
]
