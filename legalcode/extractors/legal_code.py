"""
Decoder for the legal-district code registry TSV (법정동 코드 전체 자료).

Each data row has the layout:
    <10-digit code> TAB <full hierarchical name> TAB <status> [TAB ...]

Example:
    1111010100    서울특별시 종로구 청운동    존재

The code splits at fixed offsets into city (2), district (3),
town (3) and village (2) segments. The first line is a header.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import MalformedRowError
from ..schema.legal_code import AdministrativeArea
from ..utils.source import read_source

logger = logging.getLogger(__name__)


# Status column value for units that currently exist (abolished units use 폐지)
EXISTS_MARKER = "존재"

CODE_LENGTH = 10


def extract_name(full_code: str, city_code: str, sub_code: str, full_name: str) -> str:
    """
    Pick the leaf name out of a full hierarchical name.

    Rules, in order:
        1. city-only code, or a single token -> first token
        2. two tokens -> second token (the city+district comparison adds
           six zeros to five digits, so it never matches a 10-digit code)
        3. otherwise -> tokens from the third onward, joined by spaces

    The token-count checks cover registries such as 세종특별자치시 whose
    names skip the district level even though the code populates it.
    """
    name_tokens = full_name.split(" ")
    if full_code == city_code + "00000000" or len(name_tokens) == 1:
        return name_tokens[0]
    elif full_code == city_code + sub_code + "000000" or len(name_tokens) == 2:
        return name_tokens[1]
    else:
        return " ".join(name_tokens[2:])


class LegalCodeDecoder:
    """Decode legal-district code registry text into AdministrativeArea records."""

    def __init__(self, exists_marker: str = EXISTS_MARKER):
        self.exists_marker = exists_marker
        self.records: list[AdministrativeArea] = []

    def split_rows(self, raw_text: str) -> list[tuple[int, str]]:
        """Return (line number, row) pairs for the data rows, header dropped."""
        # Leading blank lines before the header are ignored
        rows = raw_text.lstrip().split("\n")
        data_rows = []

        # First line is the header
        for line_num, row in enumerate(rows[1:], start=2):
            row = row.rstrip("\r")
            if "\t" not in row and not row.strip():
                continue
            data_rows.append((line_num, row))

        return data_rows

    def decode_row(self, line_num: int, row: str) -> AdministrativeArea:
        """Decode a single data row."""
        cols = row.split("\t")
        if len(cols) < 3:
            raise MalformedRowError(line_num, row, f"expected 3 columns, got {len(cols)}")

        full_code, full_name, status = cols[0], cols[1], cols[2]

        if len(full_code) != CODE_LENGTH or not (full_code.isascii() and full_code.isdigit()):
            raise MalformedRowError(line_num, row, f"code must be {CODE_LENGTH} digits: {full_code!r}")

        city_code = full_code[0:2]
        sub_code = full_code[2:5]
        sub2_code = full_code[5:8]
        code = full_code[8:10]

        name = extract_name(full_code, city_code, sub_code, full_name)
        if not name:
            raise MalformedRowError(line_num, row, "no leaf name for code")

        try:
            return AdministrativeArea(
                full_code=full_code,
                full_name=full_name,
                city_code=city_code,
                sub_code=sub_code,
                sub2_code=sub2_code,
                code=code,
                name=name,
                type=name[-1],
                is_alive=status.strip() == self.exists_marker,
            )
        except ValidationError as e:
            raise MalformedRowError(line_num, row, str(e)) from e

    def decode(self, raw_text: str) -> list[AdministrativeArea]:
        """
        Decode the full registry text.

        Args:
            raw_text: TSV content including the header line

        Returns:
            Records in input row order

        Raises:
            MalformedRowError: on the first bad row; nothing is returned
        """
        records = [self.decode_row(line_num, row) for line_num, row in self.split_rows(raw_text)]
        logger.info("Decoded %d records", len(records))
        return records

    def extract(self, filepath: str | Path) -> list[AdministrativeArea]:
        """Read and decode a registry TSV file."""
        self.records = []
        self.records = self.decode(read_source(filepath))
        return self.records

    def to_dict(self) -> list[dict]:
        """Convert records to a list of JSON-ready dicts."""
        return [r.to_json_dict() for r in self.records]


def parse_code_tsv(filepath: str | Path) -> list[AdministrativeArea]:
    """Read and decode a registry TSV file in one call."""
    return LegalCodeDecoder().decode(read_source(filepath))
