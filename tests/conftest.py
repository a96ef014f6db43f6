"""
Pytest configuration and fixtures
"""
import pytest

from legalcode.extractors.legal_code import LegalCodeDecoder


HEADER = "법정동코드\t법정동명\t폐지여부"


def make_tsv(*rows: str) -> str:
    """Build registry text with the header line prepended"""
    return "\n".join([HEADER, *rows]) + "\n"


@pytest.fixture
def decoder():
    return LegalCodeDecoder()


@pytest.fixture
def seoul_tsv():
    """Small Seoul registry excerpt"""
    return make_tsv(
        "1100000000\t서울특별시\t존재",
        "1111000000\t서울특별시 종로구\t존재",
        "1111010100\t서울특별시 종로구 청운동\t존재",
        "1111010200\t서울특별시 종로구 신교동\t폐지",
    )


@pytest.fixture
def tsv_file(tmp_path, seoul_tsv):
    path = tmp_path / "legal_code.tsv"
    path.write_text(seoul_tsv, encoding="utf-8")
    return path
