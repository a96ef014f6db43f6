"""
Tests for converted JSON validation
"""
import json

import pytest

from legalcode import validate
from legalcode.extractors.legal_code import LegalCodeDecoder


@pytest.fixture
def areas(seoul_tsv):
    return LegalCodeDecoder().decode(seoul_tsv)


@pytest.fixture
def json_file(tmp_path, areas):
    path = tmp_path / "legal-code.json"
    path.write_text(json.dumps([a.to_json_dict() for a in areas], ensure_ascii=False), encoding="utf-8")
    return path


def test_load_areas(json_file, areas):
    assert validate.load_areas(json_file) == areas


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate.load_areas(tmp_path / "missing.json")


def test_summary(areas, capsys):
    stats = validate.summary_stats(areas)
    assert stats["total"] == 4
    assert stats["alive"] == 3
    assert stats["abolished"] == 1
    assert stats["by_level"] == {"city": 1, "district": 1, "town": 2}
    assert stats["by_type"] == {"시": 1, "구": 1, "동": 2}
    assert "Total records: 4" in capsys.readouterr().out


def test_spot_check_prefix(areas):
    matches = validate.spot_check(areas, "1111")
    assert [a.name for a in matches] == ["종로구", "청운동", "신교동"]


def test_spot_check_full_code(areas):
    matches = validate.spot_check(areas, "1111010100")
    assert [a.name for a in matches] == ["청운동"]


def test_spot_check_none(areas, capsys):
    assert validate.spot_check(areas, "26") == []
    assert "No areas found" in capsys.readouterr().out


def test_no_anomalies(areas):
    assert validate.find_anomalies(areas) == []


def test_anomalies():
    text = "\n".join([
        "법정동코드\t법정동명\t폐지여부",
        "1100000000\t서울특별시\t존재",
        "1100000000\t서울특별시\t존재",
        "4282025021\t강원도 양구군 양구읍 상리\t폐지",
    ])
    issues = validate.find_anomalies(LegalCodeDecoder().decode(text))
    assert any("appears 2 times" in i for i in issues)
    assert any("양구읍 상리" in i for i in issues)


def test_cli_summary(json_file, capsys):
    validate.main(["summary", str(json_file)])
    assert "existing:  3" in capsys.readouterr().out
