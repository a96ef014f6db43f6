"""
Main CLI for legalcode - legal-district code registry TSV to JSON converter.

Usage:
    legalcode
    legalcode path/to/legal_code.tsv
    legalcode path/to/legal_code.tsv --output out/legal-code.json
    python -m legalcode.main --help
"""

import argparse
import json
import sys
from pathlib import Path

from .errors import LegalCodeError
from .extractors.legal_code import LegalCodeDecoder


# Bundled registry snapshot used when no TSV path is given
DEFAULT_TSV = Path(__file__).parent / "assets" / "legal_code.tsv"

DEFAULT_OUTPUT = "legal-code.json"

USAGE_NOTE = """
인자 없이 호출 시 패키지 내부에 포함된 tsv를 json으로 변환합니다.
새로운 법정동코드를 이용하고 싶은 경우는 첫 번째 인자로 법정동코드 tsv 파일의 경로를 지정하세요.

Without arguments, the bundled TSV snapshot is converted to JSON.
To use a newer legal district code export, pass the path of the TSV
file as the first argument.

Examples:
  legalcode
  legalcode data/legal_code_202402.tsv
  legalcode data/legal_code_202402.tsv --output build/legal-code.json
"""


def convert(tsv_path: Path, output_path: Path) -> list[dict]:
    """Decode a registry TSV and save it as a JSON array."""
    print(f"\n{'='*60}")
    print("Converting legal district codes")
    print(f"{'='*60}")
    print(f"\nProcessing: {tsv_path}")

    decoder = LegalCodeDecoder()
    records = decoder.extract(tsv_path)
    alive = sum(1 for r in records if r.is_alive)
    print(f"  Decoded {len(records)} records ({alive} existing, {len(records) - alive} abolished)")

    data = decoder.to_dict()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"\nJSON file has been saved: {output_path}")

    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legalcode",
        description="Convert the legal district code (법정동 코드) TSV export to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE_NOTE,
    )
    parser.add_argument(
        "tsv_path",
        nargs="?",
        type=Path,
        default=DEFAULT_TSV,
        help="Registry TSV file (default: bundled snapshot)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help=f"Output JSON file (default: ./{DEFAULT_OUTPUT})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    output = args.output or Path.cwd() / DEFAULT_OUTPUT

    try:
        convert(args.tsv_path, output)
    except LegalCodeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: Cannot write {output}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
