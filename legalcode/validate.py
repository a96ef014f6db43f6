"""
Validation utilities for checking a converted registry JSON.

Usage:
    python -m legalcode.validate summary legal-code.json
    python -m legalcode.validate spot-check 1111 legal-code.json
    python -m legalcode.validate anomalies legal-code.json
"""

import argparse
import json
from collections import Counter
from pathlib import Path

from .schema.legal_code import LEVELS, AdministrativeArea, remove_tail_code


# Name suffixes normally seen at each level
EXPECTED_TYPES = {
    "city": {"시", "도"},
    "district": {"시", "군", "구"},
    "town": {"읍", "면", "동", "가", "로"},
    "village": {"리"},
}


def load_areas(json_file: Path) -> list[AdministrativeArea]:
    """Load a converted JSON file back into records."""
    if not json_file.exists():
        raise FileNotFoundError(f"JSON file not found: {json_file}")

    with open(json_file, encoding="utf-8") as f:
        return [AdministrativeArea.model_validate(item) for item in json.load(f)]


def summary_stats(areas: list[AdministrativeArea]) -> dict:
    """Print and return summary counts."""
    print(f"\n{'='*60}")
    print("Summary Statistics")
    print(f"{'='*60}\n")

    alive = sum(1 for a in areas if a.is_alive)
    by_level = Counter(a.level for a in areas)
    by_type = Counter(a.type for a in areas)

    print(f"Total records: {len(areas)}")
    print(f"  existing:  {alive}")
    print(f"  abolished: {len(areas) - alive}")

    print("\nBy level:")
    for level in LEVELS:
        print(f"  {level:9} {by_level.get(level, 0):6}")

    print("\nBy type:")
    for unit_type, count in by_type.most_common():
        print(f"  {unit_type}  {count:6}")

    print()

    return {
        "total": len(areas),
        "alive": alive,
        "abolished": len(areas) - alive,
        "by_level": dict(by_level),
        "by_type": dict(by_type),
    }


def spot_check(areas: list[AdministrativeArea], code: str) -> list[AdministrativeArea]:
    """Print the area with the given code and everything nested under it."""
    prefix = remove_tail_code(code.ljust(10, "0"))
    print(f"\n{'='*60}")
    print(f"Spot Check: {prefix}")
    print(f"{'='*60}\n")

    matches = [a for a in areas if a.full_code.startswith(prefix)]

    if not matches:
        print(f"No areas found under code {prefix}")
        return matches

    for area in matches:
        status = "존재" if area.is_alive else "폐지"
        indent = "  " * LEVELS.index(area.level)
        print(f"{indent}{area.full_code}  {area.name} ({area.type}) [{status}]")

    print(f"\n{len(matches)} areas")
    return matches


def find_anomalies(areas: list[AdministrativeArea]) -> list[str]:
    """Look for records that the suffix and structure disagree on."""
    print(f"\n{'='*60}")
    print("Anomaly Detection")
    print(f"{'='*60}\n")

    issues = []

    counts = Counter(a.full_code for a in areas)
    for code, count in sorted(counts.items()):
        if count > 1:
            issues.append(f"{code}: appears {count} times")

    for area in areas:
        if area.type not in EXPECTED_TYPES[area.level]:
            issues.append(f"{area.full_code} {area.full_name}: type '{area.type}' unusual for {area.level}")
        if " " in area.name:
            issues.append(f"{area.full_code} {area.full_name}: name spans several units '{area.name}'")

    if issues:
        print("Potential issues found:")
        for issue in issues[:20]:
            print(f"  ⚠ {issue}")
        if len(issues) > 20:
            print(f"  ... and {len(issues) - 20} more")
    else:
        print("✓ No anomalies detected")

    print()
    return issues


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Validate converted legal district code JSON")
    subparsers = parser.add_subparsers(dest="command")

    p_summary = subparsers.add_parser("summary", help="Show summary statistics")
    p_summary.add_argument("json_file", type=Path, help="Converted JSON file")

    p_spot = subparsers.add_parser("spot-check", help="Show an area and its sub-areas")
    p_spot.add_argument("code", help="Full or shortened code, e.g. 1111")
    p_spot.add_argument("json_file", type=Path)

    p_anom = subparsers.add_parser("anomalies", help="Report suspicious records")
    p_anom.add_argument("json_file", type=Path)

    args = parser.parse_args(argv)

    if args.command == "summary":
        summary_stats(load_areas(args.json_file))

    elif args.command == "spot-check":
        spot_check(load_areas(args.json_file), args.code)

    elif args.command == "anomalies":
        find_anomalies(load_areas(args.json_file))

    else:
        parser.print_help()


if __name__ == "__main__":
    main()
