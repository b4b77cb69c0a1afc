#!/usr/bin/env python3
"""Sample upload generator.

Writes a directory of JSON files for trying out the json-uploads CLI:
- ``user_<n>.json``: valid user records (name / email / number)
- ``--bad`` adds one file of each rejection kind: empty value, malformed
  JSON, non-object JSON, and a non-JSON extension
"""
from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any

FIRST_NAMES = ["Alice", "Bob", "Chiara", "Dmitri", "Emeka", "Fatima", "Goro", "Hana"]
LAST_NAMES = ["Ito", "Kowalski", "Nguyen", "Okafor", "Silva", "Tanaka", "Weber"]


def generate_user(rng: random.Random) -> dict[str, Any]:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    return {
        "name": f"{first} {last}",
        "email": f"{first.lower()}.{last.lower()}@example.com",
        "number": f"+1-555-{rng.randint(1000, 9999)}",
    }


def write_samples(output: Path, count: int, seed: int, bad: bool) -> list[Path]:
    rng = random.Random(seed)
    output.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for n in range(1, count + 1):
        path = output / f"user_{n}.json"
        path.write_text(json.dumps(generate_user(rng), indent=2), encoding="utf-8")
        written.append(path)

    if bad:
        bad_files = {
            "empty_value.json": json.dumps({"name": "", "email": "x@example.com", "number": "1"}),
            "malformed.json": '{"name": "Broken",',
            "not_object.json": json.dumps(["name", "email"]),
            "notes.txt": "not a json upload",
        }
        for name, text in bad_files.items():
            path = output / name
            path.write_text(text, encoding="utf-8")
            written.append(path)
    return written


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate sample JSON uploads")
    parser.add_argument("output", type=Path, help="Output directory")
    parser.add_argument("--count", type=int, default=5, help="Number of valid user files (default: 5)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--bad", action="store_true", help="Also write one file per rejection kind")
    args = parser.parse_args()

    if args.count < 0:
        print("Error: --count must not be negative", file=sys.stderr)
        return 1

    written = write_samples(args.output, args.count, args.seed, args.bad)
    print(f"Wrote {len(written)} file(s) to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
