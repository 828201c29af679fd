"""Validate JSON documents against a registered schema or a schema file."""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from schemacheck.errors import SchemaError, ValidationError  # noqa: E402
from schemacheck.registry import load_schema_file, resolve_schema  # noqa: E402
from schemacheck.schema import Schema  # noqa: E402


def _load_schema(reference: str) -> Schema:
    candidate = Path(reference)
    if candidate.suffix == ".json" and candidate.is_file():
        return load_schema_file(candidate)
    return resolve_schema(reference)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--schema", required=True, help="Registered schema id or path to a schema file")
    parser.add_argument("--path", default="", help="Dotted path of the schema node to validate against")
    parser.add_argument("files", nargs="+", help="JSON documents to validate")
    args = parser.parse_args(argv)

    try:
        schema = _load_schema(args.schema)
        schema.get_node_at_path(args.path)
    except KeyError as exc:
        print(f"Unknown schema: {exc.args[0]}", file=sys.stderr)
        return 2
    except SchemaError as exc:
        print(f"Schema error: {exc}", file=sys.stderr)
        return 2

    bad = 0
    for fn in args.files:
        try:
            text = Path(fn).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Unreadable: {fn} {exc}", file=sys.stderr)
            return 2
        try:
            schema.validate(text, args.path)
        except ValidationError as exc:
            print("Invalid:", fn, exc)
            bad += 1
        except SchemaError as exc:
            print(f"Schema error: {exc}", file=sys.stderr)
            return 2
    print("OK" if bad == 0 else f"{bad} invalid files")
    return 0 if bad == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
