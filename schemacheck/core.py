"""Type dispatch: the recursion point of the validator."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from .errors import SchemaError, ValidationError
from .paths import SchemaNode
from .validators import TYPE_VALIDATORS


def candidate_types(node: SchemaNode, path: str = "") -> List[str]:
    """Return the ordered type names ``node`` allows, defaulting to ``any``."""
    if not isinstance(node, Mapping):
        raise SchemaError(f"Schema node must be an object, got {node!r}", path)
    declared = node.get("type")
    if declared is None:
        return ["any"]
    if isinstance(declared, str):
        names = [declared]
    elif isinstance(declared, list) and declared and all(isinstance(n, str) for n in declared):
        names = list(declared)
    else:
        raise SchemaError(f"'type' must be a type name or a list of type names, got {declared!r}", path)
    for name in names:
        if name not in TYPE_VALIDATORS:
            raise SchemaError(f"Unknown type '{name}'", path)
    return names


def check_value(value: Any, node: SchemaNode, path: str = "") -> Optional[ValidationError]:
    """Validate ``value`` against ``node``.

    Candidate types are tried in declared order and the first one that
    accepts the value wins. When a single type is declared its error is
    returned as is; when several are declared and all reject the value, one
    error listing each attempt is returned. Schema defects raise
    :class:`SchemaError` and are never retried.
    """
    names = candidate_types(node, path)
    failures: List[Tuple[str, ValidationError]] = []
    for name in names:
        error = TYPE_VALIDATORS[name](value, node, path)
        if error is None:
            return None
        failures.append((name, error))

    if len(failures) == 1:
        return failures[0][1]
    reasons = "; ".join(f"{name}: {error.message}" for name, error in failures)
    return ValidationError(
        path,
        f"value does not match any of the types [{', '.join(names)}] ({reasons})",
        failures,
    )


__all__ = ["candidate_types", "check_value"]
