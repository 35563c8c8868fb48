from __future__ import annotations

from typing import Dict, FrozenSet

from protoc_apex.models import FieldDescriptor, FieldKind
from protoc_apex.naming import unqualify

# Proto scalar kind -> Apex type
SCALAR_TYPE_MAP: Dict[FieldKind, str] = {
    FieldKind.STRING: "String",
    FieldKind.INT32: "Integer",
    FieldKind.INT64: "Integer",
    FieldKind.UINT32: "Integer",
    FieldKind.UINT64: "Integer",
    FieldKind.SINT32: "Integer",
    FieldKind.SINT64: "Integer",
    FieldKind.BOOL: "Boolean",
    FieldKind.FLOAT: "Double",
    FieldKind.DOUBLE: "Double",
}

# Kinds rendered as the UNKNOWN_TYPE placeholder. Generated code using them
# will not compile, but generation carries on.
UNSUPPORTED_KINDS: FrozenSet[FieldKind] = frozenset({
    FieldKind.ENUM,
    FieldKind.BYTES,
    FieldKind.GROUP,
    FieldKind.FIXED32,
    FieldKind.FIXED64,
    FieldKind.SFIXED32,
    FieldKind.SFIXED64,
})

UNKNOWN_TYPE = "unknown"


def _base_type(field: FieldDescriptor, package_name: str) -> str:
    if field.kind == FieldKind.MESSAGE:
        return unqualify(field.type_name, package_name)
    return SCALAR_TYPE_MAP.get(field.kind, UNKNOWN_TYPE)


def map_type(field: FieldDescriptor, package_name: str) -> str:
    """Return the Apex property type for a field, List<T> when repeated."""
    base = _base_type(field, package_name)
    if field.is_repeated:
        return f"List<{base}>"
    return base
