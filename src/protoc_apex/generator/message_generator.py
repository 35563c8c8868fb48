from __future__ import annotations

from typing import Dict, List, Optional

from protoc_apex.generator.template_env import render_template
from protoc_apex.models import FieldDescriptor, MessageDescriptor
from protoc_apex.type_mapper import map_type


def _build_properties(fields: List[FieldDescriptor], package_name: str) -> List[Dict]:
    return [
        {"type_name": map_type(f, package_name), "name": f.name}
        for f in fields
    ]


def render_message(
    message: MessageDescriptor,
    package_name: str,
    extends: Optional[str] = None,
) -> str:
    """Render an Apex class for a message.

    Each field becomes a `{ get; set; }` property in declaration order. Direct
    nested messages become nested classes; anything nested deeper than that
    is not emitted.
    """
    nested_classes = [
        {
            "name": nested.name,
            "properties": _build_properties(nested.fields, package_name),
        }
        for nested in message.nested_messages
    ]
    return render_template(
        "message.cls.j2",
        name=message.name,
        extends=extends,
        properties=_build_properties(message.fields, package_name),
        nested_classes=nested_classes,
    )
