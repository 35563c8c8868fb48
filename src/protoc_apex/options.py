"""Generator options carried in the protoc parameter string.

protoc passes everything before the ':' of ``--apex_out=<params>:<dir>`` as a
single comma-separated string of ``key=value`` pairs. Recognized keys:

  - extends_message  base class declared by every generated message class
  - extends_service  base class declared by every generated service client

Anything else is ignored, including the ``extends`` key understood by older
builds of this generator.
"""

from __future__ import annotations

from typing import Dict

from protoc_apex.models import GeneratorOptions

EXTENDS_MESSAGE = "extends_message"
EXTENDS_SERVICE = "extends_service"


def parse_parameter(parameter: str) -> Dict[str, str]:
    """Split a parameter string into key/value pairs.

    Entries without '=' are skipped and later duplicates win.
    """
    values: Dict[str, str] = {}
    for chunk in parameter.split(","):
        key, sep, value = chunk.partition("=")
        if not sep:
            continue
        values[key] = value
    return values


def parse_options(parameter: str) -> GeneratorOptions:
    values = parse_parameter(parameter)
    return GeneratorOptions(
        extends_message=values.get(EXTENDS_MESSAGE) or None,
        extends_service=values.get(EXTENDS_SERVICE) or None,
    )
