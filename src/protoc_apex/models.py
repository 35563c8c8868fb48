from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


DEFAULT_ENDPOINT_BASE = "https://example.com"


class FieldKind(IntEnum):
    """Field kinds, numbered as in descriptor.proto's FieldDescriptorProto.Type."""

    DOUBLE = 1
    FLOAT = 2
    INT64 = 3
    UINT64 = 4
    INT32 = 5
    FIXED64 = 6
    FIXED32 = 7
    BOOL = 8
    STRING = 9
    GROUP = 10
    MESSAGE = 11
    BYTES = 12
    UINT32 = 13
    ENUM = 14
    SFIXED32 = 15
    SFIXED64 = 16
    SINT32 = 17
    SINT64 = 18


@dataclass
class FieldDescriptor:
    name: str
    kind: FieldKind
    # Fully-qualified reference such as ".pkg.Foo"; only set for MESSAGE/ENUM.
    type_name: str = ""
    is_repeated: bool = False


@dataclass
class MessageDescriptor:
    name: str
    fields: List[FieldDescriptor] = field(default_factory=list)
    nested_messages: List[MessageDescriptor] = field(default_factory=list)


@dataclass
class HttpRule:
    get: str = ""
    post: str = ""
    put: str = ""
    patch: str = ""
    delete: str = ""


@dataclass
class MethodDescriptor:
    name: str
    input_type: str
    output_type: str
    http_rule: Optional[HttpRule] = None


@dataclass
class ServiceDescriptor:
    name: str
    methods: List[MethodDescriptor] = field(default_factory=list)


@dataclass
class SchemaFile:
    name: str
    package: str = ""
    messages: List[MessageDescriptor] = field(default_factory=list)
    services: List[ServiceDescriptor] = field(default_factory=list)


@dataclass
class GenerationRequest:
    files_to_generate: List[str]
    schema_files: List[SchemaFile]
    parameter: str = ""


@dataclass(frozen=True)
class GeneratorOptions:
    extends_message: Optional[str] = None
    extends_service: Optional[str] = None
    endpoint_base: str = DEFAULT_ENDPOINT_BASE


@dataclass
class GeneratedFile:
    name: str
    content: str
