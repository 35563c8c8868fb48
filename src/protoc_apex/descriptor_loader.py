"""Map protoc's descriptor protos into the simple protoc_apex model."""

from __future__ import annotations

from typing import Iterable, List, Optional

# Importing annotations_pb2 registers the google.api.http extension, so method
# options parsed after this point expose it through Extensions[].
from google.api import annotations_pb2
from google.protobuf import descriptor_pb2 as d2
from google.protobuf.compiler import plugin_pb2
from google.protobuf.message import DecodeError

from protoc_apex.errors import RequestDecodeError
from protoc_apex.models import (
    FieldDescriptor,
    FieldKind,
    GenerationRequest,
    HttpRule,
    MessageDescriptor,
    MethodDescriptor,
    SchemaFile,
    ServiceDescriptor,
)


def decode_request(payload: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """Parse the serialized CodeGeneratorRequest protoc writes to stdin."""
    request = plugin_pb2.CodeGeneratorRequest()
    try:
        request.ParseFromString(payload)
    except DecodeError as e:
        raise RequestDecodeError(f"Malformed CodeGeneratorRequest: {e}") from e
    return request


def decode_descriptor_set(payload: bytes) -> d2.FileDescriptorSet:
    """Parse a serialized FileDescriptorSet (protoc --descriptor_set_out)."""
    fds = d2.FileDescriptorSet()
    try:
        fds.ParseFromString(payload)
    except DecodeError as e:
        raise RequestDecodeError(f"Malformed FileDescriptorSet: {e}") from e
    return fds


def build_field(fd: d2.FieldDescriptorProto) -> FieldDescriptor:
    return FieldDescriptor(
        name=fd.name,
        kind=FieldKind(fd.type),
        type_name=fd.type_name,
        is_repeated=fd.label == d2.FieldDescriptorProto.LABEL_REPEATED,
    )


def build_message(desc: d2.DescriptorProto) -> MessageDescriptor:
    # Map entry types are kept: protoc declares them as ordinary nested types.
    return MessageDescriptor(
        name=desc.name,
        fields=[build_field(f) for f in desc.field],
        nested_messages=[build_message(n) for n in desc.nested_type],
    )


def build_http_rule(options: d2.MethodOptions) -> Optional[HttpRule]:
    """Return the method's google.api.http binding, or None if it has none."""
    if not options.HasExtension(annotations_pb2.http):
        return None
    rule = options.Extensions[annotations_pb2.http]
    return HttpRule(
        get=rule.get,
        post=rule.post,
        put=rule.put,
        patch=rule.patch,
        delete=rule.delete,
    )


def build_method(method: d2.MethodDescriptorProto) -> MethodDescriptor:
    return MethodDescriptor(
        name=method.name,
        input_type=method.input_type,
        output_type=method.output_type,
        http_rule=build_http_rule(method.options),
    )


def build_file(file_proto: d2.FileDescriptorProto) -> SchemaFile:
    return SchemaFile(
        name=file_proto.name,
        package=file_proto.package,
        messages=[build_message(m) for m in file_proto.message_type],
        services=[
            ServiceDescriptor(
                name=svc.name,
                methods=[build_method(m) for m in svc.method],
            )
            for svc in file_proto.service
        ],
    )


def _build_request(
    file_protos: Iterable[d2.FileDescriptorProto],
    files_to_generate: Iterable[str],
    parameter: str,
) -> GenerationRequest:
    schema_files: List[SchemaFile] = [build_file(f) for f in file_protos]
    return GenerationRequest(
        files_to_generate=list(files_to_generate),
        schema_files=schema_files,
        parameter=parameter,
    )


def load_request(request: plugin_pb2.CodeGeneratorRequest) -> GenerationRequest:
    return _build_request(request.proto_file, request.file_to_generate, request.parameter)


def load_descriptor_set(
    fds: d2.FileDescriptorSet,
    files_to_generate: Optional[List[str]] = None,
    parameter: str = "",
) -> GenerationRequest:
    """Build a request from a descriptor set.

    With no explicit files_to_generate every file in the set is generated.
    """
    if files_to_generate is None:
        files_to_generate = [f.name for f in fds.file]
    return _build_request(fds.file, files_to_generate, parameter)
