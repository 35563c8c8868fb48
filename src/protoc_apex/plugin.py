"""protoc plugin entry point.

Invoked by protoc as ``protoc-gen-apex``::

    protoc --apex_out=extends_message=Base,extends_service=Client:out foo.proto

Reads a CodeGeneratorRequest from stdin and writes a CodeGeneratorResponse to
stdout. stdout carries only the binary response; diagnostics go to stderr.
"""

from __future__ import annotations

import sys
from typing import List

from google.protobuf.compiler import plugin_pb2

from protoc_apex.descriptor_loader import decode_request, load_request
from protoc_apex.driver import generate
from protoc_apex.errors import GeneratorError
from protoc_apex.models import GeneratedFile

PLUGIN_NAME = "protoc-gen-apex"


def build_response(files: List[GeneratedFile]) -> plugin_pb2.CodeGeneratorResponse:
    response = plugin_pb2.CodeGeneratorResponse()
    # proto3 `optional` fields map like any other field.
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
    for generated in files:
        response_file = response.file.add()
        response_file.name = generated.name
        response_file.content = generated.content
    return response


def run_plugin(payload: bytes) -> bytes:
    """Turn a serialized request into a serialized response."""
    request = load_request(decode_request(payload))
    response = build_response(generate(request))
    return response.SerializeToString()


def plugin_main():
    try:
        output = run_plugin(sys.stdin.buffer.read())
    except GeneratorError as error:
        print(f"{PLUGIN_NAME}: {error}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()


if __name__ == "__main__":
    plugin_main()
