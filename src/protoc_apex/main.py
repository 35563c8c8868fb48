from __future__ import annotations

import argparse
import os
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from google.protobuf import descriptor_pb2 as d2

from protoc_apex.descriptor_loader import decode_descriptor_set, load_descriptor_set
from protoc_apex.driver import generate
from protoc_apex.errors import GeneratorError


def _find_proto_files(root: str) -> List[str]:
    files: List[str] = []
    for dirpath, _, filenames in os.walk(root):
        for fn in filenames:
            if fn.lower().endswith(".proto"):
                files.append(os.path.join(dirpath, fn))
    # Sort for deterministic output
    files.sort()
    return files


def build_descriptor_set(proto_paths: List[str], include_dirs: List[str]) -> d2.FileDescriptorSet:
    """Run protoc over the given .proto files and load the resulting descriptor set."""
    includes = [os.path.abspath(d) for d in include_dirs]
    for proto_path in proto_paths:
        includes.append(os.path.dirname(os.path.abspath(proto_path)))

    # de-dup while preserving order
    seen = set()
    inc_args: List[str] = []
    for inc in includes:
        if inc and inc not in seen:
            seen.add(inc)
            inc_args.extend(['-I', inc])

    with tempfile.TemporaryDirectory() as td:
        desc_path = os.path.join(td, 'descriptor_set.pb')
        cmd = ['protoc', '--include_imports', f'--descriptor_set_out={desc_path}'] + inc_args + [os.path.abspath(p) for p in proto_paths]
        try:
            subprocess.run(cmd, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise RuntimeError("'protoc' not found. Please install Protocol Buffers compiler and ensure it is in PATH.") from e
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"protoc failed: {e.stderr.decode('utf-8', errors='ignore')}") from e

        return decode_descriptor_set(Path(desc_path).read_bytes())


def files_for_protos(fds: d2.FileDescriptorSet, proto_paths: List[str]) -> List[str]:
    """Names of the descriptor-set files that correspond to the given .proto paths.

    protoc names files relative to an include dir, so a file matches when its
    name is a path suffix of one of the inputs. Imported dependencies match
    nothing and are not generated.
    """
    targets = [Path(p).resolve().as_posix() for p in proto_paths]
    names: List[str] = []
    for f in fds.file:
        if any(t == f.name or t.endswith("/" + f.name) for t in targets):
            names.append(f.name)
    return names


def run(
    fds: d2.FileDescriptorSet,
    out_dir: str,
    files_to_generate: Optional[List[str]] = None,
    parameter: str = "",
) -> List[str]:
    """Generate classes for a descriptor set and write them under out_dir.

    Returns list of generated file paths.
    """
    request = load_descriptor_set(fds, files_to_generate, parameter)
    generated_files = generate(request)

    os.makedirs(out_dir, exist_ok=True)
    paths: List[str] = []
    for generated in generated_files:
        out_path = os.path.join(out_dir, generated.name)
        Path(out_path).write_text(generated.content, encoding='utf-8')
        paths.append(out_path)
    return paths


def main():
    parser = argparse.ArgumentParser(
        description="Generate Apex classes and HTTP client stubs from .proto files or a descriptor set",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--proto", help="Path to a .proto file or a directory containing .proto files (recursively); requires protoc in PATH")
    source.add_argument("--descriptor-set", help="Path to a FileDescriptorSet written by protoc --descriptor_set_out --include_imports")
    parser.add_argument("-I", "--include", action="append", default=[], help="Extra protoc include directory (with --proto); may be repeated")
    parser.add_argument("--file", action="append", dest="files", help="Name of a file in the descriptor set to generate; may be repeated (default: all input files)")
    parser.add_argument("--parameter", default="", help="Generator parameters, e.g. extends_message=Base,extends_service=ApiClient")
    parser.add_argument("--out", required=True, help="Output directory for generated .cls files")
    args = parser.parse_args()

    files_to_generate: Optional[List[str]] = args.files
    try:
        if args.proto:
            include_dirs = list(args.include)
            if os.path.isdir(args.proto):
                proto_paths = _find_proto_files(args.proto)
                if not proto_paths:
                    print(f"No .proto files found under directory: {args.proto}")
                    return
                include_dirs.append(os.path.abspath(args.proto))
            else:
                proto_paths = [args.proto]
            fds = build_descriptor_set(proto_paths, include_dirs)
            if files_to_generate is None:
                files_to_generate = files_for_protos(fds, proto_paths)
        else:
            fds = decode_descriptor_set(Path(args.descriptor_set).read_bytes())

        generated = run(fds, args.out, files_to_generate, args.parameter)
    except (GeneratorError, RuntimeError, OSError) as error:
        print(f"protoc-apex: {error}", file=sys.stderr)
        sys.exit(1)

    print("Generated:\n" + "\n".join(generated))


if __name__ == "__main__":
    main()
