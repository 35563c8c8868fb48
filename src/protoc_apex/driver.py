from __future__ import annotations

from typing import Dict, List

from protoc_apex.errors import GeneratorError, UnknownFileError
from protoc_apex.generator.message_generator import render_message
from protoc_apex.generator.service_generator import render_service
from protoc_apex.models import (
    GeneratedFile,
    GenerationRequest,
    GeneratorOptions,
    SchemaFile,
)
from protoc_apex.options import parse_options

OUTPUT_EXTENSION = ".cls"


def _generate_file(schema_file: SchemaFile, options: GeneratorOptions) -> List[GeneratedFile]:
    generated: List[GeneratedFile] = []
    for message in schema_file.messages:
        generated.append(GeneratedFile(
            name=f"{message.name}{OUTPUT_EXTENSION}",
            content=render_message(message, schema_file.package, options.extends_message),
        ))
    for service in schema_file.services:
        generated.append(GeneratedFile(
            name=f"{service.name}Service{OUTPUT_EXTENSION}",
            content=render_service(service, schema_file.package, options),
        ))
    return generated


def generate(request: GenerationRequest) -> List[GeneratedFile]:
    """Main pipeline: resolve options, render every requested file, collect output.

    Output is ordered by requested file, then messages before services, each in
    declaration order. Any GeneratorError aborts the whole run.
    """
    files: Dict[str, SchemaFile] = {f.name: f for f in request.schema_files}
    options = parse_options(request.parameter)

    generated: List[GeneratedFile] = []
    for file_name in request.files_to_generate:
        schema_file = files.get(file_name)
        if schema_file is None:
            raise UnknownFileError(
                f"File to generate '{file_name}' is not in the schema set. "
                f"Available files: {sorted(files)}"
            )
        try:
            generated.extend(_generate_file(schema_file, options))
        except GeneratorError as error:
            # Re-raise with the file name, keeping the error kind.
            raise type(error)(f"Error processing '{file_name}': {error}") from error
    return generated
