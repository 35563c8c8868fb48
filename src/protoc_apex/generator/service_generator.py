from __future__ import annotations

from typing import Dict, List

from protoc_apex.errors import UnresolvedHttpRuleError
from protoc_apex.generator.template_env import render_template
from protoc_apex.http_rule import resolve_http_rule
from protoc_apex.models import GeneratorOptions, ServiceDescriptor
from protoc_apex.naming import unqualify

# Callout timeout baked into the generated call() helper.
CALLOUT_TIMEOUT_MS = 60000


def _build_methods(service: ServiceDescriptor, package_name: str) -> List[Dict]:
    """Collect template data for every HTTP-bound method.

    Methods without a google.api.http annotation are left out of the client.
    """
    methods = []
    for method in service.methods:
        if method.http_rule is None:
            continue
        try:
            http_method, path = resolve_http_rule(method.http_rule)
        except UnresolvedHttpRuleError as e:
            raise UnresolvedHttpRuleError(
                f"Method '{service.name}.{method.name}': {e}"
            ) from e
        methods.append({
            "name": method.name,
            "http_method": http_method,
            "path": path,
            "input_type": unqualify(method.input_type, package_name),
            "output_type": unqualify(method.output_type, package_name),
        })
    return methods


def render_service(
    service: ServiceDescriptor,
    package_name: str,
    options: GeneratorOptions,
) -> str:
    """Render the `<Name>Service` HTTP client class for a service."""
    return render_template(
        "service.cls.j2",
        name=service.name,
        extends=options.extends_service,
        methods=_build_methods(service, package_name),
        endpoint_base=options.endpoint_base,
        timeout_ms=CALLOUT_TIMEOUT_MS,
    )
