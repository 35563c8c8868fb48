import pytest

from protoc_apex.errors import UnresolvedHttpRuleError
from protoc_apex.generator.service_generator import render_service
from protoc_apex.models import (
    GeneratorOptions,
    HttpRule,
    MethodDescriptor,
    ServiceDescriptor,
)


def _make_method(name: str, http_rule=None, input_type: str = ".pkg.HelloRequest",
                 output_type: str = ".pkg.HelloReply") -> MethodDescriptor:
    return MethodDescriptor(
        name=name,
        input_type=input_type,
        output_type=output_type,
        http_rule=http_rule,
    )


def _greeter(*methods) -> ServiceDescriptor:
    return ServiceDescriptor("Greeter", list(methods))


class TestServiceClass:
    def test_get_method(self):
        service = _greeter(_make_method("SayHello", HttpRule(get="/v1/hello")))

        result = render_service(service, "pkg", GeneratorOptions())

        assert result.startswith("class GreeterService {\n")
        assert "public HelloReply SayHello(HelloRequest input) {" in result
        assert "this.call('GET', '/v1/hello', JSON.serialize(input));" in result
        assert "return (HelloReply) JSON.deserializeStrict(res.getBody(), HelloReply.class);" in result
        assert "req.setEndpoint('https://example.com' + path);" in result

    def test_call_helper_boilerplate(self):
        result = render_service(_greeter(), "pkg", GeneratorOptions())

        assert "private HttpResponse call(String method, String path, String requestBody) {" in result
        assert "req.setMethod(method);" in result
        assert "req.setTimeout(60000);" in result
        assert "req.setBody(requestBody);" in result
        assert "HttpResponse res = http.send(req);" in result
        assert result.rstrip().endswith("}")

    def test_401_is_detected_but_not_thrown(self):
        result = render_service(_greeter(), "pkg", GeneratorOptions())

        assert "if (res.getStatusCode() == 401) {" in result
        assert "// throw new Exception(res.getStatus());" in result
        assert "\n            throw " not in result

    def test_endpoint_base_from_options(self):
        options = GeneratorOptions(endpoint_base="https://api.internal")
        result = render_service(_greeter(), "pkg", options)
        assert "req.setEndpoint('https://api.internal' + path);" in result

    def test_other_package_types_stay_qualified(self):
        method = _make_method(
            "Ping", HttpRule(post="/v1/ping"),
            input_type=".google.protobuf.Empty", output_type=".pkg.Pong",
        )
        result = render_service(_greeter(method), "pkg", GeneratorOptions())
        assert "public Pong Ping(.google.protobuf.Empty input) {" in result


class TestExtends:
    def test_extends_service(self):
        result = render_service(_greeter(), "pkg", GeneratorOptions(extends_service="ApiClient"))
        assert result.startswith("class GreeterService extends ApiClient {\n")

    def test_extends_message_does_not_apply(self):
        result = render_service(_greeter(), "pkg", GeneratorOptions(extends_message="BaseDto"))
        assert "extends" not in result


class TestMethodSelection:
    def test_unbound_method_omitted(self):
        service = _greeter(
            _make_method("Internal"),
            _make_method("SayHello", HttpRule(get="/v1/hello")),
        )

        result = render_service(service, "pkg", GeneratorOptions())

        assert "Internal" not in result
        assert "public HelloReply SayHello(HelloRequest input) {" in result

    def test_methods_in_declaration_order(self):
        service = _greeter(
            _make_method("Zed", HttpRule(delete="/z")),
            _make_method("Alpha", HttpRule(post="/a")),
            _make_method("Mid", HttpRule(put="/m")),
        )

        result = render_service(service, "pkg", GeneratorOptions())

        positions = [result.index(f" {name}(") for name in ("Zed", "Alpha", "Mid")]
        assert positions == sorted(positions)
        assert "this.call('DELETE', '/z'" in result
        assert "this.call('POST', '/a'" in result
        assert "this.call('PUT', '/m'" in result

    @pytest.mark.parametrize("rule,verb,path", [
        (HttpRule(post="/v1/items"), "POST", "/v1/items"),
        (HttpRule(patch="/v1/items/{id}"), "PATCH", "/v1/items/{id}"),
        (HttpRule(put="/v1/items/{id}"), "PUT", "/v1/items/{id}"),
        (HttpRule(delete="/v1/items/{id}"), "DELETE", "/v1/items/{id}"),
    ])
    def test_each_verb(self, rule, verb, path):
        result = render_service(_greeter(_make_method("Do", rule)), "pkg", GeneratorOptions())
        assert f"this.call('{verb}', '{path}', JSON.serialize(input));" in result

    def test_annotation_without_path_raises(self):
        service = _greeter(_make_method("Broken", HttpRule()))

        with pytest.raises(UnresolvedHttpRuleError, match="Greeter.Broken"):
            render_service(service, "pkg", GeneratorOptions())
