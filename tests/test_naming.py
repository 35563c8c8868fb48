from protoc_apex.naming import unqualify


class TestUnqualify:
    def test_strips_package_prefix(self):
        assert unqualify(".pkg.HelloRequest", "pkg") == "HelloRequest"

    def test_dotted_package(self):
        assert unqualify(".com.example.v1.User", "com.example.v1") == "User"

    def test_nested_type(self):
        assert unqualify(".pkg.Outer.Inner", "pkg") == "Outer.Inner"

    def test_other_package_unchanged(self):
        assert unqualify(".other.Thing", "pkg") == ".other.Thing"

    def test_short_name_unchanged(self):
        assert unqualify("Thing", "pkg") == "Thing"

    def test_package_prefix_of_longer_package_unchanged(self):
        """'.pkg.' must match as a whole segment, not a prefix of '.pkgx.'."""
        assert unqualify(".pkgx.Thing", "pkg") == ".pkgx.Thing"

    def test_idempotent(self):
        for ref in [".pkg.A", ".pkg.A.B", ".other.C", "D"]:
            once = unqualify(ref, "pkg")
            assert unqualify(once, "pkg") == once

    def test_empty_package_leaves_reference_alone(self):
        assert unqualify(".Thing", "") == ".Thing"
