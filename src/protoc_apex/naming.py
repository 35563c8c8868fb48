from __future__ import annotations


def unqualify(type_ref: str, package_name: str) -> str:
    """Strip the current package from a fully-qualified type reference.

    ".pkg.Foo" -> "Foo", ".pkg.Outer.Inner" -> "Outer.Inner". References to
    other packages are returned unchanged and stay qualified.
    """
    return type_ref.replace(f".{package_name}.", "")
