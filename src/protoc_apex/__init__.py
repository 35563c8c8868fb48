"""Generate Apex classes and HTTP client stubs from protobuf descriptors."""

__version__ = "0.1.0"
