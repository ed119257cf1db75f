"""Configuration, rule selection and .proto file discovery for Protocol Buffer linting."""

__version__ = "0.1.0"