"""Command line interface for params_deserializer."""
