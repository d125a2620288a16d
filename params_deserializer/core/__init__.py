"""Deserialization engine: schema, key formats, root handling."""
