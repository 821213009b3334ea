"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so that the API representation
(camelCase JSON keys, validation rules) does not leak into it.
"""
