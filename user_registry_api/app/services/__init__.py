"""
Service layer abstraction.

Each service encapsulates business logic for a domain and operates on
a store object handed to it, so handlers never touch records directly.
"""
