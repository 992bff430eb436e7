"""
Service layer abstraction.

Each service encapsulates the operations for a domain.  Services work
against a store object handed to them at construction, so the
in‑memory collection used here could be swapped for a database
without changing the API handlers.
"""
