"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive the store they work on explicitly, so the in‑memory store
used here can be swapped for a database without changing API
handlers.
"""
