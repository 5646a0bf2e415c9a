"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call services; services talk to the record store.  Replacing the
in-memory store with a database only touches ``core.store``.
"""
