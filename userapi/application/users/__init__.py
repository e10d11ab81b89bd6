"""
Application layer for the users bounded context.

Use cases coordinate entities and ports to fulfill the CRUD
operations. No framework or infrastructure imports allowed.
"""
