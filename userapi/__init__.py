"""
User API: CRUD over a single "user" resource backed by MongoDB.

Application package root. Hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Creating, reading, updating and deleting user records.

Layers:
    - domain: Entities, ports (ABCs), error taxonomy.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (MongoDB, ObjectId codec) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (error mapping, logging).
"""
