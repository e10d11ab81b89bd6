"""
Users bounded context: domain layer.

Entities, the error taxonomy shared with the response mapper,
and the storage / identifier ports implemented by infrastructure.
"""
