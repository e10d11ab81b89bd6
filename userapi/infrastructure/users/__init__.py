"""
Infrastructure adapters for the users bounded context.

Each adapter implements a domain port (ABC) on top of
pymongo / bson.
"""
