"""
Domain layer package.

Contains pure business logic: entities, error classes and
port interfaces. No framework imports, no IO, no side effects.
"""
