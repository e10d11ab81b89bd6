"""
Shared module package.

Contains cross-cutting concerns:
- Error classification and HTTP response mapping
- Logging configuration
"""
