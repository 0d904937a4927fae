"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Security policy, headers and middleware
- Rate limiting
- Logging configuration
"""
