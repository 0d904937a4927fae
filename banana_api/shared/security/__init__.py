"""
Security package.

Policy loading, header composition, origin checks, session tokens,
the security middleware and rate limiting.
"""
