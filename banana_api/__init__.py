"""
BananaEditor API — backend for the BananaEditor / Z-Image prompt site.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - favorites: per-visitor favorite prompts (read and toggle).

Layers:
    - domain: Errors and ports (ABCs).
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Favorite store adapters (memory, SQL).
    - interfaces: FastAPI routers, Pydantic schemas, identity resolution.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
