"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: in-memory and SQL storage.
"""
