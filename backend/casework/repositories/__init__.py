"""Repository Implementations - SQL (canonical) and in-memory storage backends.

Invariants:
    - Both implementations satisfy core.repository_protocols.EntityRepository
    - Repositories never validate domain rules; they are storage primitives
"""
