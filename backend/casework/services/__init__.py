"""Service Layer - lifecycle rules shared by Case and Task.

Invariants:
    - Services reach storage only through EntityRepository
    - Not-found is a return value (None / False), never an exception
"""
