"""Infrastructure Layer — database sessions, repositories, logging.

Invariants:
    - All IO lives here or in api/; core/ never imports from this package
"""
