"""Database Metadata — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - Single Base per process; alembic and create_all read Base.metadata
"""
