"""Database Infrastructure: SQLAlchemy declarative base shared by models and migrations."""
