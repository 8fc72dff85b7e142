"""SQLAlchemy async persistence."""
