"""SQLAlchemy repositories."""
