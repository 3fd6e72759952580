"""Infrastructure: persistence (SQLAlchemy/PostgreSQL) and security (JWT)."""
