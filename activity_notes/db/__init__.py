"""Database Package — SQLAlchemy declarative Base shared by all models.

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead);
      engines and sessions live in infrastructure/database.py
"""
