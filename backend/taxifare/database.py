"""Database models and setup for the taxi fare estimation system."""

from sqlalchemy import create_engine, Column, Integer, String, Text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Optional
import os

Base = declarative_base()


class KeyValueDB(Base):
    """Local key-value storage. Each key holds one serialized blob."""
    __tablename__ = "kv_store"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(Text, nullable=False)

    def __repr__(self):
        return f"<KeyValue(key={self.key}, size={len(self.value or '')})>"


class DatabaseManager:
    """Manager class for database operations."""

    def __init__(self, database_url: Optional[str] = None):
        """Initialize database connection."""
        self.database_url = database_url or os.getenv(
            "DATABASE_URL",
            "sqlite:///./taxifare.db"
        )

        # Create engine with appropriate settings for SQLite
        connect_args = {"check_same_thread": False} if "sqlite" in self.database_url else {}
        self.engine = create_engine(self.database_url, connect_args=connect_args)

        # Create session factory
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        # Create tables if they don't exist
        Base.metadata.create_all(bind=self.engine)

    def get_session(self) -> Session:
        """Get a new database session."""
        return self.SessionLocal()

    def get_item(self, key: str) -> Optional[str]:
        """Read the blob stored under a key, or None if the key is unset."""
        session = self.get_session()
        try:
            item = session.query(KeyValueDB).filter_by(key=key).first()
            return item.value if item else None
        finally:
            session.close()

    def set_item(self, key: str, value: str):
        """Store a blob under a key, replacing any previous value."""
        session = self.get_session()
        try:
            item = session.query(KeyValueDB).filter_by(key=key).first()
            if item:
                item.value = value
            else:
                session.add(KeyValueDB(key=key, value=value))
            session.commit()
        finally:
            session.close()

    def remove_item(self, key: str) -> bool:
        """Delete a key. Returns True if it existed."""
        session = self.get_session()
        try:
            deleted = session.query(KeyValueDB).filter_by(key=key).delete()
            session.commit()
            return deleted > 0
        finally:
            session.close()


# Singleton instance
_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    """Get singleton database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager
