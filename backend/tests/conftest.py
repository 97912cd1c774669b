"""Shared test setup: point the app at a temporary database before it is imported."""

import os
import tempfile

# Use a temporary database for testing
test_db = tempfile.NamedTemporaryFile(suffix='.db', delete=False)
os.environ["DATABASE_URL"] = f"sqlite:///{test_db.name}"

from taxifare.database import DatabaseManager  # noqa: E402

# Create the test database tables
test_db_manager = DatabaseManager(f"sqlite:///{test_db.name}")
