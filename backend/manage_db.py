#!/usr/bin/env python3
"""
Database management utility for the taxi fare estimator.

Usage:
    python manage_db.py init      - Create the database tables
    python manage_db.py show      - Show tariffs and estimation settings
    python manage_db.py notes     - Show stored notes
    python manage_db.py reset     - Delete the database and all notes
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from taxifare.config import settings
from taxifare.database import DatabaseManager
from taxifare.services.notes import NoteStore, NoteFormatError


def init_database():
    """Create the database tables."""
    print("Initializing database...")
    DatabaseManager()
    print("Database initialized successfully!")
    show_tariffs()


def show_tariffs():
    """Display the tariffs and estimation settings."""
    tariffs = settings.get_tariff_tables()

    print("\n" + "="*50)
    print("TARIFFS IN FORCE")
    print("="*50)
    print(f"{'Mode':<10} {'Base fare':<12} {'Per km':<10}")
    print("-"*32)

    for mode, table in sorted(tariffs.items(), key=lambda item: item[0].value):
        print(f"{mode.value:<10} {table.base_fare:<12.2f} {table.per_km_rate:<10.2f}")

    print("-"*32)
    print(f"Total tariffs: {len(tariffs)}")

    print(f"\nAverage driver speed (km/h): {settings.get_avg_speed_kmh()}")
    print(f"Taxi stand: {settings.TAXI_STAND.latitude}, {settings.TAXI_STAND.longitude}")
    print("="*50)


def show_notes():
    """Display the stored notes list."""
    store = NoteStore(DatabaseManager())
    try:
        notes = store.load()
    except NoteFormatError as e:
        print(f"Stored notes could not be decoded: {e}")
        return

    print("\n" + "="*50)
    print(f"STORED NOTES ({settings.NOTES_STORAGE_KEY})")
    print("="*50)
    for note in notes:
        print(f"{note.id}  {note.text}")
    print("-"*30)
    print(f"Total notes: {len(notes)}")


def reset_database():
    """Delete the database and recreate empty tables."""
    confirm = input("Are you sure you want to delete the database and all notes? (yes/no): ")

    if confirm.lower() == 'yes':
        db_path = "./taxifare.db"
        if os.path.exists(db_path):
            os.remove(db_path)
            print("Database deleted.")

        init_database()
        print("Database reset!")
    else:
        print("Reset cancelled.")


def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        return

    command = sys.argv[1].lower()

    commands = {
        'init': init_database,
        'show': show_tariffs,
        'notes': show_notes,
        'reset': reset_database
    }

    if command in commands:
        commands[command]()
    else:
        print(f"Unknown command: {command}")
        print(__doc__)


if __name__ == "__main__":
    main()
