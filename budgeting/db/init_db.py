"""
Database initialization script.
"""
from budgeting.db.session import init_db

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
