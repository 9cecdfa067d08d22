"""Database package — declarative base shared by models, migrations and tests."""
