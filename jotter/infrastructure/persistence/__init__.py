"""Persistence: engine, ORM models, repositories, migrations, and the Store facade."""
