"""SQLite-backed implementations."""
