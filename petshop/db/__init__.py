"""Database base metadata and session handle."""
