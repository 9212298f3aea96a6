"""Security helpers that sit outside request handling."""
