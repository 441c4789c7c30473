"""Route modules for the inventory API."""
