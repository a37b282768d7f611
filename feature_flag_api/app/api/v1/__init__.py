"""Version 1 of the Feature Flag Service API."""
