"""Exercise Tracker API."""
