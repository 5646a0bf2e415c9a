"""Version 1 of the People Management API."""
