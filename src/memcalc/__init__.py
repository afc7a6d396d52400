"""Desktop calculator with a single memory register."""
