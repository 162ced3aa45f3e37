"""Data sources the search layer reads from."""
