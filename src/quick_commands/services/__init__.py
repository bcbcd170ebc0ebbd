"""Import/export services."""
