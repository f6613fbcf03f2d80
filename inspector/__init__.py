"""Page Inspector — section text search and container link extraction."""
