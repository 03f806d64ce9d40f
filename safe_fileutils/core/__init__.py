"""File-system primitives: readability gates, stream copies and archive extraction."""
