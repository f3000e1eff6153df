"""In-memory analytics over a collection of country records."""
