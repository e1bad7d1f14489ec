"""Infrastructure adapters - HTTP clients for the external lookups."""
