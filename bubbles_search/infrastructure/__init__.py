"""Infrastructure: persistence, caches and security adapters."""
