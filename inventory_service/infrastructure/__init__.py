"""Infrastructure: database pool, blob storage, logging setup."""
