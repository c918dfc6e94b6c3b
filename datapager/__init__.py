"""Page raw SQL collection queries with layered pagination policies."""
