"""Infrastructure: Redis cache and Algolia search client."""
