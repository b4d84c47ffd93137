"""Application services: hierarchy formatting and reply rendering."""
