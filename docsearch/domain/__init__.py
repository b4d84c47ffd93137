"""Domain layer: hits, lookup keys and exceptions."""
