"""Documentation search: autocomplete suggestions and shareable doc references."""

__version__ = "1.0.0"
