"""Shared utilities."""

from docsearch.shared.utils.text import cut_text, decode_entities

__all__ = ["cut_text", "decode_entities"]
