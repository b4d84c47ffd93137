"""Render a hit's documentation hierarchy as a display string.

Compact names label autocomplete choices; verbose names are link text in
the final reply. None means the hit is undisplayable and must be skipped.
"""

from docsearch.domain.hit import Hierarchy
from docsearch.shared.utils.text import decode_entities

COMPACT_SEPARATOR = " > "
ANCHOR_SEPARATOR = " - "


def _decoded(value: str | None) -> str | None:
    if value is None:
        return None
    text = decode_entities(value).strip()
    return text or None


def build_hierarchical_name(hierarchy: Hierarchy, verbose: bool = False) -> str | None:
    """Build a display name from the hierarchy levels.

    Args:
        hierarchy: Hit hierarchy (lvl0 broadest .. lvl3 narrowest).
        verbose: False for a compact breadcrumb of the deepest one or two
            levels ("Section > Subsection"); True for link text preferring
            lvl2, then lvl1, then lvl0, with " - lvl3" appended when set.

    Returns:
        Entity-decoded name, or None when no level is present.
    """
    lvl0, lvl1, lvl2, lvl3 = (_decoded(level) for level in hierarchy.levels())

    if not verbose:
        present = [level for level in (lvl0, lvl1, lvl2, lvl3) if level is not None]
        if not present:
            return None
        return COMPACT_SEPARATOR.join(present[-2:])

    lead = lvl2 or lvl1 or lvl0
    if lead is None:
        return lvl3
    if lvl3 is not None:
        return f"{lead}{ANCHOR_SEPARATOR}{lvl3}"
    return lead
