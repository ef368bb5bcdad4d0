"""
Context Assembler

Merges newly selected materials into the conversation's used materials and
renders the whole set as the context block for the final answer.
"""

from app.services.chat.models import MaterialData


def merge_used_materials(
    used: list[MaterialData],
    selected_titles: list[str],
    materials: list[MaterialData],
) -> tuple[list[MaterialData], list[MaterialData]]:
    """
    Append selected materials that are not used yet.

    Args:
        used: Materials already surfaced in this conversation (not modified)
        selected_titles: Titles picked by the selector
        materials: Every available material

    Returns:
        Tuple of (used materials after this turn, materials added this turn).
        Repeated titles in ``used`` keep only their first entry.
        New materials keep their order in ``materials``. Titles are matched
        by exact equality; when several materials share a title only the
        first one is taken.
    """
    wanted = set(selected_titles)
    seen: set[str] = set()

    kept: list[MaterialData] = []
    for material in used:
        if material.title not in seen:
            kept.append(material)
            seen.add(material.title)

    added: list[MaterialData] = []
    for material in materials:
        if material.title in wanted and material.title not in seen:
            added.append(material)
            seen.add(material.title)

    return kept + added, added


def render_material(material: MaterialData) -> str:
    return f"--- {material.title} ---\n{material.content}\n"


def render_context(used: list[MaterialData]) -> str:
    """Render materials in order, each as a title delimiter line followed by its content."""
    return "\n".join(render_material(m) for m in used)
