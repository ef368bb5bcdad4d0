"""
Tests for merging used materials and rendering the context block.
"""

from app.services.chat.context import merge_used_materials, render_context
from app.services.chat.models import MaterialData


def titles(materials):
    return [m.title for m in materials]


class TestMergeUsedMaterials:
    def test_adds_selected_material(self, lab_materials):
        used, added = merge_used_materials([], ["lab1"], lab_materials)

        assert titles(used) == ["lab1"]
        assert titles(added) == ["lab1"]

    def test_reselecting_used_title_does_not_duplicate(self, lab_materials):
        used, added = merge_used_materials([lab_materials[0]], ["lab1"], lab_materials)

        assert titles(used) == ["lab1"]
        assert added == []

    def test_empty_selection_adds_nothing(self, lab_materials):
        used, added = merge_used_materials([lab_materials[1]], [], lab_materials)

        assert titles(used) == ["lab2"]
        assert added == []

    def test_new_materials_follow_store_order(self, lab_materials):
        extra = MaterialData(title="lab3", content="C")
        materials = lab_materials + [extra]

        used, _ = merge_used_materials([extra], ["lab2", "lab1", "lab3"], materials)

        assert titles(used) == ["lab3", "lab1", "lab2"]

    def test_unknown_and_partial_titles_are_ignored(self, lab_materials):
        used, added = merge_used_materials([], ["lab", "lab 1", "lab9"], lab_materials)

        assert used == []
        assert added == []

    def test_duplicate_stored_titles_take_first(self):
        materials = [
            MaterialData(id=1, title="notes", content="first"),
            MaterialData(id=2, title="notes", content="second"),
        ]

        used, _ = merge_used_materials([], ["notes"], materials)

        assert [m.content for m in used] == ["first"]

    def test_repeated_used_titles_collapse(self, lab_materials):
        lab1 = lab_materials[0]

        used, added = merge_used_materials([lab1, lab1], ["lab1"], lab_materials)

        assert titles(used) == ["lab1"]
        assert added == []
        assert render_context(used).count("--- lab1 ---") == 1

    def test_input_lists_are_not_modified(self, lab_materials):
        used_before = [lab_materials[0]]

        merge_used_materials(used_before, ["lab2"], lab_materials)

        assert titles(used_before) == ["lab1"]

    def test_used_materials_grow_monotonically(self, lab_materials):
        selections = [["lab1"], [], ["lab1", "lab2"], ["lab2"]]
        used: list[MaterialData] = []

        for selected in selections:
            previous = titles(used)
            used, _ = merge_used_materials(used, selected, lab_materials)
            assert titles(used)[: len(previous)] == previous
            assert len(set(titles(used))) == len(used)

        assert titles(used) == ["lab1", "lab2"]


class TestRenderContext:
    def test_selected_material_only(self, lab_materials):
        used, _ = merge_used_materials([], ["lab1"], lab_materials)

        context = render_context(used)

        assert "lab1" in context
        assert "A" in context
        assert "lab2" not in context

    def test_delimiter_then_content_in_order(self, lab_materials):
        context = render_context(lab_materials)

        assert context == "--- lab1 ---\nA\n\n--- lab2 ---\nB\n"

    def test_empty(self):
        assert render_context([]) == ""
