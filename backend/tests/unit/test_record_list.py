"""Unit tests for the record-list editor and its shapes."""

import pytest

from cigi_web.application.components.record_list import RecordListEditor, StringListEditor
from cigi_web.application.components.record_shapes import (
    ACHIEVEMENTS,
    ACTIVITIES,
    MORE_ABOUT,
    PROCESS_STEPS,
    TESTIMONIALS,
    get_shape,
    more_about_presets,
)
from cigi_web.domain.entities import AchievementEvent, CommunityActivity, MoreAboutItem, ProcessStep, Testimonial
from cigi_web.domain.exceptions import EntityNotFoundError, InvalidFieldValueError, UnknownFieldError


def _achievements(*titles: str) -> list[AchievementEvent]:
    return [AchievementEvent(title=t) for t in titles]


# ── Add / remove ──


def test_add_appends_default_record_and_expands_it():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A"))
    items = editor.add()

    assert len(items) == 2
    assert items[1].title == ""
    assert items[1].id != items[0].id
    assert editor.expanded_index == 1


def test_add_stops_at_max_items():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A", "B", "C"))
    before = editor.value

    assert not editor.can_add
    assert editor.add() == before
    assert len(editor.value) == 3
    assert editor.counter == "3/3"


def test_max_items_override():
    editor = RecordListEditor(TESTIMONIALS, [], max_items=1)
    editor.add()
    editor.add()
    assert len(editor.value) == 1


def test_remove_reconciles_expanded_index():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A", "B", "C"))

    editor.expanded_index = 2
    editor.remove(0)
    assert editor.expanded_index == 1
    assert [r.title for r in editor.value] == ["B", "C"]

    editor.remove(1)
    assert editor.expanded_index is None


def test_remove_out_of_range_raises():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A"))
    with pytest.raises(IndexError):
        editor.remove(3)


def test_controlled_editor_reports_through_on_change_without_mutating():
    received = []
    original = _achievements("A")
    editor = RecordListEditor(ACHIEVEMENTS, original, on_change=received.append)

    editor.add()

    assert len(received) == 1
    assert len(received[0]) == 2
    assert editor.value == original


# ── Field updates ──


def test_update_field_replaces_record_immutably():
    original = _achievements("A")
    editor = RecordListEditor(ACHIEVEMENTS, original)

    items = editor.update_field(0, "title", "Juara 1")

    assert items[0].title == "Juara 1"
    assert items[0].id == original[0].id
    assert original[0].title == "A"


def test_update_field_at_end_synthesises_one_default():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A"))
    items = editor.update_field(1, "title", "Second")

    assert [r.title for r in items] == ["A", "Second"]


def test_update_field_far_past_end_raises():
    editor = RecordListEditor(ACHIEVEMENTS, [])
    with pytest.raises(IndexError):
        editor.update_field(7, "title", "x")
    with pytest.raises(IndexError):
        editor.update_field(-1, "title", "x")
    assert editor.value == []


def test_update_field_at_end_respects_max_items():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A", "B", "C"))
    with pytest.raises(IndexError):
        editor.update_field(3, "title", "D")
    assert editor.counter == "3/3"


def test_update_unknown_field_raises():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A"))
    with pytest.raises(UnknownFieldError):
        editor.update_field(0, "rating", 3)


def test_testimonial_rating_is_validated():
    editor = RecordListEditor(TESTIMONIALS, [Testimonial(name="Budi")])

    assert editor.update_field(0, "rating", "4")[0].rating == 4
    with pytest.raises(InvalidFieldValueError):
        editor.update_field(0, "rating", 6)


def test_activity_flags_accept_form_strings():
    editor = RecordListEditor(ACTIVITIES, [CommunityActivity(title="Futsal")])

    assert editor.update_field(0, "active", "0")[0].active is False
    assert editor.update_field(0, "featured", "true")[0].featured is True
    assert editor.update_field(0, "max_participants", "")[0].max_participants is None
    with pytest.raises(InvalidFieldValueError):
        editor.update_field(0, "max_participants", "0")


# ── Nested string lists ──


def test_nested_benefits_add_update_remove():
    editor = RecordListEditor(ACTIVITIES, [CommunityActivity(title="Futsal")])

    editor.add_nested(0, "benefits")
    editor.add_nested(0, "benefits")
    editor.update_nested(0, "benefits", 1, "Sehat")
    assert editor.value[0].benefits == ["", "Sehat"]

    editor.remove_nested(0, "benefits", 0)
    assert editor.value[0].benefits == ["Sehat"]


def test_nested_on_scalar_field_raises():
    editor = RecordListEditor(ACTIVITIES, [CommunityActivity(title="Futsal")])
    with pytest.raises(InvalidFieldValueError):
        editor.add_nested(0, "title")


def test_update_nested_out_of_range():
    editor = RecordListEditor(ACTIVITIES, [CommunityActivity(title="Futsal")])
    with pytest.raises(IndexError):
        editor.update_nested(0, "benefits", 0, "x")


# ── Drag reorder through the editor ──


def test_drag_reorder_emits_through_editor():
    editor = RecordListEditor(ACHIEVEMENTS, _achievements("A", "B", "C"))

    editor.drag.drag_start(0)
    editor.drag.drop(editor.value, 2)

    assert [r.title for r in editor.value] == ["B", "C", "A"]


def test_process_steps_are_renumbered_after_reorder():
    steps = [ProcessStep(title=t, order=i) for i, t in enumerate(["Analisis", "Desain", "Build"], start=1)]
    editor = RecordListEditor(PROCESS_STEPS, steps)

    editor.drag.drag_start(2)
    editor.drag.drop(editor.value, 0)

    assert [(s.title, s.order) for s in editor.value] == [("Build", 1), ("Analisis", 2), ("Desain", 3)]


def test_process_steps_are_renumbered_after_remove():
    steps = [ProcessStep(title=t, order=i) for i, t in enumerate(["A", "B", "C"], start=1)]
    editor = RecordListEditor(PROCESS_STEPS, steps)

    editor.remove(0)

    assert [s.order for s in editor.value] == [1, 2]


# ── Presets ──


def test_more_about_presets_skip_existing_titles_case_insensitively():
    editor = RecordListEditor(MORE_ABOUT, [MoreAboutItem(title="misi", description="x")])
    presets = more_about_presets()

    available = editor.available_presets(presets)
    assert "Misi" not in [p.title for p in available]

    editor.add_preset(presets[0])
    assert len(editor.value) == 1

    editor.add_preset(presets[1])
    assert [r.title for r in editor.value] == ["misi", "Visi"]


def test_presets_get_fresh_ids_each_call():
    first, second = more_about_presets()[0], more_about_presets()[0]
    assert first.id != second.id


# ── Shape helpers ──


def test_blank_detection_uses_blank_fields():
    assert TESTIMONIALS.is_blank(Testimonial(name=" ", content=""))
    assert not TESTIMONIALS.is_blank(Testimonial(name="Budi"))
    assert MORE_ABOUT.is_blank(MoreAboutItem())


def test_from_dict_ignores_unknown_keys_and_stringifies_id():
    record = ACHIEVEMENTS.from_dict({"id": 12, "title": "A", "unknown": True})
    assert record.id == "12"
    assert record.title == "A"


def test_from_dict_generates_id_when_missing():
    record = ACHIEVEMENTS.from_dict({"title": "A", "id": ""})
    assert record.id


def test_get_shape_unknown_raises():
    assert get_shape("events").name == "events"
    with pytest.raises(EntityNotFoundError):
        get_shape("nope")


# ── String lists ──


def test_string_list_editor_operations():
    editor = StringListEditor(["a"], max_items=2)

    editor.add("b")
    editor.add("c")
    assert editor.value == ["a", "b"]

    editor.update(0, "x")
    editor.remove(1)
    assert editor.value == ["x"]

    editor.toggle("x")
    editor.toggle("y")
    assert editor.value == ["y"]


def test_string_list_non_blank():
    assert StringListEditor(["a", " ", ""]).non_blank() == ["a"]
