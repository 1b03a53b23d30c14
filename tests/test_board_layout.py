import pytest

from conftest import make_record
from photoboard.board.intents import BeginDrag, EndDrag, Move
from photoboard.board.layout import BoardLayoutEngine
from photoboard.board.models import Viewport
from photoboard.exceptions import ItemNotFoundError


@pytest.fixture
def engine():
    return BoardLayoutEngine()


def positions(engine):
    return [(it.photo_id, it.x, it.y) for it in engine.items]


def test_grid_seeding_wraps_after_four_columns(engine, records):
    engine.seed(records)

    for i, item in enumerate(engine.items):
        assert item.x == 20 + 260 * (i % 4)
        assert item.y == 20 + 260 * (i // 4)
    assert [it.photo_id for it in engine.items] == [r.id for r in records]


def test_seeding_many_rows_grows_bounds_to_cover_them(engine):
    engine.seed([make_record(i) for i in range(1, 14)])

    last = engine.items[-1]
    assert (last.x, last.y) == (20, 800)
    assert engine.bounds.height == last.bottom + 400 == 1440
    assert engine.bounds.width == 1200
    for item in engine.items:
        assert item.right <= engine.bounds.width
        assert item.bottom <= engine.bounds.height

    engine.seed([make_record(i) for i in range(1, 14)])
    assert (engine.bounds.width, engine.bounds.height) == (1200, 1440)


def test_place_defaults_to_seed_position_and_allows_overlap(engine):
    a = engine.place(make_record(1))
    b = engine.place(make_record(2))

    assert (a.x, a.y) == (20, 20)
    assert (b.x, b.y) == (20, 20)
    assert len(engine.items) == 2


def test_place_derives_height_from_aspect_ratio(engine):
    landscape = engine.place(make_record(1, pixel_width=400, pixel_height=300))
    unknown = engine.place(make_record(2))

    assert landscape.width == 240
    assert landscape.height == pytest.approx(180)
    assert unknown.height == 240


def test_place_same_photo_twice_keeps_one_item(engine):
    engine.place(make_record(1), 10, 10)
    engine.place(make_record(1), 50, 60)

    assert positions(engine) == [(1, 50, 60)]


def test_drag_within_bounds_only_moves_the_item(engine, records):
    engine.seed(records[:2])
    before = (engine.bounds.width, engine.bounds.height)

    engine.begin_drag(1, pointer_id=7, pointer_x=100, pointer_y=100)
    adjustments = engine.move(7, 130, 90)
    engine.end_drag(7)

    item = engine.get_item(1)
    assert (item.x, item.y) == (50, 10)
    assert not adjustments[0].changed
    assert (engine.bounds.width, engine.bounds.height) == before
    assert (engine.get_item(2).x, engine.get_item(2).y) == (280, 20)


def test_drag_near_right_edge_grows_width_idempotently(engine):
    item = engine.place(make_record(1), 20, 20)
    engine.begin_drag(1, 1, 0, 0)
    engine.move(1, 900, 0)  # right edge 1160 > 1200 - 100

    assert engine.bounds.width == item.right + 400 == 1560

    adjustment = engine.adjust_bounds(item)
    assert not adjustment.grew_width
    assert engine.bounds.width == 1560


def test_drag_near_bottom_edge_grows_height(engine):
    item = engine.place(make_record(1), 20, 20)
    engine.begin_drag(1, 1, 0, 0)
    engine.move(1, 0, 500)

    assert engine.bounds.height == item.bottom + 400 == 1160


def test_negative_x_shifts_every_item(engine, records):
    engine.seed(records[:3])
    width_before = engine.bounds.width
    others_before = [(it.x, it.y) for it in engine.items[1:]]

    engine.begin_drag(1, 3, 0, 0)
    [adjustment] = engine.move(3, -70, 0)  # item 1 lands at x=-50

    assert adjustment.shift_x == 250
    assert engine.get_item(1).x == 200
    assert [(it.x, it.y) for it in engine.items[1:]] == [(x + 250, y) for x, y in others_before]
    assert engine.bounds.width >= width_before + 250


def test_negative_y_shifts_every_item_down(engine, records):
    engine.seed(records[:2])

    engine.begin_drag(2, 1, 0, 0)
    [adjustment] = engine.move(1, 0, -120)  # y=-100

    assert adjustment.shift_y == 300
    assert engine.get_item(2).y == 200
    assert engine.get_item(1).y == 320
    assert engine.bounds.height >= 800 + 300


def test_growth_uses_position_before_shift(engine):
    # Far left and near the right edge in the same pass: width grows from
    # the pre-shift right edge, then the shift adds its own amount.
    engine.place(make_record(1), 0, 0)
    engine.bounds.width = 100

    engine.begin_drag(1, 1, 0, 0)
    [adjustment] = engine.move(1, -10, 0)

    assert adjustment.grew_width
    assert adjustment.shift_x == 210
    assert engine.bounds.width == (230 + 400) + 210


def test_continuing_a_drag_after_shift_does_not_shift_again(engine):
    engine.place(make_record(1), 20, 20)
    engine.begin_drag(1, 1, 0, 0)
    engine.move(1, -70, 0)
    width = engine.bounds.width

    adjustments = engine.move(1, -70, 0)

    assert engine.get_item(1).x == 200
    assert not adjustments[0].changed
    assert engine.bounds.width == width


def test_shift_all_never_shrinks(engine, records):
    engine.seed(records[:2])
    engine.shift_all(-30, -30)

    assert (engine.bounds.width, engine.bounds.height) == (1200, 800)
    assert engine.get_item(1).x == -10


def test_concurrent_drags_are_independent(engine, records):
    engine.seed(records[:2])
    engine.begin_drag(1, pointer_id=1, pointer_x=0, pointer_y=0)
    engine.begin_drag(2, pointer_id=2, pointer_x=500, pointer_y=500)

    engine.move(1, 10, 10)
    engine.move(2, 520, 540)
    engine.move(1, 30, 5)

    assert (engine.get_item(1).x, engine.get_item(1).y) == (50, 25)
    assert (engine.get_item(2).x, engine.get_item(2).y) == (300, 60)


def test_moves_from_other_pointers_are_ignored(engine):
    engine.place(make_record(1), 20, 20)
    engine.begin_drag(1, 1, 0, 0)

    assert engine.move(99, 500, 500) == []
    assert (engine.get_item(1).x, engine.get_item(1).y) == (20, 20)


def test_only_the_capturing_pointer_ends_the_drag(engine):
    engine.place(make_record(1))
    engine.begin_drag(1, 1, 0, 0)

    assert engine.end_drag(2) is False
    assert engine.dragging(1)
    assert engine.end_drag(1) is True
    assert not engine.dragging(1)
    assert engine.move(1, 100, 100) == []


def test_same_pointer_on_new_item_ends_previous_gesture(engine, records):
    engine.seed(records[:2])
    engine.begin_drag(1, 1, 0, 0)
    engine.begin_drag(2, 1, 0, 0)

    assert not engine.dragging(1)
    assert engine.dragging(2)


def test_begin_drag_on_unknown_item_raises(engine):
    with pytest.raises(ItemNotFoundError):
        engine.begin_drag(42, 1, 0, 0)


def test_clear_drops_items_and_sessions_but_keeps_bounds(engine, records):
    engine.seed(records)
    engine.begin_drag(1, 1, 0, 0)
    engine.move(1, 2000, 0)
    width = engine.bounds.width

    engine.clear()

    assert engine.items == []
    assert engine.state.sessions == {}
    assert engine.bounds.width == width


def test_adjustment_scrolls_viewport_to_item():
    engine = BoardLayoutEngine(viewport=Viewport(width=800, height=600))
    engine.place(make_record(1), 20, 20)

    engine.begin_drag(1, 1, 0, 0)
    [adjustment] = engine.move(1, 1000, 0)

    assert adjustment.scrolled
    assert engine.state.viewport.scroll_x == pytest.approx(1020 + 240 - 800)
    assert engine.state.viewport.scroll_y == 0


def test_apply_routes_drag_intents(engine):
    engine.place(make_record(1), 20, 20)

    engine.apply(BeginDrag(photo_id=1, pointer_id=4, x=0, y=0))
    engine.apply(Move(pointer_id=4, x=5, y=6))
    assert engine.apply(EndDrag(pointer_id=4)) is True
    assert (engine.get_item(1).x, engine.get_item(1).y) == (25, 26)


def test_apply_rejects_unknown_intent(engine):
    with pytest.raises(TypeError):
        engine.apply("drag")
