import datetime as dt

from conftest import make_record
from photoboard.board.models import BoardItem, Viewport
from photoboard.common.models import PhotoRecord


def item_at(x, y, width=240, height=180):
    return BoardItem(photo_id=1, x=x, y=y, width=width, height=height)


def test_viewport_leaves_visible_item_alone():
    viewport = Viewport(width=800, height=600, scroll_x=100, scroll_y=50)

    assert viewport.scroll_into_view(item_at(200, 100)) is False
    assert (viewport.scroll_x, viewport.scroll_y) == (100, 50)


def test_viewport_scrolls_least_distance():
    viewport = Viewport(width=800, height=600, scroll_x=100, scroll_y=50)

    assert viewport.scroll_into_view(item_at(20, 700)) is True
    # Left edge aligns on the way back, bottom edge aligns on the way down.
    assert (viewport.scroll_x, viewport.scroll_y) == (20, 700 + 180 - 600)


def test_viewport_aligns_oversized_item_to_its_start():
    viewport = Viewport(width=100, height=100)

    viewport.scroll_into_view(item_at(300, 400))

    assert (viewport.scroll_x, viewport.scroll_y) == (300, 400)


def test_field_value_uses_store_representation():
    record = make_record(1, date=dt.date(2024, 5, 2), grade="Senior", order="", student=False)

    assert record.field_value("date") == "2024-05-02"
    assert record.field_value("grade") == "Senior"
    assert record.field_value("order") is None
    assert record.field_value("student") == "false"


def test_from_payload_tolerates_missing_optional_fields():
    record = PhotoRecord.from_payload({"id": "7", "filename": "x.jpg"})

    assert record.id == 7
    assert record.student is False
    assert record.aspect_ratio is None
