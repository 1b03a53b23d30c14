import logging
from typing import List, Optional

from photoboard.board.intents import Intent, Reload
from photoboard.board.layout import BoardLayoutEngine
from photoboard.board.models import BoardItem
from photoboard.board.sources import PhotoSource
from photoboard.common.models import PhotoRecord
from photoboard.filters import (
    FIELD_WIDGETS,
    STUDENT_VALUES,
    FilterChoices,
    FilterSelection,
    grade_options,
    parse_field,
)
from photoboard.schemas.enum import ChoiceWidget, FilterField

logger = logging.getLogger(__name__)


class PhotoCatalogClient:
    """
    Fetches photo records and hands them to the board.

    ``records`` is the snapshot of the last successful load. Distinct filter
    values are derived from it and may be stale until the next load.
    """

    def __init__(self, source: PhotoSource, engine: Optional[BoardLayoutEngine] = None):
        self.source = source
        self.engine = engine or BoardLayoutEngine()
        self._records: Optional[List[PhotoRecord]] = None

    @property
    def records(self) -> List[PhotoRecord]:
        return list(self._records or [])

    @property
    def loaded(self) -> bool:
        return self._records is not None

    async def load(self, selection: Optional[FilterSelection] = None) -> List[BoardItem]:
        """Fetch records and re-seed the board with them, in source order."""
        # Nothing is touched until the fetch succeeds.
        records = await self.source.list_photos(selection)
        self._records = list(records)
        items = self.engine.seed(self._records)
        logger.info(f"Loaded {len(items)} photos onto the board (filter={selection})")
        return items

    async def distinct_values(self, field: str) -> List[str]:
        """
        Distinct non-empty values of ``field`` in the current snapshot, ascending.

        ``student`` is ordered "true" before "false". If nothing has been loaded
        yet the unfiltered set is fetched for the snapshot; the board is not
        re-seeded by this.
        """
        filter_field = parse_field(field)
        if self._records is None:
            self._records = list(await self.source.list_photos(None))

        values = {r.field_value(filter_field.value) for r in self._records}
        values.discard(None)
        if filter_field is FilterField.STUDENT:
            return [v for v in STUDENT_VALUES if v in values]
        return sorted(values)

    async def filter_choices(self, field: str) -> FilterChoices:
        """Widget and options the host UI shows after the filter field changes."""
        filter_field = parse_field(field)
        widget = FIELD_WIDGETS[filter_field]
        if widget is ChoiceWidget.FIXED_LIST:
            options = grade_options()
        elif widget is ChoiceWidget.YES_NO:
            options = list(STUDENT_VALUES)
        elif widget is ChoiceWidget.DERIVED:
            options = await self.distinct_values(filter_field.value)
        else:
            options = []
        return FilterChoices(field=filter_field, widget=widget, options=options)

    async def dispatch(self, intent: Intent):
        """Route a host UI intent: reloads are awaited, drags go to the engine."""
        if isinstance(intent, Reload):
            return await self.load(intent.selection)
        return self.engine.apply(intent)
