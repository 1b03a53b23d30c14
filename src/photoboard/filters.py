from dataclasses import dataclass, field
from typing import Dict, List, Optional

from photoboard.exceptions import InvalidFilterError
from photoboard.schemas.enum import ChoiceWidget, FilterField, Grade

STUDENT_VALUES = ("true", "false")

FIELD_WIDGETS = {
    FilterField.DATE: ChoiceWidget.DATE_PICKER,
    FilterField.GRADE: ChoiceWidget.FIXED_LIST,
    FilterField.STUDENT: ChoiceWidget.YES_NO,
    FilterField.ORDER: ChoiceWidget.DERIVED,
}


def parse_field(name: str) -> FilterField:
    try:
        return FilterField(name)
    except ValueError:
        raise InvalidFilterError(f"Unknown filter field: {name!r}") from None


@dataclass(frozen=True)
class FilterSelection:
    """
    One field/value pair to narrow the listing by.

    A selection without a field or without a value means "any": it is not
    sent to the store at all.
    """

    field: Optional[str] = None
    value: Optional[str] = None

    def __post_init__(self):
        if self.field:
            parse_field(self.field)

    @property
    def is_active(self) -> bool:
        return bool(self.field) and self.value is not None and self.value.strip() != ""

    def as_params(self) -> Dict[str, str]:
        if not self.is_active:
            return {}
        return {"field": self.field, "value": self.value.strip()}


@dataclass(frozen=True)
class FilterChoices:
    field: FilterField
    widget: ChoiceWidget
    options: List[str] = field(default_factory=list)


def grade_options() -> List[str]:
    return [g.value for g in Grade]
