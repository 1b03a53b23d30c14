from enum import Enum


class Grade(str, Enum):
    FRESHMAN = "Freshman"
    SOPHOMORE = "Sophomore"
    JUNIOR = "Junior"
    SENIOR = "Senior"


class FilterField(str, Enum):
    DATE = "date"
    GRADE = "grade"
    ORDER = "order"
    STUDENT = "student"


class ChoiceWidget(str, Enum):
    DATE_PICKER = "date-picker"
    FIXED_LIST = "fixed-list"
    YES_NO = "yes-no"
    DERIVED = "derived"
