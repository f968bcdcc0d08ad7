from datetime import datetime, timedelta, timezone

import pytest

from infrastructure.utilities import string_utils


def test_from_integer() -> None:
    assert string_utils.from_integer(0) == "0"
    assert string_utils.from_integer(-42) == "-42"
    assert string_utils.from_integer(2**40) == "1099511627776"


def test_from_boolean() -> None:
    assert string_utils.from_boolean(True) == "true"
    assert string_utils.from_boolean(False) == "false"


@pytest.mark.parametrize("name", ["from_long", "from_double"])
def test_only_used_conversions_are_exposed(name) -> None:
    assert not hasattr(string_utils, name)


def test_from_date_converts_to_utc() -> None:
    value = datetime(2016, 1, 2, 5, 4, 3, 999999, tzinfo=timezone(timedelta(hours=2)))

    assert string_utils.from_date(value) == "2016-01-02T03:04:03.999Z"


def test_from_date_naive_is_utc() -> None:
    assert string_utils.from_date(datetime(2016, 1, 2)) == "2016-01-02T00:00:00.000Z"
