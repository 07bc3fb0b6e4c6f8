"""
Unit tests for request parsing: filter sets, sort keys, lenient integers.
"""
import datetime as dt

import pytest

from sales_explorer.data.schemas import (
    FilterOptions,
    FilterSet,
    SortKey,
    build_filter_set,
    parse_date,
    parse_int,
    parse_positive_int,
    parse_sort_key,
    split_values,
)


class TestSplitValues:
    def test_comma_separated(self):
        assert split_values("North, South ,East") == ("North", "South", "East")

    @pytest.mark.parametrize("raw", [None, "", ",", " , "])
    def test_absent_and_empty_mean_no_constraint(self, raw):
        assert split_values(raw) == ()

    def test_accepts_iterables(self):
        assert split_values(["A", " B ", ""]) == ("A", "B")


class TestParsers:
    @pytest.mark.parametrize("raw, expected", [
        ("18", 18), (" 25 ", 25), ("18.5", 18), ("25 yrs", 25), (7, 7), ("abc", None), ("", None), (None, None), (True, None),
    ])
    def test_parse_int(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("3", 3), ("0", 10), ("-2", 10), ("x", 10), (None, 10),
    ])
    def test_parse_positive_int_falls_back(self, raw, expected):
        assert parse_positive_int(raw, 10) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("2024-03-10", dt.date(2024, 3, 10)),
        ("2024-03-10T08:00:00", dt.date(2024, 3, 10)),
        (dt.date(2024, 1, 1), dt.date(2024, 1, 1)),
        ("10/03/2024", None),
        ("", None),
        (None, None),
    ])
    def test_parse_date(self, raw, expected):
        assert parse_date(raw) == expected


class TestSortKey:
    def test_absent_defaults_to_date_desc(self):
        assert parse_sort_key(None) is SortKey.DATE_DESC
        assert parse_sort_key("  ") is SortKey.DATE_DESC

    @pytest.mark.parametrize("raw", [k.value for k in SortKey if k is not SortKey.NONE])
    def test_known_keys(self, raw):
        assert parse_sort_key(raw).value == raw

    def test_unrecognized_means_no_sort(self):
        assert parse_sort_key("price_desc") is SortKey.NONE


class TestFilterSet:
    def test_build_from_raw_params(self):
        filters = build_filter_set(
            regions="North,East",
            tags="organic",
            payment_methods="",
            age_min="18",
            age_max="oops",
            date_start="2024-01-01",
            date_end="not-a-date",
        )
        assert filters.regions == ("North", "East")
        assert filters.tags == ("organic",)
        assert filters.payment_methods == ()
        assert filters.age_min == 18
        assert filters.age_max is None
        assert filters.date_start == dt.date(2024, 1, 1)
        assert filters.date_end is None
        assert not filters.is_empty

    def test_all_absent_is_empty(self):
        assert build_filter_set().is_empty
        assert build_filter_set(regions="", tags=",", age_min="", date_end="").is_empty

    def test_age_zero_is_a_constraint(self):
        assert not FilterSet(age_min=0).is_empty


class TestFilterOptions:
    def test_as_dict_uses_wire_names(self):
        options = FilterOptions(payment_methods=["UPI"])
        assert options.as_dict() == {
            "regions": [], "genders": [], "categories": [], "tags": [], "paymentMethods": ["UPI"],
        }
