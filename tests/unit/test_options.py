"""
Unit tests for filter-option derivation.
"""
from sales_explorer.analytics.options import derive_options
from sales_explorer.data.normalize import records_to_frame


class TestDeriveOptions:

    def test_sample_dataset(self, sales_df):
        options = derive_options(sales_df).as_dict()
        assert options == {
            "regions": ["East", "North", "South"],
            "genders": ["Female", "Male"],
            "categories": ["Beauty", "Electronics", "Sports"],
            "tags": ["fitness", "footwear", "organic", "skincare"],
            "paymentMethods": ["Cash", "Credit Card", "Debit Card", "UPI"],
        }

    def test_tags_are_exploded_and_deduplicated(self, make_frame):
        df = make_frame([{"tags": "A, B"}, {"tags": "B"}])
        assert derive_options(df).tags == ["A", "B"]

    def test_no_duplicates_and_sorted(self, make_frame):
        df = make_frame([{"region": r} for r in ["West", "East", "West", "", "North", "East"]])
        regions = derive_options(df).regions
        assert regions == sorted(set(regions))
        assert regions == ["East", "North", "West"]

    def test_empty_values_dropped(self, make_frame):
        df = make_frame([{"gender": ""}, {}, {"tags": " , "}])
        options = derive_options(df)
        assert options.genders == []
        assert options.tags == []

    def test_empty_dataset(self):
        assert derive_options(records_to_frame([])).as_dict() == {
            "regions": [], "genders": [], "categories": [], "tags": [], "paymentMethods": [],
        }
