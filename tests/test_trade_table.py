"""Property-based tests for trade table filtering and sorting.

**Feature: trade-journal**
"""

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fxjournal.analytics import (
    DEFAULT_SORT,
    filter_trades,
    sort_trades,
    toggle_sort,
    view_trades,
)
from fxjournal.analytics.table import compare_values
from fxjournal.models import POSITIONS, RESULTS, SORT_KEYS, SortSpec, Trade, TradeFilter

from strategies import PAIRS, trade_lists


def _trade(
    trade_id: str,
    pair: str = "EURUSD",
    position: str = "Buy",
    result: str = "Profit",
    amount: float = 10.0,
    day: int = 1,
) -> Trade:
    return Trade(
        id=trade_id,
        date=date(2024, 5, day),
        currency_pair=pair,
        trade_type="Breakout",
        position=position,
        result=result,
        amount=amount,
    )


class TestFilterPassThrough:
    """
    **Feature: trade-journal, Property 10: Empty Filter Keeps Everything**

    *For any* trades, the default filter and no sort return every trade
    in the original order.
    """

    @given(trades=trade_lists())
    @settings(max_examples=100)
    def test_default_filter_returns_all_in_order(self, trades: list[Trade]):
        assert view_trades(trades, TradeFilter(), None) == trades

    @given(trades=trade_lists())
    @settings(max_examples=30)
    def test_input_not_mutated(self, trades: list[Trade]):
        before = list(trades)
        view_trades(trades, TradeFilter(result="Loss"), SortSpec(key="amount"))
        assert trades == before


class TestFilterAccuracy:
    """
    **Feature: trade-journal, Property 11: Filter Criteria Are ANDed**

    *For any* trades and filter, exactly the trades matching every
    criterion are returned, in their original order.
    """

    @given(
        trades=trade_lists(),
        needle=st.sampled_from(["", "usd", "EUR", "jpy", "xau", "zzz"]),
        position=st.sampled_from(("all",) + POSITIONS),
        result=st.sampled_from(("all",) + RESULTS),
    )
    @settings(max_examples=100)
    def test_filter_matches_predicate(
        self, trades: list[Trade], needle: str, position: str, result: str
    ):
        trade_filter = TradeFilter(currency_pair=needle, position=position, result=result)

        expected = [
            t for t in trades
            if needle.lower() in t.currency_pair.lower()
            and position in ("all", t.position)
            and result in ("all", t.result)
        ]

        assert filter_trades(trades, trade_filter) == expected

    def test_pair_filter_is_case_insensitive(self):
        trades = [_trade("a", pair="EURUSD"), _trade("b", pair="usdjpy"), _trade("c", pair="GBPCHF")]

        matched = filter_trades(trades, TradeFilter(currency_pair="UsD"))

        assert [t.id for t in matched] == ["a", "b"]

    def test_position_and_result_combined(self):
        trades = [
            _trade("a", position="Buy", result="Profit"),
            _trade("b", position="Sell", result="Loss", amount=-5.0),
            _trade("c", position="Sell", result="Profit"),
        ]

        matched = filter_trades(trades, TradeFilter(position="Sell", result="Profit"))

        assert [t.id for t in matched] == ["c"]


class TestSortDirection:
    """
    **Feature: trade-journal, Property 12: Descending Reverses Ascending**

    *For any* trades with distinct amounts, sorting by amount descending
    gives the reverse of sorting ascending.
    """

    @given(
        magnitudes=st.lists(
            st.floats(min_value=0, max_value=1e6, allow_nan=False),
            min_size=0,
            max_size=30,
            unique=True,
        )
    )
    @settings(max_examples=100)
    def test_descending_is_reverse_of_ascending(self, magnitudes: list[float]):
        trades = [_trade(f"t{i}", amount=m) for i, m in enumerate(magnitudes)]

        ascending = sort_trades(trades, SortSpec(key="amount", direction="ascending"))
        descending = sort_trades(trades, SortSpec(key="amount", direction="descending"))

        assert [t.amount for t in ascending] == sorted(magnitudes)
        assert descending == list(reversed(ascending))

    @given(trades=trade_lists(), key=st.sampled_from(SORT_KEYS))
    @settings(max_examples=100)
    def test_sort_is_permutation(self, trades: list[Trade], key: str):
        result = sort_trades(trades, SortSpec(key=key))
        assert sorted(t.id for t in result) == sorted(t.id for t in trades)


class TestSortRules:
    def test_amount_sorted_numerically(self):
        trades = [_trade("a", amount=9.0), _trade("b", amount=100.0), _trade("c", amount=20.0)]

        result = sort_trades(trades, SortSpec(key="amount"))

        assert [t.id for t in result] == ["a", "c", "b"]

    def test_negative_amounts_sorted_numerically(self):
        trades = [
            _trade("a", result="Loss", amount=-5.0),
            _trade("b", result="Loss", amount=-50.0),
            _trade("c", amount=1.0),
        ]

        result = sort_trades(trades, SortSpec(key="amount", direction="descending"))

        assert [t.id for t in result] == ["c", "a", "b"]

    def test_text_sorted(self):
        trades = [_trade("a", pair="GBPUSD"), _trade("b", pair="AUDUSD"), _trade("c", pair="EURUSD")]

        result = sort_trades(trades, SortSpec(key="currency_pair"))

        assert [t.currency_pair for t in result] == ["AUDUSD", "EURUSD", "GBPUSD"]

    def test_dates_sorted_chronologically(self):
        trades = [_trade("a", day=9), _trade("b", day=30), _trade("c", day=10)]

        result = sort_trades(trades, SortSpec(key="date", direction="descending"))

        assert [t.id for t in result] == ["b", "c", "a"]

    def test_sort_is_stable(self):
        trades = [
            _trade("a", pair="EURUSD"),
            _trade("b", pair="AUDUSD"),
            _trade("c", pair="EURUSD"),
            _trade("d", pair="AUDUSD"),
        ]

        ascending = sort_trades(trades, SortSpec(key="currency_pair"))
        descending = sort_trades(trades, SortSpec(key="currency_pair", direction="descending"))

        assert [t.id for t in ascending] == ["b", "d", "a", "c"]
        assert [t.id for t in descending] == ["a", "c", "b", "d"]

    def test_no_sort_keeps_order_and_copies(self):
        trades = [_trade("b"), _trade("a")]

        result = sort_trades(trades, None)

        assert result == trades
        assert result is not trades

    def test_compare_values(self):
        assert compare_values(2, 10) < 0
        assert compare_values(10.5, 2) > 0
        assert compare_values("10", "2") < 0
        assert compare_values("abc", "abc") == 0


class TestSortToggle:
    """
    **Feature: trade-journal, Property 13: Sort Toggle**

    *For any* column, picking the active ascending column flips it to
    descending; anything else sorts ascending.
    """

    @given(key=st.sampled_from(SORT_KEYS))
    @settings(max_examples=20)
    def test_same_key_flips(self, key: str):
        ascending = SortSpec(key=key, direction="ascending")

        descending = toggle_sort(ascending, key)

        assert descending == SortSpec(key=key, direction="descending")
        assert toggle_sort(descending, key) == ascending

    @given(
        current=st.sampled_from(SORT_KEYS),
        direction=st.sampled_from(["ascending", "descending"]),
        picked=st.sampled_from(SORT_KEYS),
    )
    @settings(max_examples=50)
    def test_new_key_resets_to_ascending(self, current: str, direction: str, picked: str):
        if current == picked:
            return
        result = toggle_sort(SortSpec(key=current, direction=direction), picked)
        assert result == SortSpec(key=picked, direction="ascending")

    def test_toggle_from_unsorted(self):
        assert toggle_sort(None, "amount") == SortSpec(key="amount", direction="ascending")

    def test_default_sort_is_newest_first(self):
        assert DEFAULT_SORT == SortSpec(key="date", direction="descending")
        assert toggle_sort(DEFAULT_SORT, "date").direction == "ascending"


@pytest.mark.parametrize("pair", PAIRS)
def test_filter_then_sort(pair: str):
    trades = [
        _trade("a", pair=pair, amount=30.0),
        _trade("b", pair="NZDCAD", amount=5.0),
        _trade("c", pair=pair, amount=10.0),
    ]

    result = view_trades(trades, TradeFilter(currency_pair=pair), SortSpec(key="amount"))

    assert [t.id for t in result] == ["c", "a"]
