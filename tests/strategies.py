"""Hypothesis strategies shared by the test modules."""

from datetime import date

from hypothesis import strategies as st

from fxjournal.models import POSITIONS, RESULTS, Trade

PAIRS = ["EURUSD", "GBPUSD", "USDJPY", "eurusd", "XAUUSD"]

amounts = st.floats(min_value=0, max_value=100000.0, allow_nan=False, allow_infinity=False)


@st.composite
def trade_strategy(draw, pairs=PAIRS, results=RESULTS):
    """Generate trades whose amount sign matches their result."""
    result = draw(st.sampled_from(results))
    if result == "Breakeven":
        amount = draw(st.floats(min_value=-100.0, max_value=100.0, allow_nan=False))
    else:
        magnitude = draw(amounts)
        amount = -magnitude if result == "Loss" else magnitude

    return Trade(
        id=draw(st.uuids()).hex,
        date=draw(st.dates(min_value=date(2020, 1, 1), max_value=date(2025, 12, 31))),
        currency_pair=draw(st.sampled_from(pairs)),
        trade_type=draw(st.sampled_from(["Breakout", "Reversal", "Scalp"])),
        position=draw(st.sampled_from(POSITIONS)),
        result=result,
        amount=amount,
        notes=draw(st.text(alphabet=st.characters(blacklist_categories=("Cc", "Cs")), max_size=20)),
        emotions=draw(st.sampled_from(["", "calm", "fearful", "greedy"])),
    )


def trade_lists(min_size=0, max_size=40, **kwargs):
    """Lists of trades with unique ids."""
    return st.lists(
        trade_strategy(**kwargs),
        min_size=min_size,
        max_size=max_size,
        unique_by=lambda t: t.id,
    )
