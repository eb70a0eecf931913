"""Trade journal: owns the ledger state and keeps it persisted."""

import logging
from typing import Optional

from fxjournal.analytics import (
    aggregate_by_instrument,
    build_balance_curve,
    compute_stats,
    view_trades,
)
from fxjournal.db.store import DataStore
from fxjournal.ledger.state import DEFAULT_INITIAL_CAPITAL, LedgerState
from fxjournal.models import (
    BalancePoint,
    InstrumentPnL,
    LedgerStats,
    SortSpec,
    Trade,
    TradeFilter,
)

logger = logging.getLogger(__name__)


class TradeJournal:
    """Single source of truth for the trade ledger.

    Loads the ledger from a DataStore, replaces it on every mutation and
    writes it back. A failed write is logged and the in-memory state
    stays authoritative. Derived analytics are cached per state object.
    """

    def __init__(
        self,
        data_store: DataStore,
        default_capital: float = DEFAULT_INITIAL_CAPITAL,
    ):
        """Initialize the journal from persisted state.

        Args:
            data_store: DataStore instance for persistence.
            default_capital: Capital to use when none is saved.
        """
        self._data_store = data_store
        self._state = self._load_state(default_capital)
        self._cache: dict[str, object] = {}
        self._cache_state: Optional[LedgerState] = None

    def _load_state(self, default_capital: float) -> LedgerState:
        """Load trades and capital, falling back to defaults."""
        trades = self._data_store.load_trades()
        if trades is None:
            logger.debug("No saved trades, starting with an empty journal")
            trades = []

        capital = self._data_store.load_initial_capital()
        if capital is None:
            capital = default_capital

        try:
            return LedgerState(trades=tuple(trades), initial_capital=capital)
        except ValueError as e:
            # Duplicate trade ids in an otherwise parseable save
            logger.warning("Saved trades are inconsistent, starting empty: %s", e)
            return LedgerState(initial_capital=capital)

    @property
    def state(self) -> LedgerState:
        """The current ledger state."""
        return self._state

    @property
    def trades(self) -> tuple[Trade, ...]:
        return self._state.trades

    @property
    def initial_capital(self) -> float:
        return self._state.initial_capital

    # ==================== Mutators ====================

    def add_trade(self, trade: Trade) -> LedgerState:
        """Add a trade and persist the collection.

        Args:
            trade: Trade to add.

        Returns:
            The new state.

        Raises:
            ValueError: If the trade id is already in the journal.
        """
        self._state = self._state.with_trade(trade)
        self._persist_trades()
        return self._state

    def delete_trade(self, trade_id: str) -> LedgerState:
        """Delete a trade by id and persist the collection.

        Unknown ids leave the journal unchanged.

        Args:
            trade_id: Id of the trade to delete.

        Returns:
            The new state.
        """
        new_state = self._state.without_trade(trade_id)
        if new_state is self._state:
            logger.debug("Trade %s not found, nothing to delete", trade_id)
            return self._state
        self._state = new_state
        self._persist_trades()
        return self._state

    def update_capital(self, amount: float) -> LedgerState:
        """Replace the initial capital and persist it.

        Args:
            amount: New capital, a positive finite number.

        Returns:
            The new state.

        Raises:
            ValueError: If the amount is not positive and finite.
        """
        self._state = self._state.with_capital(amount)
        if not self._data_store.save_initial_capital(self._state.initial_capital):
            logger.warning("Initial capital was not saved; keeping it for this session")
        return self._state

    def _persist_trades(self) -> None:
        if not self._data_store.save_trades(list(self._state.trades)):
            logger.warning("Trades were not saved; keeping them for this session")

    # ==================== Derived values ====================

    def _derived(self, name: str, compute):
        if self._cache_state is not self._state:
            self._cache = {}
            self._cache_state = self._state
        if name not in self._cache:
            self._cache[name] = compute()
        return self._cache[name]

    def stats(self) -> LedgerStats:
        """Aggregate statistics for the current trades."""
        return self._derived("stats", lambda: compute_stats(self._state.trades))

    def balance_curve(self) -> list[BalancePoint]:
        """Running balance series for the current trades and capital."""
        curve = self._derived(
            "curve",
            lambda: build_balance_curve(self._state.trades, self._state.initial_capital),
        )
        return list(curve)

    def pnl_by_instrument(self) -> dict[str, InstrumentPnL]:
        """Profit and loss per currency pair for the current trades."""
        return dict(
            self._derived("pairs", lambda: aggregate_by_instrument(self._state.trades))
        )

    def view(
        self,
        trade_filter: Optional[TradeFilter] = None,
        sort_spec: Optional[SortSpec] = None,
    ) -> list[Trade]:
        """Filtered and sorted trades for the trade table."""
        return view_trades(self._state.trades, trade_filter, sort_spec)
