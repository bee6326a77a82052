import logging
from decimal import Decimal

import pytest

from fixtures import make_trade
from settlecash.cmd.cli import sample_trades
from settlecash.dates import DateFormatError
from settlecash.model import Side
from settlecash.reporting import (
    CashFlowAggregator,
    ChronologicalOrderingPolicy,
    EventRecorder,
    LiteralOrderingPolicy,
)

SAMPLE_REPORT = [
    "Outgoing total for 1 Mar 2017 = 1517.40",
    "Outgoing total for 3 Mar 2017 = 4344.00",
    "",
    "Incoming total for 1 Mar 2017 = 729.00",
    "Incoming total for 5 Mar 2017 = 855.00",
]


def _names(trades):
    return [t.counterparty_name for t in trades]


def test_routes_buys_out_and_sells_in():
    agg = CashFlowAggregator()
    buy = make_trade(counterparty_name="B1", side=Side.BUY)
    sell = make_trade(counterparty_name="S1", side=Side.SELL)
    agg.add(buy)
    agg.add(sell)
    assert agg.outgoing == (buy,)
    assert agg.incoming == (sell,)


def test_sequences_are_read_only_views():
    agg = CashFlowAggregator()
    agg.add(make_trade())
    view = agg.outgoing
    assert isinstance(view, tuple)
    agg.add(make_trade(counterparty_name="ANOTHER"))
    assert len(view) == 1
    assert len(agg.outgoing) == 2


def test_default_ordering_is_chronological():
    # "10 Mar 2017" sorts before "9 Mar 2017" as text
    nine = make_trade(counterparty_name="NINE", raw_settlement_date="9 Mar 2017")
    ten = make_trade(counterparty_name="TEN", raw_settlement_date="10 Mar 2017")

    def order(agg):
        agg.add_many([nine, ten])
        return _names(agg.outgoing)

    assert order(CashFlowAggregator()) == ["NINE", "TEN"]
    assert order(CashFlowAggregator(literal_ordering=False)) == ["NINE", "TEN"]
    assert order(CashFlowAggregator(literal_ordering=True)) == ["TEN", "NINE"]


def test_explicit_ordering_wins_over_literal_flag():
    nine = make_trade(counterparty_name="NINE", raw_settlement_date="9 Mar 2017")
    ten = make_trade(counterparty_name="TEN", raw_settlement_date="10 Mar 2017")
    agg = CashFlowAggregator(ordering=LiteralOrderingPolicy(), literal_ordering=False)
    agg.add_many([nine, ten])
    assert _names(agg.outgoing) == ["TEN", "NINE"]

    agg = CashFlowAggregator(
        ordering=ChronologicalOrderingPolicy(), literal_ordering=True
    )
    agg.add_many([nine, ten])
    assert _names(agg.outgoing) == ["NINE", "TEN"]


def test_sample_report_chronological():
    agg = CashFlowAggregator()
    agg.add_many(sample_trades())
    assert _names(agg.outgoing) == ["DEF", "GHI", "XYZ"]
    assert _names(agg.incoming) == ["ABC", "FFO"]
    assert agg.render() == SAMPLE_REPORT


def test_sample_report_literal():
    agg = CashFlowAggregator(literal_ordering=True)
    agg.add_many(sample_trades())
    assert _names(agg.outgoing) == ["GHI", "DEF", "XYZ"]
    assert _names(agg.incoming) == ["ABC", "FFO"]
    assert agg.render() == SAMPLE_REPORT
    assert agg.ordering_events == []


def test_totals_per_side():
    agg = CashFlowAggregator()
    agg.add_many(sample_trades())
    out = agg.totals(Side.BUY)
    assert [(g.date_label, g.total, g.trade_count) for g in out] == [
        ("1 Mar 2017", Decimal("1517.40"), 2),
        ("3 Mar 2017", Decimal("4344.00"), 1),
    ]
    incoming = agg.totals(Side.SELL)
    assert [g.date_label for g in incoming] == ["1 Mar 2017", "5 Mar 2017"]


def test_literal_misordering_is_recorded_and_logged(caplog):
    recorder = EventRecorder()
    agg = CashFlowAggregator(literal_ordering=True, recorder=recorder)
    with caplog.at_level(logging.WARNING, logger="settlecash.reporting.aggregator"):
        agg.add(make_trade(counterparty_name="A", raw_settlement_date="1 Mar 2017"))
        agg.add(make_trade(counterparty_name="B", raw_settlement_date="3 Mar 2017"))
        agg.add(make_trade(counterparty_name="C", raw_settlement_date="2 Mar 2017"))
    assert _names(agg.outgoing) == ["C", "A", "B"]
    assert agg.ordering_events is recorder.events
    assert len(agg.ordering_events) == 1
    assert "Out-of-order settlement" in caplog.text
    assert agg.render()[:3] == [
        "Outgoing total for 2 Mar 2017 = 1.00",
        "Outgoing total for 1 Mar 2017 = 1.00",
        "Outgoing total for 3 Mar 2017 = 1.00",
    ]


def test_chronological_groups_same_dates_together():
    agg = CashFlowAggregator()
    for day in ("1", "3", "1", "3"):
        agg.add(make_trade(raw_settlement_date=f"{day} Mar 2017", units=10))
    assert agg.render() == [
        "Outgoing total for 1 Mar 2017 = 20.00",
        "Outgoing total for 3 Mar 2017 = 20.00",
        "",
        "Incoming total for  = 0.00",
    ]


def test_weekend_adjusted_trades_share_a_group():
    agg = CashFlowAggregator()
    agg.add(make_trade(side=Side.SELL, raw_settlement_date="4 Mar 2017", units=2))
    agg.add(make_trade(side=Side.SELL, raw_settlement_date="5 Mar 2017", units=3))
    agg.add(make_trade(side=Side.SELL, raw_settlement_date="6 Mar 2017", units=5))
    assert agg.render() == [
        "Outgoing total for  = 0.00",
        "",
        "Incoming total for 6 Mar 2017 = 10.00",
    ]


def test_empty_aggregator_renders_zero_total_per_side():
    assert CashFlowAggregator().render() == [
        "Outgoing total for  = 0.00",
        "",
        "Incoming total for  = 0.00",
    ]


def test_large_notional_renders_exactly():
    agg = CashFlowAggregator()
    agg.add(
        make_trade(
            agreed_rate=Decimal("1000000"),
            price_per_unit=Decimal("10000000000"),
            units=10**10,
        )
    )
    agg.add(make_trade(price_per_unit=Decimal("0.01")))
    assert agg.render()[0] == (
        "Outgoing total for 1 Mar 2017 = 100000000000000000000000000.01"
    )


def test_bad_settlement_date_propagates_from_add():
    agg = CashFlowAggregator()
    with pytest.raises(DateFormatError):
        agg.add(make_trade(raw_settlement_date="2017-03-01"))
    assert agg.outgoing == ()
