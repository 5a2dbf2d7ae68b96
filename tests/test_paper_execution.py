"""Unit tests for execution.paper."""

import pytest
from gtrade_sim.core.errors import NotFound
from gtrade_sim.core.types import Direction, OrderStatus, OrderType, PositionStatus
from gtrade_sim.execution.base import OrderRequest
from gtrade_sim.execution.paper import PaperExecutionClient
from gtrade_sim.risk.manager import OrderRiskManager
from gtrade_sim.storage.memory import MemStorage


@pytest.fixture
def storage():
    s = MemStorage()
    btc = s.get_trading_pair_by_symbol("BTC/USD")
    s.update_trading_pair_price(btc.id, 50000.0, 0.0)
    return s


@pytest.fixture
def client(storage):
    return PaperExecutionClient(storage, OrderRiskManager())


def _btc(storage):
    return storage.get_trading_pair_by_symbol("BTC/USD")


def test_create_market_order(client, storage):
    r = client.create_order(OrderRequest(pair_id=_btc(storage).id, direction="long", usd_amount=1000.0, leverage=10))
    assert r.success
    o = r.order
    assert o.status is OrderStatus.PENDING
    assert o.direction is Direction.LONG
    assert o.entry_price == 50000.0
    assert o.size == pytest.approx(0.02)
    assert o.margin_required == pytest.approx(100.0)
    assert o.liquidation_price == pytest.approx(45000.0)
    assert o.collateral_token == "USDC" and o.collateral_index == 3
    assert o.user_id == 1


def test_unknown_pair(client):
    r = client.create_order(OrderRequest(pair_id=9999, direction=Direction.LONG, usd_amount=100.0, leverage=2))
    assert r.success is False
    assert "pair" in r.error.lower()


def test_rejected_order_not_stored(client, storage):
    r = client.create_order(OrderRequest(pair_id=_btc(storage).id, direction="short", usd_amount=100.0, leverage=500))
    assert r.success is False
    assert storage.get_user_orders(1) == []


def test_execute_market_order_opens_position(client, storage):
    created = client.create_order(OrderRequest(
        pair_id=_btc(storage).id, direction="short", usd_amount=1000.0, leverage=10, take_profit=48000.0,
    ))
    r = client.execute_trade(created.order.id)
    assert r.success
    assert r.order.status is OrderStatus.FILLED
    assert r.transaction_hash.startswith("0x") and len(r.transaction_hash) == 66
    p = r.position
    assert p.status is PositionStatus.OPEN
    assert p.margin_used == pytest.approx(100.0)
    assert p.liquidation_price == pytest.approx(55000.0)
    assert p.take_profit == 48000.0
    assert p.pnl == 0.0


def test_execute_limit_order_has_no_position(client, storage):
    created = client.create_order(OrderRequest(
        pair_id=_btc(storage).id, direction="long", usd_amount=500.0, leverage=5,
        type=OrderType.LIMIT, limit_price=40000.0,
    ))
    assert created.order.entry_price == 40000.0
    assert created.order.limit_price == 40000.0
    r = client.execute_trade(created.order.id)
    assert r.success and r.position is None


def test_execute_twice_fails(client, storage):
    created = client.create_order(OrderRequest(pair_id=_btc(storage).id, direction="long", usd_amount=100.0, leverage=2))
    client.execute_trade(created.order.id)
    again = client.execute_trade(created.order.id)
    assert again.success is False
    assert "filled" in again.error


def test_execute_unknown_order(client):
    with pytest.raises(NotFound):
        client.execute_trade(123)


def test_cancel(client, storage):
    created = client.create_order(OrderRequest(pair_id=_btc(storage).id, direction="long", usd_amount=100.0, leverage=2))
    assert client.cancel_order(created.order.id).status is OrderStatus.CANCELLED
    with pytest.raises(ValueError):
        client.cancel_order(created.order.id)


def test_mark_to_market_and_close(client, storage):
    btc = _btc(storage)
    created = client.create_order(OrderRequest(pair_id=btc.id, direction="long", usd_amount=1000.0, leverage=10))
    pos = client.execute_trade(created.order.id).position
    storage.update_trading_pair_price(btc.id, 51000.0, 2.0)
    marked = client.mark_to_market(pos.id)
    # 0.02 BTC * 1000 USD move
    assert marked.pnl == pytest.approx(20.0)
    assert marked.current_price == 51000.0
    assert client.get_open_positions() == [marked]
    storage.update_trading_pair_price(btc.id, 49500.0, 0.0)
    closed = client.close_position(pos.id)
    assert closed.status is PositionStatus.CLOSED
    assert closed.pnl == pytest.approx(-10.0)
    assert client.get_open_positions() == []
    with pytest.raises(ValueError):
        client.close_position(pos.id)


def test_long_liquidated_past_liquidation_price(client, storage):
    btc = _btc(storage)
    created = client.create_order(OrderRequest(pair_id=btc.id, direction="long", usd_amount=1000.0, leverage=10))
    pos = client.execute_trade(created.order.id).position
    storage.update_trading_pair_price(btc.id, 40000.0, -20.0)
    marked = client.mark_to_market(pos.id)
    assert marked.status is PositionStatus.CLOSED
    assert marked.pnl == pytest.approx(-100.0)
    assert marked.current_price == 40000.0
    assert client.get_open_positions() == []
    with pytest.raises(ValueError):
        client.close_position(pos.id)


def test_short_liquidated_at_liquidation_price(client, storage):
    btc = _btc(storage)
    created = client.create_order(OrderRequest(pair_id=btc.id, direction="short", usd_amount=1000.0, leverage=10))
    pos = client.execute_trade(created.order.id).position
    storage.update_trading_pair_price(btc.id, 54999.0, 10.0)
    assert client.mark_to_market(pos.id).status is PositionStatus.OPEN
    storage.update_trading_pair_price(btc.id, 55000.0, 10.0)
    marked = client.mark_to_market(pos.id)
    assert marked.status is PositionStatus.CLOSED
    assert marked.pnl == pytest.approx(-100.0)


def test_fill_notification_sent(storage, monkeypatch):
    sent = []
    monkeypatch.setattr("gtrade_sim.execution.paper.send_telegram", lambda text, token, chat: sent.append(text))
    client = PaperExecutionClient(storage, OrderRiskManager(), telegram_bot_token="t", telegram_chat_id="c")
    created = client.create_order(OrderRequest(pair_id=_btc(storage).id, direction="long", usd_amount=100.0, leverage=2))
    client.execute_trade(created.order.id)
    assert len(sent) == 1
    assert "BTC/USD" in sent[0]
