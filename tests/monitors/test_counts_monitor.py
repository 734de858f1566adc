import pytest

from sophon.core.errors import DeliveryError
from sophon.fetch_data.ledger import LedgerFetchError
from sophon.monitors.counts_monitor import CountsReporter


class FakeLedger:
    def __init__(self, counts=None, error=None):
        self.counts = counts
        self.error = error

    async def fetch_ledger_counts(self):
        if self.error:
            raise self.error
        return self.counts


class FakeChannel:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    async def publish(self, msg):
        if self.error:
            raise self.error
        self.sent.append(msg)


@pytest.mark.asyncio
async def test_sends_counts_directly():
    channel = FakeChannel()
    reporter = CountsReporter(FakeLedger([8, 7, 6, 5, 4, 3, 2, 1]), channel, interval_sec=86400)

    assert await reporter.run_once() is True
    assert len(channel.sent) == 1
    assert "lvl0:8" in channel.sent[0]
    assert "lvl7:1" in channel.sent[0]


@pytest.mark.asyncio
async def test_fetch_failure_is_swallowed():
    channel = FakeChannel()
    reporter = CountsReporter(FakeLedger(error=LedgerFetchError("rpc down")), channel, interval_sec=1)

    assert await reporter.run_once() is False
    assert channel.sent == []


@pytest.mark.asyncio
async def test_wrong_number_of_levels_is_a_fetch_failure():
    channel = FakeChannel()
    reporter = CountsReporter(FakeLedger([1, 2, 3]), channel, interval_sec=1)

    assert await reporter.run_once() is False
    assert channel.sent == []


@pytest.mark.asyncio
async def test_delivery_failure_is_swallowed():
    reporter = CountsReporter(FakeLedger([0] * 8), FakeChannel(error=DeliveryError("nope")), interval_sec=1)

    assert await reporter.run_once() is False
