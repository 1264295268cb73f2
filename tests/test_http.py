"""Tests for Throttler and RetryingFetcher."""

import httpx
import pytest

from claimcheck.errors import TransportError
from claimcheck.http import RetryingFetcher, Throttler


class FakeTime:
    """Manual clock whose sleep advances the clock and records the delay."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def clock(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# -- Throttler tests --


class TestThrottler:
    """Tests for Throttler."""

    def test_interval_is_rounded_up(self) -> None:
        assert Throttler(60).interval_ms == 1000
        assert Throttler(7).interval_ms == 8572
        assert Throttler(10).interval_ms == 6000

    def test_rejects_non_positive_rate(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Throttler(0)

    async def test_first_request_does_not_wait(self, fake_time: FakeTime) -> None:
        throttler = Throttler(60, clock=fake_time.clock, sleep=fake_time.sleep)
        await throttler.wait()
        assert fake_time.sleeps == []

    async def test_waits_remaining_interval(self, fake_time: FakeTime) -> None:
        throttler = Throttler(60, clock=fake_time.clock, sleep=fake_time.sleep)
        throttler.mark()
        fake_time.now += 0.25

        await throttler.wait()

        assert fake_time.sleeps == [pytest.approx(0.75)]

    async def test_no_wait_after_interval_elapsed(self, fake_time: FakeTime) -> None:
        throttler = Throttler(60, clock=fake_time.clock, sleep=fake_time.sleep)
        throttler.mark()
        fake_time.now += 2.0

        await throttler.wait()

        assert fake_time.sleeps == []

    def test_mark_records_timestamp(self, fake_time: FakeTime) -> None:
        throttler = Throttler(60, clock=fake_time.clock)
        assert throttler.last_request_at is None
        throttler.mark()
        assert throttler.last_request_at == 100.0

    def test_instances_do_not_share_state(self, fake_time: FakeTime) -> None:
        a = Throttler(60, clock=fake_time.clock)
        b = Throttler(60, clock=fake_time.clock)
        a.mark()
        assert a.remaining() == pytest.approx(1.0)
        assert b.remaining() == 0.0


# -- RetryingFetcher tests --


class TestRetryingFetcher:
    """Tests for RetryingFetcher."""

    def _fetcher(self, fake_time: FakeTime, client: httpx.AsyncClient, **kwargs) -> RetryingFetcher:
        # 60000 rpm -> 1ms interval, keeps throttle waits out of the backoff assertions
        throttler = Throttler(60_000, clock=fake_time.clock, sleep=fake_time.sleep)
        return RetryingFetcher(throttler, client=client, sleep=fake_time.sleep, **kwargs)

    async def test_success_on_first_attempt(self, fake_time: FakeTime) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json={"ok": True})

        async with _client(handler) as client:
            response = await self._fetcher(fake_time, client).fetch("GET", "https://api.test/x")

        assert response.status_code == 200
        assert calls == 1
        assert fake_time.sleeps == []

    async def test_passes_headers(self, fake_time: FakeTime) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["x-api-key"] = request.headers["x-api-key"]
            return httpx.Response(200)

        async with _client(handler) as client:
            await self._fetcher(fake_time, client).fetch(
                "GET", "https://api.test/x", headers={"x-api-key": "secret"}
            )

        assert seen["x-api-key"] == "secret"

    async def test_retries_server_errors_with_exponential_backoff(
        self, fake_time: FakeTime
    ) -> None:
        statuses = iter([503, 502, 200])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses))

        async with _client(handler) as client:
            fetcher = self._fetcher(fake_time, client, backoff_ms=500)
            response = await fetcher.fetch("GET", "https://api.test/x")

        assert response.status_code == 200
        backoffs = [s for s in fake_time.sleeps if s >= 0.1]
        assert backoffs == [0.5, 1.0]

    async def test_returns_last_server_error_when_retries_exhausted(
        self, fake_time: FakeTime
    ) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(500)

        async with _client(handler) as client:
            fetcher = self._fetcher(fake_time, client, retries=3, backoff_ms=500)
            response = await fetcher.fetch("GET", "https://api.test/x")

        assert response.status_code == 500
        assert calls == 4
        backoffs = [s for s in fake_time.sleeps if s >= 0.1]
        assert backoffs == [0.5, 1.0, 2.0]

    async def test_client_errors_are_not_retried(self, fake_time: FakeTime) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(429)

        async with _client(handler) as client:
            response = await self._fetcher(fake_time, client).fetch("GET", "https://api.test/x")

        assert response.status_code == 429
        assert calls == 1

    async def test_retries_transport_errors(self, fake_time: FakeTime) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            if calls < 3:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200)

        async with _client(handler) as client:
            response = await self._fetcher(fake_time, client).fetch("GET", "https://api.test/x")

        assert response.status_code == 200
        assert calls == 3

    async def test_raises_transport_error_when_retries_exhausted(
        self, fake_time: FakeTime
    ) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            fetcher = self._fetcher(fake_time, client, retries=2)
            with pytest.raises(TransportError, match="connection refused") as exc_info:
                await fetcher.fetch("GET", "https://api.test/x")

        assert calls == 3
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_zero_retries(self, fake_time: FakeTime) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with _client(handler) as client:
            response = await self._fetcher(fake_time, client, retries=0).fetch(
                "GET", "https://api.test/x"
            )

        assert response.status_code == 503
        assert fake_time.sleeps == []

    async def test_each_attempt_waits_on_throttler(self, fake_time: FakeTime) -> None:
        statuses = iter([500, 200])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses))

        # 1 request per minute: the retry after the 500 must wait out the interval
        throttler = Throttler(1, clock=fake_time.clock, sleep=fake_time.sleep)
        async with _client(handler) as client:
            fetcher = RetryingFetcher(
                throttler, client=client, backoff_ms=500, sleep=fake_time.sleep
            )
            await fetcher.fetch("GET", "https://api.test/x")

        assert fake_time.sleeps == [0.5, pytest.approx(59.5)]
        assert throttler.last_request_at == pytest.approx(160.0)

    def test_rejects_negative_retries(self) -> None:
        with pytest.raises(ValueError, match="retries"):
            RetryingFetcher(Throttler(60), retries=-1)
