import asyncio
import time
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor

import anyio
import pytest

from verdict import ok, err, from_awaitable, from_future, attempt, run_in_thread, Rejection


async def _value(v):
    await asyncio.sleep(0)
    return v


async def _boom(exc):
    await asyncio.sleep(0)
    raise exc


def test_from_awaitable_fulfilled():
    assert asyncio.run(from_awaitable(_value(5))) == ok(5)


def test_from_awaitable_rejected_is_captured_not_raised():
    exc = ValueError("boom")
    r = asyncio.run(from_awaitable(_boom(exc)))
    assert r.is_err()
    assert r.unwrap_err() is exc
    assert str(r.unwrap_err()) == "boom"


def test_from_awaitable_accepts_tasks_and_futures():
    async def main():
        task = asyncio.create_task(_value("t"))
        fut = asyncio.get_running_loop().create_future()
        fut.set_exception(KeyError("k"))
        return await from_awaitable(task), await from_awaitable(fut)

    from_task, from_fut = asyncio.run(main())
    assert from_task == ok("t")
    assert isinstance(from_fut.unwrap_err(), KeyError)


def test_from_awaitable_lets_cancellation_through():
    async def main():
        task = asyncio.create_task(asyncio.sleep(10))
        await asyncio.sleep(0)
        task.cancel()
        await from_awaitable(task)

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(main())


def test_round_trip_through_awaitable():
    # non-Exception payloads travel as a Rejection and come back intact
    for r in (
        ok(3),
        err("boom"),
        err(RuntimeError("x")),
        err(KeyboardInterrupt()),
        err(asyncio.CancelledError()),
    ):
        assert asyncio.run(from_awaitable(r.as_awaitable())) == r


def test_as_awaitable_raises_payload():
    with pytest.raises(Rejection) as exc:
        asyncio.run(err({"code": 3}).as_awaitable())
    assert exc.value.error == {"code": 3}

    with pytest.raises(KeyError):
        asyncio.run(err(KeyError("k")).as_awaitable())

    with pytest.raises(Rejection) as exc:
        asyncio.run(err(KeyboardInterrupt()).as_awaitable())
    assert isinstance(exc.value.error, KeyboardInterrupt)


def test_from_future():
    with ThreadPoolExecutor(max_workers=1) as pool:
        good = pool.submit(lambda: time.sleep(0.01) or "done")
        bad = pool.submit(int, "not a number")
        assert from_future(good) == ok("done")
        assert isinstance(from_future(bad).unwrap_err(), ValueError)

    assert from_future(err("plain").as_future()) == err("plain")
    stop = err(SystemExit(3))
    assert from_future(stop.as_future()) == stop


def test_from_future_cancelled_propagates():
    fut: Future = Future()
    fut.cancel()
    with pytest.raises(CancelledError):
        from_future(fut)


def test_attempt():
    assert attempt(int, "12") == ok(12)
    r = attempt(int, "twelve")
    assert isinstance(r.unwrap_err(), ValueError)
    assert attempt(lambda *, base: int("ff", base=base), base=16) == ok(255)


def test_attempt_does_not_capture_base_exceptions():
    def stop():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        attempt(stop)


def test_run_in_thread():
    async def main():
        return await run_in_thread(sum, [1, 2, 3]), await run_in_thread(int, "x")

    good, bad = anyio.run(main)
    assert good == ok(6)
    assert isinstance(bad.unwrap_err(), ValueError)
