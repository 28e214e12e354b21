import threading
import time

import pytest

from rpp.tasks import Continue, Event, Suspend, Task


def test_task_runs_eagerly_to_completion():
    log = []

    async def co():
        log.append("Hello from coroutine 1")

    task = Task(co())
    assert task.done()
    assert task.block() is None
    assert log == ["Hello from coroutine 1"]


def test_continue_does_not_suspend():
    async def co():
        await Continue()
        return "after"

    task = Task(co())
    assert task.done()
    assert task.block() == "after"


def test_suspend_then_resume():
    async def co():
        await Suspend()
        return 3

    task = Task(co())
    assert not task.done()
    task.resume()
    assert task.done()
    assert task.block() == 3


def test_await_finished_task():
    async def co1():
        return 1

    async def co2():
        i = await Task(co1())
        return i

    task = Task(co2())
    assert task.done()
    assert task.block() == 1


def test_await_suspended_task_resumes_continuation():
    async def co1():
        await Suspend()
        return 1

    job = Task(co1())

    async def co2():
        return await job

    task = Task(co2())
    assert not task.done()
    job.resume()
    assert task.done()
    assert task.block() == 1


def test_await_task_suspended_twice():
    async def co1():
        await Suspend()
        await Suspend()
        return 1

    job = Task(co1())

    async def co2():
        return await job

    task = Task(co2())
    assert not task.done()
    job.resume()
    assert not task.done()
    job.resume()
    assert task.done()
    assert task.block() == 1


def test_exception_propagates_through_block():
    async def co():
        raise ValueError("boom")

    task = Task(co())
    assert task.done()
    with pytest.raises(ValueError, match="boom"):
        task.block()


def test_exception_propagates_to_awaiter():
    async def inner():
        await Suspend()
        raise KeyError("missing")

    job = Task(inner())

    async def outer():
        try:
            await job
        except KeyError:
            return "caught"
        return "not caught"

    task = Task(outer())
    job.resume()
    assert task.block() == "caught"


def test_awaiting_foreign_awaitable_raises_type_error():
    class Foreign:
        def __await__(self):
            yield 42

    async def co():
        await Foreign()

    task = Task(co())
    assert task.done()
    with pytest.raises(TypeError):
        task.block()


def test_second_awaiter_gets_runtime_error():
    async def slow():
        await Suspend()
        return 1

    job = Task(slow())

    async def waiter():
        return await job

    first = Task(waiter())
    second = Task(waiter())
    assert second.done()
    with pytest.raises(RuntimeError):
        second.block()
    job.resume()
    assert first.block() == 1


def test_resume_finished_task_raises():
    async def co():
        return 0

    task = Task(co())
    with pytest.raises(RuntimeError):
        task.resume()


def test_empty_task():
    task = Task()
    assert not task
    with pytest.raises(RuntimeError):
        task.done()


def test_non_coroutine_rejected():
    with pytest.raises(TypeError):
        Task(5)


def test_block_waits_for_other_thread():
    async def co():
        await Suspend()
        return "late"

    task = Task(co())

    def later():
        time.sleep(0.02)
        task.resume()

    t = threading.Thread(target=later)
    t.start()
    assert task.block() == "late"
    t.join()


def test_event_signal_reset():
    event = Event()
    assert not event.try_wait()
    event.signal()
    assert event.try_wait()
    assert event.try_wait()
    event.reset()
    assert not event.try_wait()


def test_wait_any_returns_lowest_signalled_index():
    events = [Event(), Event(), Event()]
    events[2].signal()
    events[1].signal()
    assert Event.wait_any(events) == 1


def test_wait_any_across_threads():
    events = [Event(), Event()]

    def later():
        time.sleep(0.02)
        events[1].signal()

    t = threading.Thread(target=later)
    t.start()
    assert Event.wait_any(events) == 1
    t.join()
    assert not events[0].try_wait()


def test_wait_any_empty_raises():
    with pytest.raises(ValueError):
        Event.wait_any([])