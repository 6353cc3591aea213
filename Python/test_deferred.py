import threading
import time

import pytest

from deferred import Deferred


def counting(value):
    calls = []

    def computation():
        calls.append(None)
        return value

    return computation, calls


def test_construction_does_not_evaluate():
    computation, calls = counting(42)
    cell = Deferred(computation)
    assert calls == []
    assert not cell.is_forced


def test_force_returns_value():
    computation, _ = counting(42)
    assert Deferred(computation).force() == 42


def test_force_evaluates_once():
    computation, calls = counting(42)
    cell = Deferred(computation)
    assert cell.force() == 42
    assert cell.force() == 42
    assert cell() == 42
    assert len(calls) == 1
    assert cell.is_forced


def test_of_is_already_forced():
    cell = Deferred.of('x')
    assert cell.is_forced
    assert cell.force() == 'x'


def test_failure_propagates_to_first_caller():
    def computation():
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError):
        Deferred(computation).force()


def test_failure_is_cached_and_not_retried():
    calls = []

    def computation():
        calls.append(None)
        raise KeyError("missing")

    cell = Deferred(computation)
    with pytest.raises(KeyError) as first:
        cell.force()
    with pytest.raises(KeyError) as second:
        cell.force()

    assert len(calls) == 1
    assert first.value is second.value
    assert cell.is_poisoned


def test_peek_does_not_force():
    computation, calls = counting(1)
    cell = Deferred(computation)
    assert cell.peek() is None
    assert cell.peek(default='?') == '?'
    assert calls == []
    cell.force()
    assert cell.peek() == 1


def test_peek_on_poisoned_cell_returns_default():
    def computation():
        raise ValueError()

    cell = Deferred(computation)
    with pytest.raises(ValueError):
        cell.force()
    assert cell.peek(default='?') == '?'


def test_self_forcing_computation_raises():
    cell = Deferred(lambda: cell.force())
    with pytest.raises(RuntimeError):
        cell.force()


def test_concurrent_force_runs_computation_once():
    calls = []

    def computation():
        calls.append(None)
        time.sleep(0.05)
        return object()

    cell = Deferred(computation)
    results = []
    threads = [threading.Thread(target=lambda: results.append(cell.force())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_repr():
    assert repr(Deferred(lambda: 1)) == 'Deferred(?)'
    assert repr(Deferred.of(1)) == 'Deferred(1)'
