import threading

from pbwalg.algorithms.utils.core import _OnceCell


def test_value_is_computed_once():
    cell = _OnceCell()
    assert not cell.is_set()
    assert cell.get("missing") == "missing"

    calls = []
    assert cell.get_or_compute(lambda: calls.append(1) or 42) == 42
    assert cell.get_or_compute(lambda: calls.append(1) or 0) == 42
    assert cell.is_set()
    assert cell.get() == 42
    assert len(calls) == 1


def test_failed_factory_leaves_cell_empty():
    cell = _OnceCell()

    def boom():
        raise RuntimeError("no value")

    try:
        cell.get_or_compute(boom)
    except RuntimeError:
        pass
    assert not cell.is_set()
    assert cell.get_or_compute(lambda: 7) == 7


def test_concurrent_callers_share_one_computation():
    cell = _OnceCell()
    calls = []
    start = threading.Barrier(8)
    results = []

    def factory():
        calls.append(1)
        return object()

    def worker():
        start.wait()
        results.append(cell.get_or_compute(factory))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)
