import threading
from concurrent.futures import ThreadPoolExecutor

from runreport import InMemoryResultSink, InstanceRegistry, RunTracker
from runreport import TestSummary, WikiTestPage


def test_get_or_create_returns_same_instance():
    registry = InstanceRegistry()
    first = registry.get_or_create("Suite")
    assert registry.get_or_create("Suite") is first
    assert registry.get_or_create("Other") is not first
    assert len(registry) == 2
    assert "Suite" in registry
    assert sorted(registry.run_ids()) == ["Other", "Suite"]


def test_tracker_named_after_run_id():
    registry = InstanceRegistry()
    assert registry.get_or_create("Root.Suite").main_page_name == "Root.Suite"


def test_concurrent_get_or_create_builds_one_tracker():
    created = []
    barrier = threading.Barrier(8)

    def factory(run_id):
        created.append(run_id)
        return RunTracker(run_id)

    registry = InstanceRegistry(tracker_factory=factory)

    def lookup(_):
        barrier.wait()
        return registry.get_or_create("Shared")

    with ThreadPoolExecutor(max_workers=8) as pool:
        trackers = list(pool.map(lookup, range(8)))

    assert created == ["Shared"]
    assert all(t is trackers[0] for t in trackers)


def test_concurrent_distinct_runs_all_registered():
    registry = InstanceRegistry()
    ids = [f"Run{i}" for i in range(50)]
    with ThreadPoolExecutor(max_workers=10) as pool:
        trackers = list(pool.map(registry.get_or_create, ids))
    assert len(registry) == 50
    assert [t.main_page_name for t in trackers] == ids


def test_dispose_then_recreate_gives_fresh_tracker():
    registry = InstanceRegistry()
    tracker = registry.get_or_create("Suite")
    tracker.set_results_repository(InMemoryResultSink())
    page = WikiTestPage("Suite.A")
    tracker.new_test_started(page)
    tracker.test_complete(page, TestSummary(right=4))

    registry.dispose("Suite")
    assert registry.get("Suite") is None

    fresh = registry.get_or_create("Suite")
    assert fresh is not tracker
    assert fresh.get_tests_executed() == []
    assert fresh.get_total_summary() == TestSummary()


def test_dispose_unknown_run_is_noop():
    registry = InstanceRegistry()
    registry.dispose("Nothing")
    assert len(registry) == 0


def test_dispose_does_not_close_open_artifact():
    registry = InstanceRegistry()
    sink = InMemoryResultSink()
    tracker = registry.get_or_create("Suite")
    tracker.set_results_repository(sink)
    tracker.new_test_started(WikiTestPage("Suite.A"))
    registry.dispose("Suite")
    assert sink.is_open
