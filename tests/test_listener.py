from runreport import CompositeListener, NullListener, TestSummary, WikiTestPage


class Recorder:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def new_test_started(self, test, timing):
        self.log.append((self.name, "start", test.full_path))

    def test_complete(self, test, summary, timing):
        self.log.append((self.name, "complete", str(summary)))

    def all_testing_complete(self, timing):
        self.log.append((self.name, "all"))


def test_composite_forwards_in_order():
    log = []
    composite = CompositeListener([Recorder("a", log)])
    composite.add(Recorder("b", log))
    page = WikiTestPage("Suite.T")
    composite.new_test_started(page, None)
    composite.test_complete(page, TestSummary(right=1), None)
    composite.all_testing_complete(None)
    assert log == [
        ("a", "start", "Suite.T"),
        ("b", "start", "Suite.T"),
        ("a", "complete", "1 right, 0 wrong, 0 ignored, 0 exceptions"),
        ("b", "complete", "1 right, 0 wrong, 0 ignored, 0 exceptions"),
        ("a", "all"),
        ("b", "all"),
    ]


def test_null_listener_accepts_events():
    listener = NullListener()
    page = WikiTestPage("Suite.T")
    listener.new_test_started(page, None)
    listener.test_complete(page, TestSummary(), None)
    listener.all_testing_complete(None)
