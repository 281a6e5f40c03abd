import pytest

from runreport.summary import TestSummary, css_class


def test_add_sums_each_count():
    total = TestSummary()
    total.add(TestSummary(right=2, wrong=1))
    total.add(TestSummary(ignores=3, exceptions=1))
    assert total == TestSummary(right=2, wrong=1, ignores=3, exceptions=1)
    assert total.total == 7


def test_copy_is_independent():
    original = TestSummary(1, 2, 3, 4)
    clone = original.copy()
    original.right = 10
    assert clone.right == 1
    assert clone == TestSummary(1, 2, 3, 4)


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        TestSummary(right=-1)


def test_str_lists_all_counts():
    text = str(TestSummary(1, 2, 3, 4))
    assert text == "1 right, 2 wrong, 3 ignored, 4 exceptions"


@pytest.mark.parametrize(
    "summary,expected",
    [
        (TestSummary(right=0, wrong=0, exceptions=1), "error"),
        (TestSummary(right=0, wrong=1, exceptions=0), "fail"),
        (TestSummary(right=1, wrong=0, exceptions=0), "pass"),
        (TestSummary(), "plain"),
        (TestSummary(right=5, wrong=2, exceptions=1), "error"),
        (TestSummary(right=5, wrong=2), "fail"),
        (TestSummary(ignores=4), "plain"),
    ],
)
def test_css_class_priority(summary, expected):
    assert css_class(summary) == expected
