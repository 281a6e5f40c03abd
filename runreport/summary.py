"""Pass/fail/error counts for executed tests."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class TestSummary:
    """Counts of right, wrong, ignored and exceptional assertions."""

    __test__ = False  # not a pytest test class

    right: int = 0
    wrong: int = 0
    ignores: int = 0
    exceptions: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be non-negative")

    @property
    def total(self) -> int:
        """Return the number of counted assertions of every kind."""
        return self.right + self.wrong + self.ignores + self.exceptions

    def add(self, other: TestSummary) -> None:
        """Add the counts of ``other`` into this summary."""
        self.right += other.right
        self.wrong += other.wrong
        self.ignores += other.ignores
        self.exceptions += other.exceptions

    def copy(self) -> TestSummary:
        """Return an independent copy of this summary."""
        return TestSummary(self.right, self.wrong, self.ignores, self.exceptions)

    def __str__(self) -> str:
        return (
            f"{self.right} right, {self.wrong} wrong, "
            f"{self.ignores} ignored, {self.exceptions} exceptions"
        )


def css_class(summary: TestSummary) -> str:
    """Return the result CSS class for ``summary``.

    Exceptions take priority over wrong answers, which take priority over
    right ones. A summary with no counts at all is ``"plain"``.
    """

    if summary.exceptions > 0:
        return "error"
    if summary.wrong > 0:
        return "fail"
    if summary.right > 0:
        return "pass"
    return "plain"
