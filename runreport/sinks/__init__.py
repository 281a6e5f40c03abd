"""Write targets for streamed result artifacts."""

from .base import InMemoryResultSink, ResultSink
from .folder import FolderResultSink, TestResultPage

__all__ = ["ResultSink", "InMemoryResultSink", "FolderResultSink", "TestResultPage"]
