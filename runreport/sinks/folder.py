"""Result sink that writes standalone HTML pages into a directory."""

from __future__ import annotations

import os
import shutil
from typing import IO, Optional

import structlog

from ..exceptions import ArtifactIOError
from ..metrics import ARTIFACTS_OPENED
from .base import ResultSink

logger = structlog.get_logger(__name__)

ROOT_DIR = os.path.dirname(os.path.dirname(__file__))
RESOURCE_DIR = os.path.join(ROOT_DIR, "resources")

# (packaged resource, destination relative to the output directory)
STATIC_ASSETS = (
    ("fitnesse.css", "fitnesse.css"),
    ("fitnesse.js", "fitnesse.js"),
    ("images/collapsibleOpen.png", "images/collapsibleOpen.png"),
    ("images/collapsibleClosed.png", "images/collapsibleClosed.png"),
)

# Image references served by the live wiki point here; persisted pages
# must use the copied images next to them instead.
SHARED_IMAGE_SRC = 'src="/files/images/'
LOCAL_IMAGE_SRC = 'src="images/'

PAGE_HEAD = (
    "</title><meta http-equiv='Content-Type' content='text/html;charset=utf-8'/>"
    "<link rel='stylesheet' type='text/css' href='fitnesse.css'/>"
    "<script src='fitnesse.js' type='text/javascript'></script>"
    "</head><body><h2>"
)
PAGE_FOOTER = "</body></html>"


def copy_asset(src: str, dst: str) -> None:
    """Copy the packaged resource ``src`` to the file ``dst``."""

    try:
        os.makedirs(os.path.dirname(dst), exist_ok=True)
        shutil.copyfile(os.path.join(RESOURCE_DIR, src), dst)
    except OSError as exc:
        logger.error("asset_copy_failed", asset=src, target=dst, error=str(exc))
        raise ArtifactIOError(f"could not copy asset {src!r} to {dst!r}") from exc


class TestResultPage:
    """A single HTML result page held open while output streams in."""

    __test__ = False

    def __init__(self, output_path: str, test_name: str) -> None:
        root = os.path.realpath(output_path)
        self.path = os.path.realpath(os.path.join(root, f"{test_name}.html"))
        if os.path.commonpath([root, self.path]) != root:
            raise ArtifactIOError(
                f"result page for {test_name!r} would be written outside {root!r}"
            )
        try:
            os.makedirs(os.path.dirname(self.path), exist_ok=True)
            self._writer: Optional[IO[str]] = open(
                self.path, "w", encoding="utf-8"
            )
        except OSError as exc:
            raise ArtifactIOError(f"could not create {self.path!r}") from exc
        try:
            self._write_header_for(test_name)
        except ArtifactIOError:
            self._writer.close()
            self._writer = None
            raise

    def _write(self, text: str) -> None:
        try:
            self._writer.write(text)
        except OSError as exc:
            raise ArtifactIOError(f"could not write to {self.path!r}") from exc

    def _write_header_for(self, test_name: str) -> None:
        self._write("<html><head><title>")
        self._write(test_name)
        self._write(PAGE_HEAD)
        self._write(test_name)
        self._write("</h2>")

    def append_result_chunk(self, content: str) -> None:
        """Append ``content`` with wiki image paths made page-relative."""
        self._write(content.replace(SHARED_IMAGE_SRC, LOCAL_IMAGE_SRC))

    def finish(self) -> None:
        """Write the closing tags and release the file handle."""
        if self._writer is None:
            return
        writer, self._writer = self._writer, None
        try:
            writer.write(PAGE_FOOTER)
        except OSError as exc:
            raise ArtifactIOError(f"could not finish {self.path!r}") from exc
        finally:
            try:
                writer.close()
            except OSError as exc:
                raise ArtifactIOError(f"could not close {self.path!r}") from exc


class FolderResultSink(ResultSink):
    """Write each artifact as ``<name>.html`` below ``output_path``.

    The stylesheet, script and images the pages refer to are copied into
    ``output_path`` once, when the sink is created.
    """

    def __init__(self, output_path: str) -> None:
        self.output_path = str(output_path)
        self._page: Optional[TestResultPage] = None
        self._copy_assets()

    @classmethod
    def from_settings(cls, settings=None) -> FolderResultSink:
        """Build a sink for ``settings.output_dir``."""
        if settings is None:
            from ..config import settings
        return cls(settings.output_dir)

    @property
    def is_open(self) -> bool:
        return self._page is not None

    def add_file(self, resource: str, relative_file_path: str) -> None:
        """Copy a packaged ``resource`` into the output directory."""
        copy_asset(resource, os.path.join(self.output_path, relative_file_path))

    def _copy_assets(self) -> None:
        for resource, target in STATIC_ASSETS:
            self.add_file(resource, target)
        logger.debug("assets_copied", output_path=self.output_path)

    def open(self, name: str) -> None:
        self._require_closed(name)
        try:
            self._page = TestResultPage(self.output_path, name)
        except ArtifactIOError as exc:
            logger.error("artifact_open_failed", name=name, error=str(exc))
            raise
        ARTIFACTS_OPENED.inc()
        logger.debug("artifact_opened", name=name, path=self._page.path)

    def write(self, chunk: str) -> None:
        self._require_open("write")
        self._page.append_result_chunk(chunk)

    def close(self) -> None:
        self._require_open("close")
        page, self._page = self._page, None
        page.finish()
        logger.debug("artifact_closed", path=page.path)
