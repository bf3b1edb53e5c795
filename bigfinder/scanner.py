from __future__ import annotations
import time
from typing import Callable, List, Optional

from PySide6.QtCore import QCoreApplication, QEventLoop, QObject, QThread, Qt, Signal, Slot

from .logger import get_logger
from .models import ChildEntry, FileRecord, ScanReport
from .records import build_record
from .topn import DEFAULT_LIMIT, insert_sorted
from .walker import walk

log = get_logger(__name__)

PROGRESS_INTERVAL_SEC = 0.10

ProgressCb = Callable[[str, int, int], None]  # (current_path, files, dirs)

_app: Optional[QCoreApplication] = None

def _ensure_app() -> None:
    # QEventLoop refuses to run without an application object; _app keeps ours alive
    global _app
    if QCoreApplication.instance() is None:
        _app = QCoreApplication([])


# -------------------- Worker threads --------------------
class WalkThread(QThread):
    record = Signal(object)  # FileRecord
    skipped = Signal(str)    # path
    walked = Signal()        # exactly once, after the whole subtree

    def __init__(self, entry: ChildEntry, base_path: str):
        super().__init__()
        self.entry = entry
        self.base_path = base_path

    def run(self):
        try:
            walk(self.entry, self.base_path, self.record.emit, self.skipped.emit)
        except Exception:
            log.exception("walk task failed", entry=self.entry.name, base=self.base_path)
        finally:
            self.walked.emit()


class Collector(QObject):
    """Owns both top lists. Lives on the coordinating thread; workers only reach it via queued signals."""

    def __init__(self, root: FileRecord, limit: int, expected: int, loop: QEventLoop,
                 progress: Optional[ProgressCb] = None):
        super().__init__()
        self.limit = limit
        self.expected = expected
        self.loop = loop
        self.progress = progress
        self.top_dirs: List[FileRecord] = insert_sorted([], root, limit)
        self.top_files: List[FileRecord] = []
        self.files = 0
        self.dirs = 0
        self.skipped = 0
        self.completed = 0
        self._last_emit = 0.0

    @Slot(object)
    def on_record(self, rec: FileRecord):
        if rec.is_dir:
            self.dirs += 1
            self.top_dirs = insert_sorted(self.top_dirs, rec, self.limit)
        else:
            self.files += 1
            self.top_files = insert_sorted(self.top_files, rec, self.limit)
        self._emit_progress(rec.path)

    @Slot(str)
    def on_skipped(self, path: str):
        self.skipped += 1

    @Slot()
    def on_walked(self):
        self.completed += 1
        if self.completed >= self.expected:
            self.loop.quit()

    def _emit_progress(self, cur: str):
        if not self.progress:
            return
        now = time.monotonic()
        if now - self._last_emit >= PROGRESS_INTERVAL_SEC:
            self._last_emit = now
            self.progress(cur, self.files, self.dirs)


def scan(root_path: str, limit: int = DEFAULT_LIMIT,
         progress: Optional[ProgressCb] = None) -> ScanReport:
    """Find the `limit` largest files and directories under `root_path`.

    One WalkThread is started per immediate entry of the root; each walks its
    subtree sequentially. Errors describing the root itself propagate
    (FileNotFoundError, PermissionError, OSError, NotADirectoryError); errors
    below it are logged and skipped. There is no timeout.
    """
    t0 = time.time()
    root = build_record(root_path)
    if not root.is_dir:
        raise NotADirectoryError(f"{root.path} is not a directory")

    _ensure_app()
    loop = QEventLoop()
    collector = Collector(root, limit, expected=len(root.children), loop=loop, progress=progress)

    threads: List[WalkThread] = []
    for entry in root.children:
        t = WalkThread(entry, root.path)
        t.record.connect(collector.on_record, type=Qt.QueuedConnection)
        t.skipped.connect(collector.on_skipped, type=Qt.QueuedConnection)
        t.walked.connect(collector.on_walked, type=Qt.QueuedConnection)
        threads.append(t)

    log.debug("scan started", root=root.path, tasks=len(threads), limit=limit)
    for t in threads:
        t.start()

    if threads:
        # returns once every task has reported `walked`
        loop.exec()
    for t in threads:
        t.wait()

    elapsed = time.time() - t0
    log.debug("scan finished", root=root.path, files=collector.files, dirs=collector.dirs,
              skipped=collector.skipped, elapsed_sec=round(elapsed, 3))
    return ScanReport(
        root=root,
        top_dirs=collector.top_dirs,
        top_files=collector.top_files,
        files=collector.files,
        dirs=collector.dirs,
        skipped=collector.skipped,
        tasks=len(threads),
        elapsed_sec=elapsed,
    )
