import os

from structlog.testing import capture_logs

from bigfinder import walker
from bigfinder.models import ChildEntry
from bigfinder.records import build_record


def test_walk_emits_every_entry(make_tree):
    root = make_tree({"d/a": 1, "d/e/b": 2, "d/e/f/c": 3})
    seen = []
    walker.walk(ChildEntry(name="d", size=0, is_dir=True), root, seen.append)
    got = sorted(os.path.relpath(r.path, root) for r in seen)
    assert got == sorted(["d", "d/a", "d/e", "d/e/b", "d/e/f", "d/e/f/c"])


def test_failed_entry_skips_only_its_branch(make_tree, monkeypatch):
    root = make_tree({"d/ok/a": 1, "d/bad/b": 2, "d/c": 3})
    bad = os.path.join(root, "d", "bad")

    def fake_build(path):
        if path == bad:
            raise PermissionError(13, "Permission denied", path)
        return build_record(path)

    monkeypatch.setattr(walker, "build_record", fake_build)
    seen, skipped = [], []
    with capture_logs() as logs:
        walker.walk(ChildEntry(name="d", size=0, is_dir=True), root, seen.append, skipped.append)

    got = sorted(os.path.relpath(r.path, root) for r in seen)
    assert got == sorted(["d", "d/ok", "d/ok/a", "d/c"])
    assert skipped == [bad]
    assert any(e["log_level"] == "warning" and e["path"] == bad for e in logs)


def test_missing_start_entry_emits_nothing(tmp_path):
    seen = []
    walker.walk(ChildEntry(name="gone", size=0, is_dir=False), str(tmp_path), seen.append)
    assert seen == []
