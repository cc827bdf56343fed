import logging
from types import SimpleNamespace

from commands import rm
from commands.rm import DeletionExecutor


def _make_tree(root):
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    nested = root / "nested" / "deeper"
    nested.mkdir(parents=True)
    (nested / "c.txt").write_text("c")
    return root


def test_removes_whole_tree(tmp_path):
    target = _make_tree(tmp_path / "d")

    outcome = DeletionExecutor().run(target)

    assert outcome.succeeded
    assert outcome.error_detail is None
    assert outcome.elapsed_seconds >= 0
    assert not target.exists()
    assert tmp_path.exists()


def test_missing_path_fails_with_detail(tmp_path):
    target = tmp_path / "never-created"

    outcome = DeletionExecutor().run(target)

    assert not outcome.succeeded
    assert outcome.error_detail
    assert str(target) in outcome.error_detail
    assert outcome.elapsed_seconds >= 0


def test_remover_error_is_reported_once(tmp_path):
    calls = []

    def remover(path):
        calls.append(path)
        raise PermissionError(13, "Permission denied", str(path))

    outcome = DeletionExecutor(remover=remover).run(tmp_path)

    assert calls == [tmp_path]
    assert not outcome.succeeded
    assert "Permission denied" in outcome.error_detail


def test_elapsed_brackets_the_remove_call(tmp_path, monkeypatch):
    ticks = iter([10.0, 12.5])
    monkeypatch.setattr(rm, "time", SimpleNamespace(perf_counter=lambda: next(ticks)))

    outcome = DeletionExecutor(remover=lambda path: None).run(tmp_path)

    assert outcome.succeeded
    assert outcome.elapsed_seconds == 2.5


def test_elapsed_measured_on_failure(tmp_path, monkeypatch):
    ticks = iter([1.0, 1.25])
    monkeypatch.setattr(rm, "time", SimpleNamespace(perf_counter=lambda: next(ticks)))

    def remover(path):
        raise OSError("Directory not empty")

    outcome = DeletionExecutor(remover=remover).run(tmp_path)

    assert not outcome.succeeded
    assert outcome.error_detail == "Directory not empty"
    assert outcome.elapsed_seconds == 0.25


def test_file_target_is_not_a_directory(tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("x")

    outcome = DeletionExecutor().run(target)

    assert not outcome.succeeded
    assert target.exists()


def test_failure_is_quiet_at_default_log_level(tmp_path, caplog):
    caplog.set_level(logging.WARNING)

    outcome = DeletionExecutor().run(tmp_path / "missing")

    assert not outcome.succeeded
    assert caplog.records == []
