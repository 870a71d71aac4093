import logging

import click

from turtlesoup.config import OutputOptions
from turtlesoup.geometry import Point
from turtlesoup.output import publish, save_document
from turtlesoup.turtle import Segment
from turtlesoup.viewer import ClickViewer, NullViewer


class SpyViewer:
    def __init__(self):
        self.opened = []

    def launch(self, path):
        self.opened.append(path)
        return True


SEGMENTS = [Segment(Point(0, 0), Point(10, 0), "black")]


def test_save_overwrites(tmp_path, caplog):
    target = tmp_path / "out.html"
    target.write_text("old content that is longer")

    with caplog.at_level(logging.INFO):
        assert save_document("new", target) == target

    assert target.read_text() == "new"
    assert f"File saved: {target}" in caplog.text


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    target = tmp_path / "missing" / "out.html"
    assert save_document("x", target) is None
    assert "Could not save" in caplog.text


def test_publish_opens_saved_file(tmp_path):
    viewer = SpyViewer()
    options = OutputOptions(path=str(tmp_path / "a.html"))

    saved = publish(SEGMENTS, options, viewer=viewer)

    assert saved == tmp_path / "a.html"
    assert 'x2="260"' in saved.read_text()
    assert viewer.opened == [saved]


def test_publish_without_auto_open(tmp_path):
    viewer = SpyViewer()
    options = OutputOptions(path=str(tmp_path / "a.html"), auto_open=False)

    assert publish(SEGMENTS, options, viewer=viewer) is not None
    assert viewer.opened == []


def test_publish_skips_viewer_when_save_fails(tmp_path):
    viewer = SpyViewer()
    options = OutputOptions(path=str(tmp_path / "nope" / "a.html"))

    assert publish(SEGMENTS, options, viewer=viewer) is None
    assert viewer.opened == []


def test_click_viewer_success(monkeypatch):
    calls = []
    monkeypatch.setattr(click, "launch", lambda url, wait=False: calls.append(url) or 0)
    assert ClickViewer().launch("out.html") is True
    assert calls == ["out.html"]


def test_click_viewer_nonzero_status(monkeypatch, caplog):
    monkeypatch.setattr(click, "launch", lambda url, wait=False: 1)
    assert ClickViewer().launch("out.html") is False
    assert "Failed to open out.html automatically" in caplog.text


def test_click_viewer_os_error(monkeypatch, caplog):
    def boom(url, wait=False):
        raise OSError("no viewer")

    monkeypatch.setattr(click, "launch", boom)
    assert ClickViewer().launch("out.html") is False
    assert "no viewer" in caplog.text


def test_null_viewer():
    assert NullViewer().launch("anything.html") is True
