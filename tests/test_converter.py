from datetime import datetime

import pytest

from vvblogger.builder import Post
from vvblogger.config import Config
from vvblogger.converter import cleanup, convert, handle_heading, read
from vvblogger.timefmt import format_time, parse_time

LAYOUT = "2006-01-021504"
MOMENT = datetime(2024, 3, 5, 12, 30)


@pytest.fixture
def config(tmp_path):
    return Config(
        site_dir=str(tmp_path) + "/",
        posts_dir="posts/",
        image_dir="img/",
        source_image_dir=str(tmp_path) + "/",
        date_time_format=LAYOUT,
    )


def _note(tmp_path, lines):
    path = tmp_path / "note.md"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_first_h1_becomes_title():
    post = Post()
    assert handle_heading("# Title", post) == ""
    assert post.title == " Title"


def test_later_headings_render():
    post = Post(title="Existing")
    assert handle_heading("## Sub heading ", post) == "<h2>Sub heading</h2>"
    assert handle_heading("# Again", post).startswith("<h1>Again")
    assert post.title == "Existing"


def test_cleanup_unescapes():
    assert cleanup("a \\* b \\~ c") == "a * b ~ c"


def test_cleanup_leaves_plain_text():
    assert cleanup("plain *text* ~~x~~") == "plain *text* ~~x~~"


def test_convert_full_note(tmp_path, config):
    lines = [
        "---",
        "tags:",
        "- x",
        "---",
        "# Hello",
        "some **bold** text",
        "- one",
        "- two",
    ]
    note = _note(tmp_path, lines)
    post = convert(lines, note, config, MOMENT)

    assert post.title.strip() == "Hello"
    assert post.front_matter.tags == ["x"]
    assert post.front_matter.uploaded == format_time(MOMENT, LAYOUT)
    assert post.body.startswith('{{ define "content" }}')
    assert post.body.endswith("{{ end }}")
    assert "<p>some <b>bold</b> text</p>" in post.body
    assert "<li>one</li>" in post.body and "<li>two</li>" in post.body
    assert post.body.index("<ul>") < post.body.index("</ul>")
    assert "tags:" not in post.body


def test_convert_skips_blank_lines(tmp_path, config):
    lines = ["first", "", "   ", "second"]
    note = _note(tmp_path, lines)
    post = convert(lines, note, config, MOMENT)
    body_lines = post.body.split("\n")
    assert all(line.strip() for line in body_lines)
    assert "first" in post.body and "second" in post.body


def test_convert_multiple_headings(tmp_path, config):
    lines = ["# A", "## B", "# C"]
    note = _note(tmp_path, lines)
    post = convert(lines, note, config, MOMENT)
    assert post.title.strip() == "A"
    assert "<h2>B</h2>" in post.body
    assert "<h1>C</h1>" in post.body


def test_convert_stamps_note(tmp_path, config):
    lines = ["---", "uploaded:", "updated:", "---", "text"]
    note = _note(tmp_path, lines)
    post = convert(lines, note, config, MOMENT)
    text = note.read_text(encoding="utf-8")
    assert text.count("   - " + post.front_matter.updated) == 2


def test_read_round_trips_timestamps(tmp_path, config):
    note = _note(tmp_path, ["---", "updated:", "---", "# Title", "body \\* star"])
    post = read(note, config)
    updated = post.front_matter.updated
    assert format_time(parse_time(updated, LAYOUT), LAYOUT) == updated
    assert post.title.strip() == "Title"
    assert "body * star" in post.body


def test_read_missing_file(tmp_path, config):
    with pytest.raises(FileNotFoundError):
        read(tmp_path / "absent.md", config)