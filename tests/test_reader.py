import io

import pytest

from raycube.colors import SceneError
from raycube.reader import check_argument, iter_lines, read_lines


class _TinyReads(io.StringIO):
    """A stream that hands out at most two characters per read."""

    def read(self, size=-1):
        return super().read(2)


def test_iter_lines_keeps_newlines():
    assert list(iter_lines(io.StringIO("NO a\nSO b\n"))) == ["NO a\n", "SO b\n"]


def test_iter_lines_last_line_without_newline():
    assert list(iter_lines(io.StringIO("111\n101"))) == ["111\n", "101"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


def test_iter_lines_blank_lines_are_kept():
    assert list(iter_lines(io.StringIO("a\n\n\nb"))) == ["a\n", "\n", "\n", "b"]


def test_iter_lines_joins_back_to_input():
    text = "F 1,2,3\nC 4,5,6\n\n  1111\n  1N01\n  1111"
    assert "".join(iter_lines(_TinyReads(text))) == text


def test_iter_lines_small_reads_give_same_lines():
    text = "first line\nsecond\nthird one here\n"
    assert list(iter_lines(_TinyReads(text))) == list(iter_lines(io.StringIO(text)))


def test_read_lines_splits_file(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("NO x\nSO y\n\n111\n1N1\n111\n", encoding="utf-8")
    assert read_lines(str(scene)) == ["NO x", "SO y", "", "111", "1N1", "111"]


def test_read_lines_drops_leading_newline(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("\nF 1,1,1\n", encoding="utf-8")
    assert read_lines(str(scene)) == ["F 1,1,1"]


def test_read_lines_empty_file(tmp_path):
    scene = tmp_path / "empty.cub"
    scene.write_text("", encoding="utf-8")
    assert read_lines(str(scene)) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(SceneError):
        read_lines(str(tmp_path / "missing.cub"))


def test_check_argument_accepts_cub_path():
    assert check_argument(["game", "maps/level.cub"]) == "maps/level.cub"


def test_check_argument_accepts_cub_anywhere():
    assert check_argument(["game", "level.cubx"]) == "level.cubx"


@pytest.mark.parametrize(
    "argv",
    [
        ["game"],
        ["game", "a.cub", "b.cub"],
        ["game", "level.txt"],
        ["game", ""],
    ],
)
def test_check_argument_rejects(argv):
    with pytest.raises(SceneError):
        check_argument(argv)