from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from linkaudit.errors import WalkError
from linkaudit.walk import iter_html_files


def test_iter_html_files_yields_relative_posix_keys(
    site_tree: Callable[[dict[str, str]], Path],
) -> None:
    root = site_tree(
        {
            "index.html": "",
            "docs/guide.html": "",
            "docs/deep/page.html": "",
            "docs/notes.htm": "",
            "img/logo.png": "",
            "README.md": "",
        }
    )
    keys = [key for key, _ in iter_html_files(root)]
    assert sorted(keys) == ["docs/deep/page.html", "docs/guide.html", "index.html"]


def test_iter_html_files_is_deterministic(site_tree: Callable[[dict[str, str]], Path]) -> None:
    root = site_tree({"b.html": "", "a.html": "", "z/c.html": "", "m/d.html": ""})
    first = list(iter_html_files(root))
    second = list(iter_html_files(root))
    assert first == second
    for key, path in first:
        assert path == root / key


def test_iter_html_files_skips_directories_named_like_html(tmp_path: Path) -> None:
    (tmp_path / "odd.html").mkdir()
    (tmp_path / "odd.html" / "inner.html").write_text("", encoding="utf-8")
    assert [key for key, _ in iter_html_files(tmp_path)] == ["odd.html/inner.html"]


def test_iter_html_files_missing_root(tmp_path: Path) -> None:
    with pytest.raises(WalkError) as excinfo:
        list(iter_html_files(tmp_path / "absent"))
    assert excinfo.value.path == tmp_path / "absent"
