"""Shared test fixtures — sample sources, synthetic trees, clean environment."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from vgx.patterns.catalog import PatternCatalog
from vgx.patterns.models import PatternDef


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep VGX_* variables from the developer's shell out of the tests."""
    for name in ("VGX_THRESHOLD", "VGX_FORMAT", "VGX_DISABLE_PATTERNS", "VGX_SKIP_DIRS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def go_error_heavy() -> str:
    """20 lines, 10 of them the same Go error check, 4-space indents, snake_case names."""
    lines = (
        ["func load_all(file_path string) error {"]
        + ["    if err != nil { return err }"] * 10
        + [
            "    data_dir := file_path",
            "    out_file := data_dir",
            "    log_name := out_file",
            "    max_size := log_name",
            "    min_size := max_size",
            "    num_rows := min_size",
            "    row_count := num_rows",
            "    return nil",
            "}",
        ]
    )
    assert len(lines) == 20
    return "\n".join(lines) + "\n"


@pytest.fixture
def human_python() -> str:
    """Irregular hand-written snippet with no catalogued idioms."""
    return textwrap.dedent("""\
        x=1
        def   f(a,b):
           return a+b   # add em up



        print( f(x,2) )
          #stray
        """)


@pytest.fixture
def ai_typescript() -> str:
    """A TypeScript module dense with generator idioms."""
    return textwrap.dedent("""\
        import { useEffect, useState } from 'react';

        /**
         * @param {string} id
         * @returns {Promise<User>}
         */
        export default async function fetchUser(id: string): Promise<User> {
          // Fetch the user from the remote api
          const response = await fetch(`/api/users/${id}`);
          if (!response.ok) {
            throw new Error('Failed to fetch user');
          }
          return response.json();
        }

        const formatName = (user: User): string => user.name;
        """)


@pytest.fixture
def marker_catalog() -> PatternCatalog:
    """A catalog whose only pattern is AI_MARKER (weight 1.0) and no boilerplate.

    With it, files containing the marker score >= 0.55 and all others <= 0.45.
    """
    return PatternCatalog.from_definitions([PatternDef(name="marker", pattern=r"AI_MARKER", weight=1.0)])


@pytest.fixture
def synthetic_tree(tmp_path: Path) -> Path:
    """Source tree with known AI-marked files, a skip-listed dir, and a non-source file.

    Line counts (split on newline, trailing segment included):
      lib/human2.ts 5, src/ai_one.py 10, src/ai_two.go 5, src/human.js 20
    """
    (tmp_path / "src").mkdir()
    (tmp_path / "lib").mkdir()
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "src" / "deep" / "vendor").mkdir(parents=True)

    (tmp_path / "src" / "ai_one.py").write_text("AI_MARKER\n" + "x = 1\n" * 8)
    (tmp_path / "src" / "ai_two.go").write_text("AI_MARKER\n" + "y\n" * 3)
    (tmp_path / "src" / "human.js").write_text("z\n" * 19)
    (tmp_path / "lib" / "human2.ts").write_text("q\n" * 4)

    (tmp_path / "node_modules" / "pkg" / "ai_hidden.js").write_text("AI_MARKER\n")
    (tmp_path / "src" / "deep" / "vendor" / "ai_vendored.go").write_text("AI_MARKER\n")
    (tmp_path / "notes.txt").write_text("AI_MARKER\n")
    return tmp_path
