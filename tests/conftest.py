"""Shared pytest fixtures for hush tests."""

import json

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and repository hush.toml files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("HUSH_GIT_ROOT", raising=False)
    return home


@pytest.fixture
def rules_file(tmp_path):
    """Text-format rule file covering ids, globs and line numbers."""
    content = """\
// project suppressions
nullPointer:src/parser.cpp:120

unusedFunction:src/legacy/*
uninitvar
"""
    f = tmp_path / "suppressions.txt"
    f.write_text(content)
    return f


@pytest.fixture
def diagnostics_file(tmp_path):
    """JSON Lines diagnostics matching the rules_file fixture."""
    records = [
        {"error_id": "nullPointer", "file_name": "src/parser.cpp", "line_number": 120},
        {"error_id": "nullPointer", "file_name": "src/parser.cpp", "line_number": 121},
        {"error_id": "unusedFunction", "file_name": "src/legacy/old.c", "line_number": 7,
         "symbol_names": ["helper"]},
        {"error_id": "uninitvar", "file_name": "src\\main.c", "line_number": 3},
        {"error_id": "memleak", "file_name": "src/main.c", "line_number": 40},
    ]
    f = tmp_path / "findings.jsonl"
    f.write_text("\n".join(json.dumps(r) for r in records) + "\n")
    return f
