from __future__ import annotations

import os
from pathlib import Path
import subprocess
from types import SimpleNamespace

import pytest

from lyxhebrew.adapters import tex
from lyxhebrew.core.settings import InstallerSettings


def _settings(tmp_path: Path) -> InstallerSettings:
    return InstallerSettings(
        home=tmp_path / "home",
        applications_dir=tmp_path / "Applications",
        texbin_dir=tmp_path / "texbin",
        path_helper=tmp_path / "path_helper",
    )


def test_parse_path_helper_extracts_value() -> None:
    output = 'PATH="/usr/local/bin:/usr/bin:/Library/TeX/texbin"; export PATH;\n'
    assert tex.parse_path_helper(output) == "/usr/local/bin:/usr/bin:/Library/TeX/texbin"


def test_parse_path_helper_without_assignment() -> None:
    assert tex.parse_path_helper('MANPATH="/usr/share/man"; export MANPATH;') is None
    assert tex.parse_path_helper("") is None


def test_refresh_path_updates_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings = _settings(tmp_path)
    settings.path_helper.write_text("#!/bin/sh\n", encoding="utf-8")
    calls: list[list[str]] = []

    def fake_run(argv: list[str], **_kwargs: object) -> SimpleNamespace:
        calls.append(argv)
        return SimpleNamespace(
            returncode=0, stdout='PATH="/opt/tex/bin:/usr/bin"; export PATH;', stderr=""
        )

    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setenv("PATH", "/usr/bin")

    assert tex.refresh_path(settings) is True
    assert os.environ["PATH"] == "/opt/tex/bin:/usr/bin"
    assert calls == [[str(settings.path_helper), "-s"]]


def test_refresh_path_skips_missing_helper(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PATH", "/usr/bin")

    def unexpected(*_args: object, **_kwargs: object) -> None:
        raise AssertionError("path_helper should not run")

    monkeypatch.setattr(subprocess, "run", unexpected)

    assert tex.refresh_path(_settings(tmp_path)) is False
    assert os.environ["PATH"] == "/usr/bin"


def test_prepend_texbin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    settings = _settings(tmp_path)
    monkeypatch.setenv("PATH", "/usr/bin")

    tex.prepend_texbin(settings)

    assert os.environ["PATH"].split(os.pathsep)[:2] == [str(settings.texbin_dir), "/usr/bin"]


def test_find_xelatex_prefers_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tex.shutil, "which", lambda name: f"/usr/local/bin/{name}")
    assert tex.find_xelatex(_settings(tmp_path)) == Path("/usr/local/bin/xelatex")


def test_find_xelatex_falls_back_to_texbin(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings = _settings(tmp_path)
    monkeypatch.setattr(tex.shutil, "which", lambda _name: None)

    assert tex.find_xelatex(settings) is None

    settings.texbin_dir.mkdir()
    settings.xelatex_fallback.write_text("", encoding="utf-8")
    assert tex.find_xelatex(settings) == settings.xelatex_fallback


def test_xelatex_version_reads_first_line(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda argv, **_kwargs: SimpleNamespace(
            returncode=0, stdout="\nXeTeX 3.141592653-2.6-0.999996 (TeX Live 2024)\nmore\n", stderr=""
        ),
    )
    assert tex.xelatex_version("xelatex") == "XeTeX 3.141592653-2.6-0.999996 (TeX Live 2024)"


def test_compile_smoke_test_runs_in_scratch_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_run(argv: list[str], **_kwargs: object) -> SimpleNamespace:
        source = Path(argv[-1])
        seen["argv"] = argv
        seen["source"] = source
        seen["document"] = source.read_text(encoding="utf-8")
        return SimpleNamespace(returncode=0, stdout="Output written on test.pdf", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    result = tex.compile_smoke_test("xelatex")

    assert result.passed is True
    argv = seen["argv"]
    source = seen["source"]
    assert isinstance(argv, list) and isinstance(source, Path)
    assert argv[:2] == ["xelatex", "-interaction=nonstopmode"]
    assert argv[2] == f"-output-directory={source.parent}"
    assert source.parent.name.startswith("lyxhebrew-smoke-")
    assert "שלום עולם!" in seen["document"]
    assert "\\setmainfont{David CLM}" in seen["document"]
    assert not source.parent.exists()


def test_compile_smoke_test_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda argv, **_kwargs: SimpleNamespace(returncode=1, stdout="! Font not found", stderr=""),
    )
    result = tex.compile_smoke_test("xelatex")
    assert result.passed is False
    assert result.returncode == 1


def test_kpsewhich_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    def missing(*_args: object, **_kwargs: object) -> None:
        raise FileNotFoundError("kpsewhich")

    monkeypatch.setattr(subprocess, "run", missing)
    assert tex.kpsewhich("polyglossia.sty") is False


def test_parse_path_helper_ignores_manpath_before_path() -> None:
    output = (
        'MANPATH="/usr/share/man:/Library/TeX/Distributions/.DefaultTeX/Contents/Man"; '
        "export MANPATH;\n"
        'PATH="/Library/TeX/texbin:/usr/bin"; export PATH;\n'
    )
    assert tex.parse_path_helper(output) == "/Library/TeX/texbin:/usr/bin"
