import io
import os
import subprocess
import sys

import pytest

from boxplot.boxplot import main

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
EXAMPLE = "linear 1 2 3 4 5 6 exponential 2 4 8 16 32 64\n"


def run_main(monkeypatch, capsys, stdin, argv=()):
    monkeypatch.setattr(sys, "stdin", stdin)
    main(list(argv))
    return capsys.readouterr().out


def test_example(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, io.StringIO(EXAMPLE), ["-t", "Title"])
    lines = out.splitlines()
    assert lines[:2] == ["m 0.500000 0.980000", 't "\\CTitle"']
    assert 't "\\Clinear"' in lines
    assert 't "\\Cexponential"' in lines
    assert lines[-1] == "cl"


def test_long_title_flag(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, io.StringIO(EXAMPLE), ["--title", "Growth"])
    assert out.startswith('m 0.500000 0.980000\nt "\\CGrowth"\n')


def test_no_title(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, io.StringIO(EXAMPLE))
    assert out.startswith("m ")
    assert "0.980000" not in out


def test_empty_input(monkeypatch, capsys):
    assert run_main(monkeypatch, capsys, io.StringIO("")) == "cl\n"


def test_deterministic(monkeypatch, capsys):
    first = run_main(monkeypatch, capsys, io.StringIO(EXAMPLE), ["-t", "T"])
    second = run_main(monkeypatch, capsys, io.StringIO(EXAMPLE), ["-t", "T"])
    assert first == second


class FailingStream:
    def read(self, *args):
        raise OSError("input/output error")


def test_read_failure(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", FailingStream())
    with pytest.raises(SystemExit) as e:
        main([])
    assert e.value.code == 1
    out = capsys.readouterr().out
    assert out == "Read failed:  input/output error\n"


def test_subprocess():
    result = subprocess.run(
        [sys.executable, "-m", "boxplot", "-t", "Title"],
        input=EXAMPLE,
        capture_output=True,
        text=True,
        cwd=ROOT,
    )
    assert result.returncode == 0
    assert result.stdout.count("bo ") == 2
    assert result.stdout.endswith("cl\n")
