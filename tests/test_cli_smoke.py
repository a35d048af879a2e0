"""Smoke tests for the fastaio CLI."""

from __future__ import annotations

import csv
import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PKG_ROOT = ROOT


def _run_cli(args: list[str], cwd: Path | None = None, extra_env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env.pop("FASTAIO_WIDTH", None)
    env["PYTHONPATH"] = f"{PKG_ROOT}{os.pathsep}{env.get('PYTHONPATH', '')}"
    if extra_env:
        env.update(extra_env)
    return subprocess.run(
        [sys.executable, "-m", "fastaio.cli", *args],
        cwd=cwd or ROOT,
        env=env,
        check=False,
        text=True,
        capture_output=True,
    )


def _write_test_fasta(path: Path) -> None:
    path.write_text(">Seq1 first\nAAAB\nBB\n\n>Seq2\nCCCDDD", encoding="utf-8")


def test_help_runs() -> None:
    proc = _run_cli(["--help"])
    assert proc.returncode == 0, proc.stderr
    assert "usage" in proc.stdout.lower()


def test_rewrap_command(tmp_path: Path) -> None:
    fasta = tmp_path / "in.fasta"
    _write_test_fasta(fasta)
    out = tmp_path / "out" / "rewrapped.fasta"

    proc = _run_cli(["rewrap", "--in-fasta", str(fasta), "--out-fasta", str(out), "--width", "2"], cwd=tmp_path)

    assert proc.returncode == 0, proc.stderr
    assert out.read_text(encoding="utf-8") == ">Seq1 first\nAA\nAB\nBB\n>Seq2\nCC\nCD\nDD\n"
    assert "Rewrapped 2 records" in proc.stderr


def test_rewrap_width_from_environment(tmp_path: Path) -> None:
    fasta = tmp_path / "in.fasta"
    _write_test_fasta(fasta)
    out = tmp_path / "rewrapped.fasta"

    proc = _run_cli(
        ["rewrap", "--in-fasta", str(fasta), "--out-fasta", str(out)],
        cwd=tmp_path,
        extra_env={"FASTAIO_WIDTH": "3"},
    )

    assert proc.returncode == 0, proc.stderr
    assert out.read_text(encoding="utf-8") == ">Seq1 first\nAAA\nBBB\n>Seq2\nCCC\nDDD\n"


def test_rewrap_rejects_malformed_input(tmp_path: Path) -> None:
    fasta = tmp_path / "bad.fasta"
    fasta.write_text("ACGT\n>Seq1\nAC\n", encoding="utf-8")

    proc = _run_cli(["rewrap", "--in-fasta", str(fasta), "--out-fasta", str(tmp_path / "o.fa")], cwd=tmp_path)

    assert proc.returncode == 1
    assert "sequence before header" in proc.stderr


def test_missing_input_fails_cleanly(tmp_path: Path) -> None:
    proc = _run_cli(["summary", "--in-fasta", str(tmp_path / "missing.fasta")], cwd=tmp_path)
    assert proc.returncode == 1
    assert "not found" in proc.stderr


def test_summary_command(tmp_path: Path) -> None:
    fasta = tmp_path / "in.fasta"
    _write_test_fasta(fasta)
    out_dir = tmp_path / "summary"

    proc = _run_cli(["summary", "--in-fasta", str(fasta), "--out-dir", str(out_dir)], cwd=tmp_path)

    assert proc.returncode == 0, proc.stderr
    with (out_dir / "record_summary.csv").open("r", encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert [(row["name"], row["length"]) for row in rows] == [("Seq1 first", "6"), ("Seq2", "6")]
    manifest = json.loads((out_dir / "summary_manifest.json").read_text(encoding="utf-8"))
    assert manifest["records"] == 2


def test_rewrap_in_place(tmp_path: Path) -> None:
    fasta = tmp_path / "in.fasta"
    fasta.write_text(">a\nACGT\n>b\nGG\n", encoding="utf-8")

    proc = _run_cli(["rewrap", "--in-fasta", str(fasta), "--out-fasta", str(fasta), "--width", "2"], cwd=tmp_path)

    assert proc.returncode == 0, proc.stderr
    assert fasta.read_text(encoding="utf-8") == ">a\nAC\nGT\n>b\nGG\n"


def test_rewrap_failure_keeps_existing_output(tmp_path: Path) -> None:
    fasta = tmp_path / "in.fasta"
    _write_test_fasta(fasta)
    out = tmp_path / "out.fasta"
    out.write_bytes(b"PRECIOUS")

    proc = _run_cli(["rewrap", "--in-fasta", str(fasta), "--out-fasta", str(out), "--width", "-1"], cwd=tmp_path)

    assert proc.returncode == 1
    assert out.read_bytes() == b"PRECIOUS"
