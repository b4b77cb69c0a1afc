from __future__ import annotations

import re

from json_uploads.models.import_result import ImportOutcome, ImportResult, ImportStatus
from json_uploads.services.summary import render_summary_line

SUMMARY_RE = re.compile(
    r"^SUMMARY files=\d+ accepted=\d+ rejected=\d+ rows=\d+ exported=\d+ errors=\d+ elapsed_sec=[0-9.]+$"
)


def _result(accepted: int, rejected: int, elapsed: float) -> ImportResult:
    outcomes = [ImportOutcome(f"ok{i}.json", ImportStatus.ACCEPTED) for i in range(accepted)]
    outcomes += [
        ImportOutcome(f"bad{i}.json", ImportStatus.REJECTED, "EMPTY_VALUE", "m") for i in range(rejected)
    ]
    return ImportResult(outcomes=outcomes, elapsed_seconds=elapsed)


def test_render_summary_line_counts():
    line = render_summary_line(_result(2, 1, 1.5), rows=2, exported=1, errors=1)
    assert line == "SUMMARY files=3 accepted=2 rejected=1 rows=2 exported=1 errors=1 elapsed_sec=1.5"
    assert SUMMARY_RE.match(line)


def test_render_summary_line_empty_result():
    line = render_summary_line(ImportResult(), rows=0, exported=0, errors=0)
    assert line == "SUMMARY files=0 accepted=0 rejected=0 rows=0 exported=0 errors=0 elapsed_sec=0"


def test_elapsed_formatting():
    assert render_summary_line(_result(1, 0, 2.0), 1, 0, 0).endswith("elapsed_sec=2")
    assert render_summary_line(_result(1, 0, 0.000123), 1, 0, 0).endswith("elapsed_sec=0.000123")
    assert render_summary_line(_result(1, 0, 0.123456), 1, 0, 0).endswith("elapsed_sec=0.123")
    for elapsed in (0.0000004, 12.5, 3.0):
        assert SUMMARY_RE.match(render_summary_line(_result(0, 0, elapsed), 0, 0, 0))
