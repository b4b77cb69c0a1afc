from __future__ import annotations

from ..models.import_result import ImportResult

"""SUMMARY line rendering for the CLI.

Format:
SUMMARY files={total} accepted={accepted} rejected={rejected} rows={rows}
exported={exported} errors={errors} elapsed_sec={elapsed}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small numbers
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ImportResult, rows: int, exported: int, errors: int) -> str:
    """Render the SUMMARY line.

    Args:
        result: Outcome of the upload phase
        rows: Records in the store after all actions
        exported: Number of artifacts written
        errors: Number of danger notifications raised

    Examples:
        >>> from json_uploads.models.import_result import ImportResult
        >>> render_summary_line(ImportResult(elapsed_seconds=0.5), rows=0, exported=0, errors=1)
        'SUMMARY files=0 accepted=0 rejected=0 rows=0 exported=0 errors=1 elapsed_sec=0.5'
    """
    return (
        f"SUMMARY files={result.total} "
        f"accepted={result.accepted} "
        f"rejected={result.rejected} "
        f"rows={rows} "
        f"exported={exported} "
        f"errors={errors} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
