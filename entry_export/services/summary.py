from __future__ import annotations

from ..models.export_result import ExportResult

"""Summary line rendering for the SUMMARY output."""

__all__ = [
    "render_summary_line",
]


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # 指数表記を避ける
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(result: ExportResult) -> str:
    """Render a SUMMARY line from an ExportResult.

    Format:
    SUMMARY entries={n} columns={c} skipped_fields={k} elapsed_sec={s} throughput_eps={t}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ExportResult(
        ...     headers=["A", "B"], rows=[[], []], start_time=start, end_time=end,
        ...     elapsed_seconds=2.0, throughput_entries_per_sec=1.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY entries=2 columns=2 skipped_fields=0 elapsed_sec=2 throughput_eps=1'
    """
    return (
        f"SUMMARY entries={result.entry_count} "
        f"columns={result.column_count} "
        f"skipped_fields={len(result.skipped_fields)} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_eps={_format_number(result.throughput_entries_per_sec)}"
    )
