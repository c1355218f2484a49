from __future__ import annotations

import logging
from datetime import UTC, datetime

import pandas as pd

from ..fields.base import Entry, column_labels
from ..fields.factory import build_transformers
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import ExportConfig
from ..models.error_record import ErrorRecord
from ..models.export_result import ExportResult
from ..models.form import Form
from ..transformer.combiner import Combiner, CombinerError, GlueHook, check_column_counts
from ..transformer.glue import glue_from_config
from .progress import ProgressTracker

"""Export pass orchestration.

Drives one export pass: builds the transformer catalogue, feeds every entry to
a single Combiner strictly in input order, and returns the combined rows with
the metrics for the SUMMARY line. A catalogue inconsistency aborts the pass;
it is written to the error log and re-raised as ExportError.
"""

__all__ = [
    "ExportError",
    "export_entries",
    "to_dataframe",
]

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Fatal error that aborts an export pass."""
    pass


def export_entries(
    form: Form,
    entries: list[Entry],
    config: ExportConfig,
    *,
    glue: GlueHook | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> ExportResult:
    """Export all entries of ``form`` into one combined row each.

    Args:
        form: Form definition (field catalogue)
        entries: Entries in output order
        config: Export configuration
        glue: Join string hook; defaults to the config based glue
        error_log: Buffer receiving the abort record (created on demand)

    Returns:
        ExportResult with headers, rows and timing metrics

    Raises:
        ExportError: catalogue inconsistency (the pass is aborted)
    """
    start_time = datetime.now(UTC)
    fields, skipped = build_transformers(form, config)
    headers = column_labels(fields)
    logger.info(f"form={form.id} fields={len(fields)} columns={len(headers)} entries={len(entries)}")

    try:
        check_column_counts(fields)
    except CombinerError as e:
        raise _abort(form, -1, e, error_log) from e

    combiner = Combiner(glue=glue or glue_from_config(config))
    with ProgressTracker(len(entries)) as progress:
        for index, entry in enumerate(entries):
            try:
                combiner.parse_entry(fields, entry)
            except CombinerError as e:
                raise _abort(form, entry.get("id", index), e, error_log) from e
            progress.advance()

    rows = list(combiner.get_rows())
    end_time = datetime.now(UTC)
    elapsed = (end_time - start_time).total_seconds()
    throughput = len(rows) / elapsed if elapsed > 0 else 0.0
    logger.debug(f"combined rows={len(rows)} elapsed={elapsed:.3f}s")

    return ExportResult(
        headers=headers,
        rows=rows,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed,
        throughput_entries_per_sec=throughput,
        skipped_fields=skipped,
    )


def to_dataframe(result: ExportResult) -> pd.DataFrame:
    """Combined rows as a DataFrame of raw values (one column per header).

    Header labels may repeat (two fields with the same label), so columns are
    assigned positionally.
    """
    data = [[cell.raw for cell in row] for row in result.rows]
    df = pd.DataFrame(data, columns=range(len(result.headers)), dtype=object)
    df.columns = result.headers
    return df


def _abort(
    form: Form, entry_id: int | str, error: CombinerError, error_log: ErrorLogBuffer | None
) -> ExportError:
    """Write the abort record to the error log and build the ExportError to raise."""
    where = "catalogue" if entry_id == -1 else f"entry {entry_id}"
    buf = error_log if error_log is not None else ErrorLogBuffer()
    buf.append(
        ErrorRecord.create(
            form_id=form.id,
            entry_id=entry_id,
            field_id=error.field_id,
            error_type=error.error_type,
            message=str(error),
        )
    )
    path = buf.flush()
    logger.error(f"export aborted at {where}: {error} (log={path})")
    return ExportError(f"export aborted at {where}: {error}")
