from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from entry_export.config.loader import ConfigError, load_config
from entry_export.logging.init import log_summary, set_level, setup_logging
from entry_export.services.export import ExportError, export_entries, to_dataframe
from entry_export.services.summary import render_summary_line
from entry_export.source.reader import FormDefinitionError, read_entries, read_form

"""CLI entrypoint.

Flow:
- Load .env (ENTRY_EXPORT_CONFIG supplies the default config path)
- Load config, form definition and entries
- Run one export pass and print the SUMMARY line
- Optionally preview the first rows
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

DEFAULT_CONFIG_PATH = "config/export.yml"


def _load_env_file(path: Path) -> None:
    """Load .env using python-dotenv; existing environment variables win."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flatten form entries into spreadsheet rows")
    p.add_argument("--form", required=True, type=Path, help="Form definition JSON")
    p.add_argument("--entries", required=True, type=Path, help="Entries JSON list or CSV")
    p.add_argument("--config", type=Path, default=None, help="Export config YAML")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--preview", type=int, default=0, metavar="N", help="Print the first N rows")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # [] を渡された場合に sys.argv が混入しないよう None のときのみ参照
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_level("DEBUG")
        logger.debug("debug mode enabled")

    config_path = args.config or Path(os.getenv("ENTRY_EXPORT_CONFIG", DEFAULT_CONFIG_PATH))
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        form = read_form(args.form)
        entries = read_entries(args.entries)
    except FormDefinitionError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL

    if form.id and form.id != cfg.form_id:
        logger.warning(f"config form_id={cfg.form_id} does not match form {form.id}")

    logger.info(f"Exporting {len(entries)} entries of form {form.id or cfg.form_id}")
    try:
        result = export_entries(form, entries, cfg)
    except ExportError as e:
        logger.error(f"export: {e}")
        return EXIT_FATAL

    if args.preview > 0:
        df = to_dataframe(result).head(args.preview)
        print(df.to_string(index=False))

    summary_line = render_summary_line(result)
    # log_summary が "SUMMARY " を付与するため除去
    log_summary(summary_line.removeprefix("SUMMARY "))
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
