#!/usr/bin/env python3
"""
becu_converter.py

Regroup a BECU transaction export by Parent Category -> Category, with
category and parent subtotals, and write the result as a new CSV.

Input (one file per run):
  Date,Description,Original Description,Amount,Type,Parent Category,Category
  ...

Output (default under output/csv/):
  <input stem>_grouped.csv   (content type text/csv)
  <input stem>_grouped.xlsx  (with --xlsx, under output/xlsx/)
  <input stem>_grouped.pdf   (with --pdf, under output/pdf/)

Examples:
  python3 becu_converter.py export.csv
  python3 becu_converter.py export.csv --stdout
  python3 becu_converter.py export.csv --xlsx --pdf
  python3 becu_converter.py export.csv --outdir reports --out march.csv
  python3 becu_converter.py export.csv --out march.csv --xlsx   (march.csv + march.xlsx)
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from becu_core.config import (
    CSV_MIME_TYPE,
    DEFAULT_CSV_SUFFIX,
    DEFAULT_ENCODING,
    DEFAULT_PDF_SUFFIX,
    DEFAULT_XLSX_SUFFIX,
)
from becu_core.converter import (
    MultipleFilesError,
    UnreadableFileError,
    build_groups,
    convert_groups,
    read_single_file,
)
from becu_core.excel_reports import write_excel_grouped
from becu_core.io_csv import write_text
from becu_core.parsing import fixed2
from becu_core.paths import out_path, output_dir
from becu_core.pdf_reports import write_pdf_grouped
from becu_core.summaries import build_rows, summarize_parents

EXIT_OK = 0
EXIT_UNREADABLE = 1
EXIT_REJECTED = 2

# -----------------------------
# Logging
# -----------------------------
def setup_logging(base_dir: Path) -> Path:
    logs_dir = output_dir("logs", base_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = logs_dir / f"becu_converter_{stamp}.log"

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # avoid duplicate handlers if main() runs more than once in a process
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(fmt)

        sh = logging.StreamHandler()
        sh.setLevel(logging.INFO)
        sh.setFormatter(fmt)

        root.addHandler(fh)
        root.addHandler(sh)

    logging.info("Logging started: %s", log_path)
    return log_path


def log_summary(parents) -> None:
    for parent, cats, parent_total in summarize_parents(parents):
        logging.info("%s: %d categor%s, total %s",
                     parent or "(blank)", len(cats), "y" if len(cats) == 1 else "ies", fixed2(parent_total))
        for name, txns, total in cats:
            logging.info("   - %s: %d txns, %s", name or "(blank)", txns, fixed2(total))


def resolve_output(base_dir: Path, kind: str, filename: str, outdir: Optional[str]) -> Path:
    if outdir:
        d = Path(outdir).expanduser()
        d.mkdir(parents=True, exist_ok=True)
        return d / filename
    return out_path(kind, filename, base_dir)


# -----------------------------
# Run
# -----------------------------
def run(
    inputs: List[str],
    base_dir: Path,
    out_name: Optional[str] = None,
    outdir: Optional[str] = None,
    to_stdout: bool = False,
    xlsx: bool = False,
    pdf: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    try:
        text = read_single_file(inputs, encoding=encoding)
    except MultipleFilesError as e:
        logging.error("Rejected: %s", e)
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_REJECTED
    except UnreadableFileError as e:
        logging.error("%s", e)
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_UNREADABLE

    in_path = Path(inputs[0])
    logging.info("Converting %s", in_path)

    # --out names every output: march.csv -> march.xlsx / march.pdf
    if out_name:
        csv_name = out_name
        xlsx_name = f"{Path(out_name).stem}.xlsx"
        pdf_name = f"{Path(out_name).stem}.pdf"
    else:
        csv_name = f"{in_path.stem}{DEFAULT_CSV_SUFFIX}"
        xlsx_name = f"{in_path.stem}{DEFAULT_XLSX_SUFFIX}"
        pdf_name = f"{in_path.stem}{DEFAULT_PDF_SUFFIX}"

    parents = build_groups(text)
    csv_text = convert_groups(parents)
    log_summary(parents)

    if to_stdout:
        sys.stdout.write(csv_text)
    else:
        csv_path = resolve_output(base_dir, "csv", csv_name, outdir)
        write_text(csv_path, csv_text, encoding=encoding)
        logging.info("Wrote %s (%s)", csv_path, CSV_MIME_TYPE)
        print(f"✅ Done processing! Output: {csv_path}")

    if xlsx:
        xlsx_path = resolve_output(base_dir, "xlsx", xlsx_name, outdir)
        write_excel_grouped(build_rows(parents), xlsx_path)
        logging.info("Wrote %s", xlsx_path)

    if pdf:
        pdf_path = resolve_output(base_dir, "pdf", pdf_name, outdir)
        write_pdf_grouped(parents, pdf_path)
        logging.info("Wrote %s", pdf_path)

    return EXIT_OK


# -----------------------------
# CLI
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="BECU CSV Converter: group transactions by parent category and category.")
    p.add_argument("inputs", nargs="+", metavar="CSV", help="BECU export CSV (exactly one file).")
    p.add_argument("--out", default=None, help=f"Output CSV filename; its stem also names --xlsx/--pdf files (default: <stem>{DEFAULT_CSV_SUFFIX}). Not allowed with --stdout.")
    p.add_argument("--outdir", default=None, help="Write outputs here instead of output/<kind>/.")
    p.add_argument("--stdout", action="store_true", help="Print the grouped CSV instead of writing a file.")
    p.add_argument("--xlsx", action="store_true", help="Also write the grouped report as Excel.")
    p.add_argument("--pdf", action="store_true", help="Also write the grouped report as PDF.")
    p.add_argument("--encoding", default=DEFAULT_ENCODING, help=f"Input/output text encoding (default: {DEFAULT_ENCODING}).")
    return p


def main(argv: Optional[List[str]] = None, base_dir: Optional[Path] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.out and args.stdout:
        parser.error("--out cannot be combined with --stdout")
    base_dir = base_dir or Path.cwd()
    setup_logging(base_dir)
    return run(
        args.inputs,
        base_dir,
        out_name=args.out,
        outdir=args.outdir,
        to_stdout=args.stdout,
        xlsx=args.xlsx,
        pdf=args.pdf,
        encoding=args.encoding,
    )


if __name__ == "__main__":
    sys.exit(main())
