# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
import sys
from pathlib import Path

from qasm2stim.batch import ConversionBatch
from qasm2stim.config import TranslationConfig
from qasm2stim.exceptions import InaccessibleFileError, Qasm2StimError
from qasm2stim.files import find_qasm_files
from qasm2stim.qlogger import disable_logging, enable_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qasm2stim",
        description="Convert Clifford-only OpenQASM 2 circuits to Stim format.",
        epilog="Example:\n  qasm2stim -d /path/to/qasm/files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d",
        "--directory",
        required=True,
        metavar="QASM_DIRECTORY",
        help="directory containing the .qasm files to process",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="write .stim files here instead of next to each .qasm file",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="number of files converted in parallel (default: 1)",
    )
    parser.add_argument(
        "--crlf", action="store_true", help="terminate Stim lines with \\r\\n"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    if args.quiet:
        disable_logging()
    else:
        enable_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        files = find_qasm_files(args.directory)
        if not files:
            logger.warning(f"No .qasm files found in {args.directory}")
            return 0

        if args.output_dir is not None:
            try:
                Path(args.output_dir).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise InaccessibleFileError(args.output_dir, "cannot be created") from e

        batch = ConversionBatch(
            files,
            TranslationConfig.from_flags(crlf=args.crlf),
            output_dir=args.output_dir,
            max_workers=args.jobs,
        )
        reports = batch.run()
    except Qasm2StimError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    logger.info(
        f"Converted {len(reports)} file(s) in {batch.total_run_time:.2f} milliseconds."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
