"""
CLI entry point: statement-parser.

Usage:
    # Parse one statement
    statement-parser /path/hyundai_202508.xls -o /path/out

    # Parse every spreadsheet of a folder (one Excel each + consolidated)
    statement-parser /path/statements -o /path/out

    # Encrypted statement
    statement-parser /path/chak_202508.xlsx -p 19901225

    # Without -o, the Excel goes next to the input
    statement-parser /path/hyundai_202508.xls

This module is the ONLY place where the components are assembled for a
terminal run: console logger, password vault, Excel writer and the
processor from the factory. No business logic, only wiring.
"""

import argparse
import sys
from pathlib import Path

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.vaults.in_memory_vault import InMemoryPasswordVault
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import OutputError
from src.infrastructure.factory import create_processor
from src.infrastructure.registry import create_default_registry


def main() -> None:
    """Main CLI entry point."""
    args = _parse_args()

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Assemble components ---
    logger = ConsoleLogger()
    vault = InMemoryPasswordVault()
    registry = create_default_registry()
    excel_writer = ExcelWriter()

    processor = create_processor(logger, vault=vault, registry=registry)

    # --- Output directory ---
    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path

    print("=" * 60)
    print("STATEMENT PARSER")
    print("=" * 60)
    print(f"  Input:   {input_path}")
    print(f"  Output:  {output_dir}")
    print(f"  Issuers: {', '.join(s.value for s in registry.priority)}")
    print()

    if input_path.is_file():
        results = [(input_path, processor.process_file(input_path, args.password))]
    elif input_path.is_dir():
        results = processor.process_directory(input_path, args.password)
    else:
        print(f"❌ Path does not exist: {input_path}")
        sys.exit(1)

    succeeded = [(path, result) for path, result in results if result.success]

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for path, result in succeeded:
            output_file = excel_writer.write_single(
                result, output_dir / f"transactions_{path.stem}.xlsx", path.name
            )
            logger.log_export_complete(output_file)

        if len(results) > 1:
            consolidated = excel_writer.write_consolidated(
                [(path.name, result) for path, result in results],
                output_dir / "consolidated.xlsx",
            )
            logger.log_export_complete(consolidated)
    except OutputError as e:
        print(f"❌ {e}")
        sys.exit(1)

    logger.print_summary()

    if not succeeded:
        print("\n❌ No file could be processed.")
        sys.exit(1)


def _parse_args() -> argparse.Namespace:
    """Parses the command line arguments."""
    parser = argparse.ArgumentParser(
        description="Household card/bank statement parser and consolidator",
        epilog="Example: statement-parser /path/statements -o /path/out",
    )

    parser.add_argument(
        "input_path",
        help="Path to a statement spreadsheet or to a directory of them",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Output directory for the generated Excel files. "
        "Defaults to the input's directory.",
    )

    parser.add_argument(
        "-p",
        "--password",
        dest="password",
        help="Password of an encrypted statement. For a directory it is "
        "offered to every encrypted file of the batch.",
    )

    return parser.parse_args()


if __name__ == "__main__":
    main()
