"""pdbscope command-line application."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from pdbscope import config
from pdbscope.errors import PdbscopeError, error_result
from pdbscope.logging_config import configure_logging
from pdbscope.model import Model
from pdbscope.services.pdb_writer import write_pdb
from pdbscope.worker import Worker

logger = logging.getLogger(__name__)


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="Parse a PDB file and summarize its structure",
    )
    parser.add_argument("pdb_path", help="Path to a PDB file")
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write logs to this file instead of stderr",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "json"),
        default="text",
        help="Summary output format",
    )
    parser.add_argument(
        "--tables",
        dest="tables",
        action="store_true",
        help="Include residue/chain/element tables in the output",
    )
    parser.add_argument(
        "--export-pdb",
        dest="export_pdb",
        default=None,
        help="Write the parsed atoms back out as PDB text",
    )
    return parser.parse_args(argv[1:])


def format_summary(summary: Dict[str, object]) -> str:
    """Render a summary payload as human-readable text.

    Parameters
    ----------
    summary
        Payload returned by :meth:`Model.get_summary`.

    Returns
    -------
    str
        Multi-line summary text.
    """

    lines = []
    heading = summary.get("pdb_id") or summary.get("source") or "structure"
    lines.append(f"{heading}: {summary.get('title') or '(untitled)'}")
    lines.append(
        "atoms={natoms} bonds={nbonds} residues={nresidues} chains={chains}".format(
            natoms=summary["natoms"],
            nbonds=summary["nbonds"],
            nresidues=summary["nresidues"],
            chains=",".join(summary["chains"]),
        )
    )
    for item in summary["annotations"]:
        lines.append(f"  {item['label']}: {item['value']}")
    box = summary["bounding_box"]
    lines.append(
        "bounds min=({:.3f}, {:.3f}, {:.3f}) max=({:.3f}, {:.3f}, {:.3f})".format(
            *box["min"], *box["max"]
        )
    )
    lines.append("center=({:.3f}, {:.3f}, {:.3f})".format(*summary["center_of_mass"]))
    return "\n".join(lines)


def run(args: argparse.Namespace, worker: Optional[Worker] = None) -> int:
    """Load the requested file and print its summary.

    Parameters
    ----------
    args
        Parsed command-line arguments.
    worker
        Optional worker; one is created when omitted.

    Returns
    -------
    int
        Process exit code.
    """

    owned = worker is None
    worker = worker or Worker()
    model = Model(cpu_submit=worker.submit)
    try:
        model.load_file(args.pdb_path)
        summary = model.get_summary()
        if args.tables:
            summary["tables"] = model.get_info_tables()["tables"]
        if args.export_pdb:
            with open(args.export_pdb, "w", encoding="utf-8") as handle:
                handle.write(write_pdb(model.get_structure().atoms))
            logger.info("Exported atoms to %s", args.export_pdb)
    except PdbscopeError as exc:
        logger.error("Failed to load %s: %s", args.pdb_path, exc.message)
        print(json.dumps(exc.to_result()), file=sys.stderr)
        return 1
    except OSError as exc:
        logger.error("Failed to write %s: %s", args.export_pdb, exc)
        print(json.dumps(error_result("write_failed", str(exc))), file=sys.stderr)
        return 1
    finally:
        if owned:
            worker.shutdown()

    if args.output_format == "json":
        print(json.dumps(summary, ensure_ascii=False))
    else:
        print(format_summary(summary))
        for name, table in summary.get("tables", {}).items():
            print(f"\n[{name}]")
            print("\t".join(table["columns"]))
            for row in table["rows"]:
                print("\t".join("" if value is None else str(value) for value in row))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the pdbscope command line.

    Returns
    -------
    int
        Process exit code.
    """

    args = _parse_args(argv if argv is not None else sys.argv)
    configure_logging(args.log_file, args.log_level)
    logger.debug("Starting %s", config.APP_NAME)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
