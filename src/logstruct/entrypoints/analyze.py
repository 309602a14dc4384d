import argparse
import json
import logging
import os

from ..structure import StructureAnalyzer
from ..utils.logging import setup_logger


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Mine the structure of a log file."
    )
    parser.add_argument(
        "log_file",
        type=str,
        nargs="?",
        default="-",
        help="Path to the log file, - for stdin",
    )
    parser.add_argument(
        "-p",
        "--report-progress",
        action="store_true",
        help="Display progress indicators on stderr",
        default=False,
    )
    parser.add_argument(
        "--config_file", type=str, help="Path to the config file"
    )
    parser.add_argument(
        "--print_raw",
        action="store_true",
        help="Also print the tree before it is refined",
        default=False,
    )
    parser.add_argument(
        "--save_tree",
        type=str,
        help="Path to save the refined tree (.dill or JSON)",
        default=None,
    )
    parser.add_argument(
        "--log_level",
        type=str,
        help="Logging level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args(argv)

    if args.config_file:
        with open(args.config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
        if "data_path" in config:
            args.log_file = config["data_path"]
        if "results_path" in config:
            os.makedirs(config["results_path"], exist_ok=True)
            args.save_tree = os.path.join(config["results_path"], "tree.json")
        args.report_progress = (
            args.report_progress or config.get("report_progress", False)
        )

    setup_logger(getattr(logging, args.log_level))

    analyzer = StructureAnalyzer(
        report_progress=args.report_progress,
        print_raw=args.print_raw,
        output=args.save_tree,
    )
    analyzer(args.log_file)
    return 0


if __name__ == "__main__":
    main()
