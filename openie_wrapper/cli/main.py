"""
Main CLI entry point for openie-wrapper.

Runs the extraction engine over the given files, prints the extracted
triples and optionally renders them with Graphviz. Settings can come from a
YAML configuration file or from command-line flags.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from colorama import init, Fore, Style

from ..__version__ import __version__
from ..exceptions import OpenIEError
from .config import load_config, create_default_config

init()


def print_ok(msg):
    """Print success message in green."""
    print(f"{Fore.GREEN}[OK] {msg}{Style.RESET_ALL}")


def print_error(msg):
    """Print error message in red."""
    print(f"{Fore.RED}[ERROR] {msg}{Style.RESET_ALL}", file=sys.stderr)


def print_warn(msg):
    """Print warning message in yellow."""
    print(f"{Fore.YELLOW}[WARN] {msg}{Style.RESET_ALL}", file=sys.stderr)


def print_info(msg):
    """Print info message in cyan."""
    print(f"{Fore.CYAN}[INFO] {msg}{Style.RESET_ALL}", file=sys.stderr)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def write_report(output_path, input_files, extractions):
    """Save extractions as a JSON report."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    report = {
        "input_files": list(input_files),
        "extractions": [e.to_dict() for e in extractions],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    return output_path


def cmd_init_config(args):
    """Create default configuration file."""
    output = args.init_config
    try:
        create_default_config(output)
        print_ok(f"Created configuration file: {output}")
        print_info(f"Edit this file and use: openie-wrapper --config {output}")
        return 0
    except OSError as e:
        print_error(f"Failed to create config: {e}")
        return 1


def cmd_extract(args):
    """Run the engine and print the extracted triples."""
    from ..engine import ExtractionRunner

    config = {}
    if args.config:
        try:
            config = load_config(args.config)
        except (FileNotFoundError, OpenIEError) as e:
            print_error(str(e))
            return 1
        print_info(f"Loaded config from {args.config}")

    if args.engine_home:
        config.setdefault("engine", {})["home"] = args.engine_home
    if args.workspace:
        config.setdefault("workspace", {})["root"] = args.workspace

    try:
        runner = ExtractionRunner(
            args.input_files,
            verbose=args.verbose,
            render_graph=args.graphviz,
            config=config,
        )
        extractions = runner.run()
    except OpenIEError as e:
        print_error(str(e))
        return 1

    if not extractions:
        print_warn("Engine produced no extractions")

    if args.output:
        saved = write_report(args.output, runner.input_files, extractions)
        print_ok(f"Report saved to: {saved}")

    print([list(e) for e in extractions])
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="openie-wrapper",
        description="Extract (subject; relation; object) triples with Stanford OpenIE",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  openie-wrapper -f text.txt\n"
            "  openie-wrapper -f text.txt -f text2.txt --graphviz"
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-f", "--file", dest="input_files", action="append", metavar="INPUT_FILE",
                        help="An input file to parse (repeatable)")
    parser.add_argument("-i", "--input_file", dest="input_files", action="append", metavar="INPUT_FILE",
                        help="Alias for --file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Run in verbose mode")
    parser.add_argument("-g", "--graphviz", action="store_true", help="Generate graphviz image")
    parser.add_argument("-c", "--config", help="YAML configuration file")
    parser.add_argument("-o", "--output", help="Save extractions to a JSON report")
    parser.add_argument("--engine-home", help="Stanford OpenIE installation directory")
    parser.add_argument("--workspace", help="Directory for per-run workspaces (default: <tmp>/openie)")
    parser.add_argument("--init-config", nargs="?", const="openie-config.yaml", metavar="PATH",
                        help="Create a default configuration file and exit")
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.init_config:
        return cmd_init_config(args)

    return cmd_extract(args)


if __name__ == "__main__":
    sys.exit(main())
