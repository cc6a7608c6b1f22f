"""
Command-line interface for cagepack.

Runs the packing search and prints every canonical packing that uses the
requested number of pieces (three by default). With no arguments the only
output is the list of solutions.
"""

import argparse
import os
import sys
import yaml
from typing import List, Optional

from cagepack.core.cage import Cage, piece_cell_lists
from cagepack.core.config import SearchConfig, load_config, create_default_config, validate_config
from cagepack.search import Search
from cagepack.utils.display import LiveLogger, StatusDisplay
from cagepack.utils.logger import RunLogger, save_results_table, solutions_to_entries


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="cagepack",
        description="cagepack: enumerate maximal packings of 7-cell polycubes in a 3x3x3 cage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print all three-piece packings
  cagepack

  # Same search on 4 processes, with a run log and a CSV table
  cagepack --workers 4 --output-dir logs/ --table logs/solutions.csv

  # Write the default configuration
  cagepack --create-config cagepack.yaml
        """
    )
    parser.add_argument("--config", "-c", help="Path to YAML configuration file")
    parser.add_argument("--pieces", "-p", type=int, help="Report packings with this many pieces")
    parser.add_argument("--workers", "-w", type=int, help="Number of search processes")
    parser.add_argument("--output-dir", "-o", help="Directory for run logs")
    parser.add_argument("--table", help="Write solutions to a .csv or .xlsx table")
    parser.add_argument("--render", help="Directory for one PNG per solution")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    parser.add_argument("--create-config", metavar="PATH", help="Write the default configuration and exit")
    return parser


def print_solutions(solutions: List[Cage]):
    for solution in solutions:
        print("Found a solution!")
        for cells in piece_cell_lists(solution):
            print(cells)


def resolve_config(args: argparse.Namespace) -> SearchConfig:
    """Load the config file, if any, and apply command-line overrides."""
    config = load_config(args.config) if args.config else SearchConfig()
    return config.merged(
        piece_count=args.pieces,
        workers=args.workers,
        output_dir=args.output_dir,
        results_table=args.table,
        render_dir=args.render,
        verbose=True if args.verbose else None,
    )


def run_search(config: SearchConfig) -> List[Cage]:
    """Run the search described by ``config`` and write any requested artefacts."""
    logger = LiveLogger(verbose=config.verbose)
    logger.log_config(config.to_dict())

    search = Search()
    logger.log_info(f"{len(search.candidates)} candidate pieces from {len(search.rotations)} rotations")

    logger.log_phase_start("search")
    solutions = search.solutions(piece_count=config.piece_count, workers=config.workers)
    logger.log_phase_end("search", f"{len(solutions)} packings with {config.piece_count} pieces")
    logger.log_stats(search.stats.to_dict())

    print_solutions(solutions)

    if config.output_dir:
        run_logger = RunLogger(config.output_dir, config.run_name)
        run_logger.log_config(config.to_dict())
        run_logger.log_stats(search.stats.to_dict())
        for index, solution in enumerate(solutions):
            run_logger.log_solution(index, solution)
        log_file = run_logger.save_logs()
        logger.log_info(f"Logs saved to: {log_file}")

    if config.results_table:
        save_results_table(solutions_to_entries(solutions), config.results_table)
        logger.log_info(f"Results table saved to: {config.results_table}")

    if config.render_dir:
        os.environ.setdefault("MPLBACKEND", "Agg")
        from cagepack.utils.visualizer import save_cage_visualization

        os.makedirs(config.render_dir, exist_ok=True)
        for index, solution in enumerate(solutions):
            filename = os.path.join(config.render_dir, f"solution_{index:03d}.png")
            save_cage_visualization(solution, filename, title=f"Solution {index}")
        logger.log_info(f"Rendered {len(solutions)} solutions to: {config.render_dir}")

    return solutions


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    if args.create_config:
        create_default_config(args.create_config)
        StatusDisplay.print_status(f"Default configuration written to {args.create_config}", "success")
        return 0

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    issues = validate_config(config)
    errors = [issue for issue in issues if issue.startswith("ERROR")]
    if errors:
        for error in errors:
            print(f"❌ {error}", file=sys.stderr)
        return 1

    logger = LiveLogger(verbose=config.verbose)
    for issue in issues:
        logger.log_warning(issue)

    run_search(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
