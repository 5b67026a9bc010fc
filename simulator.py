import argparse
import sys

from data_loader import load_test_data
from display import algorithm_label, display
from errors import PageTableError, TraceFormatError
from page_table import PageTable
from replacement import Algorithm

ALGORITHMS = list(Algorithm)


def run_trace(page_table, references):
    for page in references:
        page_table.access(page)
    return page_table


def run_scenario(scenario, algorithm, verbose=False):
    page_table = PageTable(scenario.page_count, scenario.frame_count,
                           algorithm, verbose=verbose)
    return run_trace(page_table, scenario.references)


def compare_algorithms(scenario, algorithms=None):
    if algorithms is None:
        algorithms = ALGORITHMS
    results = {}
    for algorithm in algorithms:
        page_table = run_scenario(scenario, algorithm)
        results[Algorithm.parse(algorithm)] = page_table.faults
        page_table.destroy()
    return results


def run_simulation(filename, algorithm, verbose=False):
    print(f"\n{'='*60}")
    print(f"Running {algorithm_label(algorithm)} algorithm on {filename}")
    print(f"{'='*60}")

    scenario = load_test_data(filename)
    page_table = run_scenario(scenario, algorithm, verbose=verbose)

    print(f"\nResults:")
    display(page_table)
    print(page_table.stats)
    print(f"{'='*60}\n")

    return page_table


def print_summary(filename, results):
    print("\n" + "="*60)
    print(f"SUMMARY: {filename}")
    print("="*60)
    print(f"{'Algorithm':<10} {'Page Faults':<15}")
    print("-" * 30)
    for algorithm, faults in results.items():
        print(f"{algorithm_label(algorithm):<10} {faults:<15}")


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Simulate page replacement over a reference trace")
    parser.add_argument("trace", help="reference trace file")
    parser.add_argument("-a", "--algorithm", default="ALL",
                        choices=[a.name for a in ALGORITHMS] + ["ALL"],
                        type=str.upper,
                        help="replacement algorithm (default: run all and compare)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show page table creation")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.algorithm == "ALL":
        algorithms = ALGORITHMS
    else:
        algorithms = [Algorithm[args.algorithm]]

    results = {}
    try:
        for algorithm in algorithms:
            page_table = run_simulation(args.trace, algorithm, verbose=args.verbose)
            results[algorithm] = page_table.faults
            page_table.destroy()
    except (TraceFormatError, PageTableError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if len(results) > 1:
        print_summary(args.trace, results)
    return 0


if __name__ == '__main__':
    sys.exit(main())
