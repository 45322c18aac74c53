import argparse

from phonebook_search.data_loader import load_phonebook, generate_phonebook, write_phonebook, DIRECTORY_FILE, FIND_FILE
from phonebook_search.strategies import run_strategies, DEFAULT_BUDGET_FACTOR
from phonebook_search.reporting import format_report, average_reports, summary_table


def run_benchmark(directory: list[str], names_to_find: list[str], num_runs: int = 1,
                  budget_factor: float = DEFAULT_BUDGET_FACTOR):
    """
    Runs the four search strategies `num_runs` times on the same phone book,
    printing every report of the first run and a table of averaged timings.
    """
    print("--- Phone Book Search Benchmark ---")
    print(f"Directory records: {len(directory)}, names to find: {len(names_to_find)}, runs: {num_runs}")

    all_runs = []
    for run in range(num_runs):
        if num_runs > 1:
            print(f"\nRun {run+1}/{num_runs}...")
        verbose = run == 0
        reports = run_strategies(
            directory, names_to_find, budget_factor=budget_factor,
            progress_callback=(lambda name: print(f"\nStart searching... ({name})")) if verbose else None,
        )
        if verbose:
            for report in reports:
                print(format_report(report))
        all_runs.append(reports)

    print("\n\n--- Averaged Benchmark Results ---")
    print(summary_table(average_reports(all_runs), num_runs))
    print("-" * 80)
    return all_runs


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compare linear, jump, binary and hash table search on a phone book.")
    parser.add_argument("--data-dir", default=".",
                        help="Directory holding the phone book files (default: current directory).")
    parser.add_argument("--directory", default=DIRECTORY_FILE,
                        help="Phone book file, one '<id> <name>' record per line.")
    parser.add_argument("--find", default=FIND_FILE,
                        help="File with the names to look up, one per line.")
    parser.add_argument("--budget-factor", type=float, default=DEFAULT_BUDGET_FACTOR,
                        help="Bubble sort is abandoned after this many times the linear search duration.")
    parser.add_argument("--runs", type=int, default=1,
                        help="Number of benchmark runs to average over.")
    parser.add_argument("--generate", type=int, default=0,
                        help="If greater than 0, benchmark a synthetic phone book of this many records instead of the files.")
    parser.add_argument("--queries", type=int, default=None,
                        help="Number of synthetic names to find (default: a tenth of --generate).")
    parser.add_argument("--miss-ratio", type=float, default=0.1,
                        help="Share of synthetic names that are absent from the phone book.")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed for the synthetic phone book.")
    parser.add_argument("--save-dir", default=None,
                        help="Write the synthetic phone book files to this directory.")
    args = parser.parse_args()

    if args.generate > 0:
        num_queries = args.queries if args.queries is not None else max(args.generate // 10, 1)
        directory, names_to_find = generate_phonebook(args.generate, num_queries, args.miss_ratio, args.seed)
        if args.save_dir:
            write_phonebook(args.save_dir, directory, names_to_find, args.directory, args.find)
    else:
        directory, names_to_find = load_phonebook(args.data_dir, args.directory, args.find)

    if not directory:
        print("Could not load phone book data. Exiting.")
    else:
        run_benchmark(directory, names_to_find, max(args.runs, 1), args.budget_factor)
