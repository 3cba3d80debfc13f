#!/usr/bin/env python3
"""
Bloomguard
Screens URLs and other strings against a blocklist using a Bloom filter
"""

import argparse
import asyncio
import sys

from bloomguard import BloomFilter, FilterConfig, CorpusLoader, Screener, ErrorHandler
from bloomguard.corpus.screener import POSITIVE_VERDICT, NEGATIVE_VERDICT
from bloomguard.monitoring import LogManager, MetricsCollector


def print_report(report):
    """Print per-line results, totals and the flagged list"""
    if report.error:
        print(f"Unable to open file: {report.source} ({report.error})")
        return

    print(f"Total Positives: {report.positives}")
    print(f"Total Negatives: {report.negatives}")

    if report.flagged:
        print("\nMalicious URLs:")
        for url in report.flagged:
            print(url)
    else:
        print("\nNo malicious URLs found.")


async def run_menu(bloom_filter, screener, metrics, log_manager):
    """Minimal interactive menu"""
    while True:
        print("\n--- Bloom Filter Menu ---")
        print(f"Bitset size: {bloom_filter.size()}")
        print(f"Hash functions used: {', '.join(bloom_filter.hash_family.names)}")
        print("1. Test a file")
        print("2. Test a website string")
        print("3. Show statistics")
        print("4. Exit")

        try:
            choice = int(input("Enter your choice: ").strip())
        except EOFError:
            break
        except ValueError:
            print("Invalid input. Please enter a number between 1 and 4.")
            continue

        if choice == 1:
            try:
                test_filename = input("Enter the file name to test: ").strip()
            except EOFError:
                break
            report = await screener.screen_file(test_filename)
            for url, result in report.results:
                print(f"Checking {url} : {POSITIVE_VERDICT if result else NEGATIVE_VERDICT}")
            print_report(report)
            log_manager.log_performance_event('screen_file', **report.to_dict())
        elif choice == 2:
            try:
                website = input("Enter the website URL to test: ").strip()
            except EOFError:
                break
            print(f"The website {website} is {screener.verdict(website)}.")
        elif choice == 3:
            snapshot = metrics.get_current_snapshot()
            filter_stats = snapshot['filter']
            print(f"Items inserted: {filter_stats['items_inserted']}")
            print(f"Bits set: {filter_stats['bits_set']} ({filter_stats['fill_ratio']:.4%})")
            print(f"Expected false positive rate: {filter_stats['expected_false_positive_rate']:.6f}")
            print(f"Process memory: {snapshot['process']['memory_rss_mb']:.1f} MB")
        elif choice == 4:
            break
        else:
            print("Invalid choice. Please enter a number between 1 and 4.")


async def main(args):
    """Main entry point"""
    log_manager = LogManager(log_dir=args.log_dir, log_level=args.log_level)

    bloom_filter = BloomFilter(FilterConfig(bit_array_size=args.bits))
    error_handler = ErrorHandler()
    metrics = MetricsCollector(bloom_filter)

    loader = CorpusLoader(bloom_filter, error_handler, metrics=metrics)
    inserted = await loader.load(args.corpus)
    if error_handler.last_error():
        print(f"Unable to open file: {args.corpus}", file=sys.stderr)
    log_manager.log_performance_event('load_corpus', source=args.corpus, inserted=inserted)

    screener = Screener(bloom_filter, error_handler, metrics=metrics)
    await run_menu(bloom_filter, screener, metrics, log_manager)

    log_manager.export_metrics_json(metrics.get_current_snapshot())
    log_manager.close()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Screen strings against a blocklist with a Bloom filter")
    parser.add_argument("--corpus", default="malicious.csv", help="Blocklist file, one item per line")
    parser.add_argument("--bits", type=int, default=1_000_001, help="Bit array size")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-dir", default="bloomguard_data/logs")
    return parser.parse_args(argv)


if __name__ == "__main__":
    try:
        asyncio.run(main(parse_args()))
    except KeyboardInterrupt:
        print("\nStopped by user")
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
