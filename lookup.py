import argparse
import time
import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog
from trie import Trie
from wordlist import DEFAULT_WORDS_URL, DEFAULT_TIMEOUT, build_trie


def _print_result(label, value):
    color = Fore.GREEN if value else Fore.RED
    print(color + f"{label} = {value}" + Fore.RESET)


def run_lookup(argv=None):
    parser = argparse.ArgumentParser(description="Trie lookup")
    parser.add_argument(
        "--words", type=str, default=DEFAULT_WORDS_URL, help="Word list file or http(s) URL (default: %(default)s)"
    )
    parser.add_argument("--no-load", action="store_true", help="Start from an empty trie instead of loading --words")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="Download timeout in seconds (default: %(default)s)"
    )
    parser.add_argument("--insert", action="append", default=[], metavar="WORD", help="Extra word to insert (repeatable)")
    parser.add_argument("--contains", action="append", default=[], metavar="WORD", help="Exact-word query (repeatable)")
    parser.add_argument("--prefix", action="append", default=[], metavar="PREFIX", help="Prefix query (repeatable)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    if args.no_load:
        trie = Trie()
        vlog("Starting from an empty trie")
    else:
        try:
            trie = build_trie(args.words, timeout=args.timeout)
        except FileNotFoundError:
            log_with_time(f"Could not find word list: {args.words}", color=Fore.RED)
            return 1
        except UnicodeDecodeError as e:
            log_with_time(f"Error decoding word list: {e}", color=Fore.RED)
            return 1
        except requests.RequestException as e:
            log_with_time(f"Error downloading word list: {e}", color=Fore.RED)
            return 1
        except OSError as e:
            log_with_time(f"Error reading word list: {e}", color=Fore.RED)
            return 1

    for word in args.insert:
        trie.insert(word)
    if args.insert:
        vlog(f"Inserted {len(args.insert)} extra words")

    for word in args.contains:
        _print_result(f"contains({word!r})", trie.contains(word))
    for prefix in args.prefix:
        _print_result(f"starts_with({prefix!r})", trie.starts_with(prefix))
    return 0
