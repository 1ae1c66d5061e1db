# wordlist.py
# Read word lists from disk or over HTTP and load them into a Trie.

import time
import requests
from colorama import Fore

from trie import Trie
from utils import log_with_time, vlog


DEFAULT_WORDS_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
DEFAULT_TIMEOUT = 10


def is_url(source):
    return source.startswith(("http://", "https://"))


def parse_words(text):
    """Split ``text`` into words: one per line, blanks and ``#`` comments skipped."""
    words = []
    for line in text.splitlines():
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        words.append(w)
    return words


def load_words(source, timeout=DEFAULT_TIMEOUT):
    """Return the words in ``source``, a file path or an http(s) URL.

    Network and file errors are not caught here; callers decide how to report them.
    """
    t0 = time.time()
    if is_url(source):
        log_with_time(f"⟳ Downloading word list from {source}…")
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        resp.encoding = "utf-8"
        text = resp.text
    else:
        log_with_time(f"⟳ Reading word list from {source}…")
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
    words = parse_words(text)
    vlog(f"Word list parsed ({len(words)} words)", t0)
    return words


def build_trie(source, timeout=DEFAULT_TIMEOUT):
    words = load_words(source, timeout=timeout)
    t0 = time.time()
    trie = Trie.build(words)
    vlog("Trie built", t0)
    log_with_time(f"✅ {len(words)} words", color=Fore.GREEN)
    return trie
