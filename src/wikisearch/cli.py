"""
Command-line search over a Wikipedia abstract dump.

Usage:
    wikisearch --corpus data/enwiki-latest-abstract1.xml          # interactive
    wikisearch --corpus data/abstracts.xml cat dog                # one query
    echo "small cat" | wikisearch --mode regex                    # baseline scan

The corpus is loaded and indexed once. Queries are then read one per
line until end-of-input (Ctrl-D) or ":quit".
"""

import argparse
import logging
import sys
import time
from typing import List, Optional, Sequence, TextIO

from .analysis import Analyzer, default_analyzer
from .baseline import search_naive, search_regex
from .config import Settings, load_env_files, parse_log_level, parse_match_policy
from .errors import WikiSearchError
from .index import InvertedIndex, MatchPolicy, build_index, search
from .loader import load_documents
from .logging_config import setup_logging
from .models import Document, documents_by_id
from .presenter import format_documents, format_result

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset([":quit", ":q", ":exit"])
PROMPT = "search> "


class SearchSession:
    """
    Everything one run needs to answer queries.

    Holds the loaded documents and the index built from them. The index
    is read-only; the session only passes it to search().
    """

    def __init__(
        self,
        documents: List[Document],
        mode: str = "index",
        policy: MatchPolicy = MatchPolicy.MATCHED_TERMS,
        limit: int = 5,
        analyzer: Optional[Analyzer] = None,
    ):
        self.documents = documents
        self.by_id = documents_by_id(documents)
        self.mode = mode
        self.policy = policy
        self.limit = limit
        self.analyzer = analyzer or default_analyzer
        self.index: Optional[InvertedIndex] = None

        if mode == "index":
            self.index = build_index(documents, self.analyzer)

    def run_query(self, query: str) -> str:
        """Evaluate one query and return the rendered output."""
        started = time.perf_counter()

        if self.mode == "regex":
            output = format_documents(query, search_regex(self.documents, query), self.limit)
        elif self.mode == "naive":
            output = format_documents(query, search_naive(self.documents, query), self.limit)
        else:
            result = search(self.index, query, self.analyzer, self.policy)
            output = format_result(result, self.by_id, self.limit)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Query {query!r} ({self.mode}) answered in {elapsed_ms:.2f} ms")
        return output


def read_eval_loop(session: SearchSession, stdin: TextIO, stdout: TextIO, interactive: bool = False) -> int:
    """
    Answer queries line by line until end-of-input or a quit command.

    Returns:
        Number of queries answered
    """
    answered = 0

    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()

        line = stdin.readline()
        if not line:  # EOF
            if interactive:
                stdout.write("\n")
            break

        query = line.strip()
        if not query:
            continue
        if query in QUIT_COMMANDS:
            break

        stdout.write(session.run_query(query) + "\n")
        answered += 1

    return answered


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikisearch",
        description="Keyword search over a Wikipedia abstract dump (all terms must match)",
    )
    parser.add_argument(
        "query",
        nargs="*",
        help="Run a single query and exit (default: read queries from stdin)",
    )
    parser.add_argument(
        "--corpus",
        help="Path to enwiki abstract XML dump (default: $WIKISEARCH_CORPUS)",
    )
    parser.add_argument(
        "--mode",
        choices=["index", "regex", "naive"],
        default="index",
        help="index: inverted index (default); regex/naive: linear baseline scans",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in MatchPolicy],
        help="matched: ignore unknown terms; all: every term must be indexed",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum results shown per query (default: $WIKISEARCH_RESULT_LIMIT or 5)",
    )
    parser.add_argument(
        "--log-level",
        help="Console log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = build_argument_parser().parse_args(argv)

    try:
        load_env_files()
        settings = Settings.from_env()

        console_level = parse_log_level(args.log_level) if args.log_level else settings.log_level
        setup_logging(
            log_file=None if args.no_log_file else settings.log_file,
            console_level=console_level,
            file_level=logging.DEBUG,  # Always DEBUG in file for troubleshooting
        )

        policy = parse_match_policy(args.policy) if args.policy else settings.match_policy
        limit = args.limit if args.limit is not None else settings.result_limit
        if limit < 1:
            logger.error(f"--limit must be at least 1, got {limit}")
            return 2

        documents = load_documents(args.corpus or settings.corpus_path)
        session = SearchSession(documents, mode=args.mode, policy=policy, limit=limit)

    except WikiSearchError as e:
        logger.error(str(e))
        return 1

    if args.query:
        stdout.write(session.run_query(" ".join(args.query)) + "\n")
        return 0

    answered = read_eval_loop(session, stdin, stdout, interactive=stdin.isatty())
    logger.info(f"Session finished: {answered} queries answered")
    return 0


if __name__ == "__main__":
    sys.exit(main())
