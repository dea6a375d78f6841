"""
Settings from environment variables.

Load order:
1. .env.local in the working directory (local dev, highest priority)
2. .env as fallback
3. Plain process environment

Variables:
    WIKISEARCH_CORPUS        Path to the abstract dump
    WIKISEARCH_MATCH_POLICY  "matched" (default) or "all"
    WIKISEARCH_RESULT_LIMIT  Results shown per query (default 5)
    WIKISEARCH_LOG_FILE      Base log file path (default logs/wikisearch.log)
    LOG_LEVEL                Console log level (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError
from .index import MatchPolicy

logger = logging.getLogger(__name__)

DEFAULT_CORPUS = "data/enwiki-latest-abstract1-medium.xml"
DEFAULT_RESULT_LIMIT = 5
DEFAULT_LOG_FILE = "logs/wikisearch.log"


def load_env_files(base_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Load .env.local (or .env) into os.environ.

    Returns:
        The file that was loaded, or None when neither exists
    """
    base_dir = base_dir or Path.cwd()
    env_local = base_dir / ".env.local"
    env_file = base_dir / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            logger.debug(f"Loaded environment from: {candidate}")
            return candidate

    return None


def parse_match_policy(value: str) -> MatchPolicy:
    try:
        return MatchPolicy(value.strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in MatchPolicy)
        raise ConfigurationError(f"Unknown match policy '{value}'. Choose one of: {choices}") from None


def parse_result_limit(value: str) -> int:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Result limit must be an integer, got '{value}'") from None

    if limit < 1:
        raise ConfigurationError(f"Result limit must be at least 1, got {limit}")
    return limit


def parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level '{value}'")
    return level


@dataclass(frozen=True)
class Settings:
    corpus_path: Path = Path(DEFAULT_CORPUS)
    match_policy: MatchPolicy = MatchPolicy.MATCHED_TERMS
    result_limit: int = DEFAULT_RESULT_LIMIT
    log_level: int = logging.INFO
    log_file: str = DEFAULT_LOG_FILE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (tests)

        Raises:
            ConfigurationError: a variable is set to an invalid value
        """
        env = os.environ if environ is None else environ

        return cls(
            corpus_path=Path(env.get("WIKISEARCH_CORPUS", DEFAULT_CORPUS)),
            match_policy=parse_match_policy(env.get("WIKISEARCH_MATCH_POLICY", MatchPolicy.MATCHED_TERMS.value)),
            result_limit=parse_result_limit(env.get("WIKISEARCH_RESULT_LIMIT", str(DEFAULT_RESULT_LIMIT))),
            log_level=parse_log_level(env.get("LOG_LEVEL", "INFO")),
            log_file=env.get("WIKISEARCH_LOG_FILE", DEFAULT_LOG_FILE),
        )
