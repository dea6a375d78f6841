"""Exceptions raised outside the analysis/index core"""


class WikiSearchError(Exception):
    """Base class for errors the CLI reports and exits on"""


class CorpusLoadError(WikiSearchError):
    """Corpus file missing, unreadable or malformed, with actionable message"""


class ConfigurationError(WikiSearchError):
    """Invalid setting value (environment or command line)"""
