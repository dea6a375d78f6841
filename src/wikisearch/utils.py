"""Utility functions for corpus handling"""

import hashlib
from pathlib import Path
from typing import Union

# Abstract dumps run to hundreds of MB; never read them in one go for hashing
HASH_CHUNK_SIZE = 1024 * 1024


def calculate_file_hash(file_path_or_content: Union[str, Path, bytes]) -> str:
    """
    Calculate SHA256 fingerprint of a corpus file

    Args:
        file_path_or_content: File path (str/Path) or raw content (bytes)

    Returns:
        Hexadecimal hash string (64 characters)

    Examples:
        >>> calculate_file_hash("data/enwiki-latest-abstract1.xml")
        '9f86d081...'

        >>> calculate_file_hash(b"<feed></feed>")
        'c0b1a2f3...'
    """
    digest = hashlib.sha256()

    if isinstance(file_path_or_content, bytes):
        digest.update(file_path_or_content)
        return digest.hexdigest()

    with open(Path(file_path_or_content), "rb") as f:  # Binary mode: hash exact bytes
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            digest.update(chunk)

    return digest.hexdigest()
