# bugcount/utils/file_utils.py

"""
Utility functions for file operations in bugcount.

Provides helpers for:
  - Recognizing gzip-compressed bug collections
  - Opening a bug collection as a binary stream
"""

import gzip
import io
from typing import BinaryIO

_GZIP_MAGIC = b"\x1f\x8b"


def is_gzip_file(path: str) -> bool:
    """
    Return True if the file at `path` starts with the gzip magic number.

    :param path: File path to check
    :return: True if gzip-compressed, False otherwise
    """
    with open(path, "rb") as f:
        return f.read(2) == _GZIP_MAGIC


def open_bug_collection(path: str) -> BinaryIO:
    """
    Open a bug collection for reading as a buffered binary stream.

    Gzip-compressed files (FindBugs writes `.xml.gz` collections) are
    decompressed on the fly. The caller owns the returned stream and must
    close it.

    Raises FileNotFoundError if the file does not exist.

    :param path: Path to the bug collection
    :return: Binary stream positioned at the start of the XML document
    """
    if is_gzip_file(path):
        return gzip.open(path, "rb")
    return io.open(path, "rb")
