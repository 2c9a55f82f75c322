# tfidf_ranker/text_processor/reader.py
"""
Reads raw document text from disk.

Encodings use Node.js-style names (utf8, ucs2, binary, ...), mapped to their
Python codecs. base64 and hex do not decode the file; they return
the file's bytes rendered in that notation.
"""
import base64

from tfidf_ranker.exceptions import ConfigurationError

SUPPORTED_ENCODINGS = {
    'utf8': 'utf-8',
    'utf-8': 'utf-8',
    'ascii': 'ascii',
    'binary': 'latin-1',
    'latin1': 'latin-1',
    'raw': 'latin-1',
    'ucs2': 'utf-16-le',
    'ucs-2': 'utf-16-le',
    'utf16le': 'utf-16-le',
    'utf-16le': 'utf-16-le',
    'base64': None,
    'hex': None,
}


def is_encoding(encoding) -> bool:
    return str(encoding).lower() in SUPPORTED_ENCODINGS


def decode_bytes(data: bytes, encoding: str) -> str:
    name = str(encoding).lower()
    if name == 'base64':
        return base64.b64encode(data).decode('ascii')
    if name == 'hex':
        return data.hex()
    return data.decode(SUPPORTED_ENCODINGS[name], errors='replace')


def read_text(filepath: str, encoding: str = 'utf8') -> str:
    """
    Read a file as text using one of the supported encodings.

    Args:
        filepath (str): File to read
        encoding (str): One of SUPPORTED_ENCODINGS (case-insensitive)

    Returns:
        str: The decoded file contents

    Raises:
        ConfigurationError: If the encoding is unsupported (checked before reading)
        OSError: If the file cannot be read
    """
    if encoding is None:
        encoding = 'utf8'
    if not is_encoding(encoding):
        raise ConfigurationError(f"Invalid encoding: {encoding}")

    with open(filepath, 'rb') as f:
        data = f.read()
    return decode_bytes(data, encoding)
