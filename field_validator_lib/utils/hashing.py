"""
Content hashing helpers.
"""

import hashlib
import logging

logger = logging.getLogger(__name__)


def hash_md5(value: str) -> str:
    """
    Return the MD5 digest of *value* as 32 lowercase hexadecimal characters.

    The text is encoded as UTF-8 before hashing.  When the running
    interpreter refuses to provide MD5 (e.g. a FIPS-restricted OpenSSL build)
    an empty string is returned instead of raising.

    Parameters
    ----------
    value: str
        Text to hash.

    Returns
    -------
    str
        Hex digest, or ``""`` when MD5 is unavailable or the text cannot be
        encoded (lone surrogates).
    """
    if value is None:
        return ""

    try:
        data = value.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.warning("Cannot encode value as UTF-8 for hashing: %s", exc)
        return ""

    try:
        digest = hashlib.md5(data)
    except ValueError as exc:
        logger.warning("MD5 is not available in this environment: %s", exc)
        return ""
    return digest.hexdigest()
