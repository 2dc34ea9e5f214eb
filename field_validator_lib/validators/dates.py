"""
Strict date validation against a date mask.

Two mask flavours are accepted:

* a ``strptime`` format, recognised by the presence of ``%`` -
  ``"%d/%m/%Y"``;
* a legacy form mask built from the tokens ``yyyy``, ``yy``, ``MM``, ``dd``,
  ``HH``, ``mm`` and ``ss`` - ``"dd/MM/yyyy"``, ``"yyyy-MM-dd HH:mm:ss"``.

Any other character in a legacy mask is matched literally.
"""

import logging
import re
from datetime import datetime
from functools import lru_cache
from typing import Optional

from field_validator_lib.validators.text import is_empty

logger = logging.getLogger(__name__)

# Longest tokens first, so ``yyyy`` wins over ``yy``
_MASK_TOKENS = {
    "yyyy": "%Y",
    "yy": "%y",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
}

_MASK_TOKEN_REGEX = re.compile("|".join(_MASK_TOKENS))


@lru_cache(maxsize=64)
def to_strptime_format(mask: str) -> str:
    """
    Translate a legacy date mask into a ``strptime`` format.

    Masks that already contain ``%`` are returned unchanged; literal ``%`` is
    therefore not supported in legacy masks.

    >>> to_strptime_format("dd/MM/yyyy")
    '%d/%m/%Y'
    """
    if "%" in mask:
        return mask
    return _MASK_TOKEN_REGEX.sub(lambda m: _MASK_TOKENS[m.group(0)], mask)


def is_valid_date(value: Optional[str], mask: Optional[str]) -> bool:
    """
    Return ``True`` when *value* is a real calendar date laid out as *mask*.

    Parsing is strict: ``"31/02/2024"`` is rejected rather than rolled over to
    March, and trailing characters are not tolerated.

    Parameters
    ----------
    value: str
        The text typed in the form field.
    mask: str
        ``strptime`` format or legacy mask (see module docstring).

    Returns
    -------
    bool
        ``False`` for empty input, an empty mask or any parse failure.
    """
    if is_empty(value) or is_empty(mask):
        return False

    try:
        datetime.strptime(value, to_strptime_format(mask))
    except ValueError as exc:
        logger.debug("Date %r does not match mask %r: %s", value, mask, exc)
        return False
    return True
