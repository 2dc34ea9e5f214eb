"""
Field validation command-line interface.

This module provides a small command-line utility that validates values of a
single kind (CPF, CNPJ, barcode, e-mail, date, ...) read from the command
line or, when no value is given, one per line from standard input.  Each
value is echoed with its verdict, tab separated, and the exit status tells
whether every value was valid.

---

# Quick ways to run the script

1. Values as arguments

>>> field-validator cpf 11144477735 11144477736

2. Piping data

>>> cat barcodes.txt | field-validator barcode > report.tsv

3. Dates with a custom mask

>>> field-validator date 2024-02-29 --mask yyyy-MM-dd

4. Formatted documents

>>> field-validator cnpj 11.222.333/0001-81 --strip-mask
"""

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Optional

from field_validator_lib.core.constants import DEFAULT_DATE_MASK, LOG_LEVEL
from field_validator_lib.exceptions import UnknownRuleError
from field_validator_lib.utils.hashing import hash_md5
from field_validator_lib.utils.logger import prepare_logger
from field_validator_lib.validators import (
    is_integer,
    is_real,
    is_number,
    is_hex,
    is_alphabetic,
    is_email,
    is_valid_date,
    is_valid_cpf,
    is_valid_cnpj,
    inspect_barcode,
    strip_mask,
)

OK = "OK"
INVALID = "INVALID"

_SIMPLE_CHECKERS: Dict[str, Callable[[str], bool]] = {
    "cpf": is_valid_cpf,
    "cnpj": is_valid_cnpj,
    "email": is_email,
    "integer": is_integer,
    "real": is_real,
    "number": is_number,
    "hex": is_hex,
    "alphabetic": is_alphabetic,
}

KINDS = sorted(list(_SIMPLE_CHECKERS) + ["barcode", "date", "md5"])


def get_checker(kind: str) -> Callable[[str], bool]:
    """
    Return the predicate registered for *kind*.

    Only kinds producing a plain verdict are registered; ``barcode``,
    ``date`` and ``md5`` are handled by :func:`check_value`.
    """
    try:
        return _SIMPLE_CHECKERS[kind]
    except KeyError:
        raise UnknownRuleError(f"Unknown field kind: {kind!r}") from None


def check_value(
    kind: str, value: str, mask: str = DEFAULT_DATE_MASK, strip: bool = False
) -> tuple[bool, str]:
    """
    Validate *value* as *kind* and build its output line.

    Returns
    -------
    tuple[bool, str]
        The verdict and the tab separated line to print.
    """
    if kind == "md5":
        return True, f"{value}\t{hash_md5(value)}"

    if strip and kind in ("cpf", "cnpj", "barcode"):
        value = strip_mask(value)

    if kind == "barcode":
        inspection = inspect_barcode(value)
        verdict = OK if inspection.valid else INVALID
        details = inspection.country if inspection.valid else inspection.error
        return inspection.valid, f"{value}\t{verdict}\t{details}"

    if kind == "date":
        valid = is_valid_date(value, mask)
    else:
        valid = get_checker(kind)(value)
    return valid, f"{value}\t{OK if valid else INVALID}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="field-validator",
        description="Validate form field values (CPF, CNPJ, barcodes, dates, ...).",
    )
    parser.add_argument("kind", choices=KINDS, help="Kind of value to validate.")
    parser.add_argument(
        "values",
        nargs="*",
        help="Values to validate (defaults to one value per line of STDIN).",
    )
    parser.add_argument(
        "--mask",
        default=DEFAULT_DATE_MASK,
        help="Date mask for the 'date' kind, e.g. dd/MM/yyyy or %%Y-%%m-%%d.",
    )
    parser.add_argument(
        "--strip-mask",
        action="store_true",
        help="Remove punctuation from CPF, CNPJ and barcode values first.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the per-value report, only set the exit status.",
    )
    return parser


def _read_values(values: List[str], stream) -> Iterable[str]:
    if values:
        return values
    return (line.rstrip("\r\n") for line in stream if line.strip())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # Handler on the package logger also shows why the validators reject values
    prepare_logger("field_validator_lib", level=LOG_LEVEL)
    logger = logging.getLogger("field_validator_lib.cli")

    all_valid = True
    checked = 0
    for value in _read_values(args.values, sys.stdin):
        valid, line = check_value(
            args.kind, value, mask=args.mask, strip=args.strip_mask
        )
        checked += 1
        all_valid = all_valid and valid
        if not args.quiet:
            sys.stdout.write(line + "\n")

    logger.debug(
        "Checked %d %s value(s), all valid: %s", checked, args.kind, all_valid
    )
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
