"""
Rule that accepts GS1 barcodes (GTIN-8/12/13/14, GSIN, SSCC).
"""

from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.barcode import is_valid_barcode


class BarcodeRule(BaseRule):
    """
    Accepts codes with an assigned GS1 prefix and a correct mod-10 check digit.
    """

    def __init__(self):
        super().__init__(predicate=is_valid_barcode, name="barcode")
