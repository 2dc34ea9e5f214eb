"""
Constants and configuration for the field-validator library.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.
"""

import os

from rdl_ml_utils.utils.env import bool_env_value


class _DontChangeMe:
    MAIN_ENV_PREFIX = "FIELD_VALIDATOR_"


# Level of the command line logger
LOG_LEVEL = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO")
    .strip()
    .upper()
)

# Date mask used by ``DateRule`` when none is given
DEFAULT_DATE_MASK = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}DEFAULT_DATE_MASK", "dd/MM/yyyy"
).strip()

# Whether CPF/CNPJ rules remove punctuation (111.444.777-35) before checking
STRIP_DOCUMENT_MASK = bool_env_value(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}STRIP_DOCUMENT_MASK"
)

CPF_LENGTH = 11
CNPJ_LENGTH = 14
CNPJ_WEIGHT_CAP = 9
BARCODE_PREFIX_LENGTH = 3
