"""
Form-level validation built on top of the pure validators.

The public API consists of:
- FormValidator (core)
- FieldRuleI (interface)
- Concrete rule implementations (CpfRule, CnpjRule, BarcodeRule, EmailRule, ...)
"""
