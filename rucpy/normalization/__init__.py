"""Normalization package.

Turns a raw, user-supplied RUC string into its canonical digits-only
form.  The normalizer follows the contract::

    def normalize_ruc(raw: str) -> str:
        ...

and raises ``RucFormatError`` (kind ``INVALID_FORMAT``) when the input
holds content that cannot be cleaned.  Length and digit-class checks
belong to ``rucpy.validation.ruc``.
"""
