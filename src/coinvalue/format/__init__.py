"""Decimal formatting of coin amounts.

`protocol` defines the `DecimalFormatter` interface that amounts delegate to, and
`coin_format` provides the default implementation.
"""
