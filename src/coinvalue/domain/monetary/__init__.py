"""Monetary domain package.

This package contains the exact coin amount type, the network parameters that define the
scale of one coin and the maximum money supply, and the errors raised while building or
operating on amounts.
"""
