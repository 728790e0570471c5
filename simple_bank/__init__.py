"""
Simple Bank

An in-memory banking application with accounts, deposits, withdrawals and
transfers. All financial math uses Decimal, and every successful mutation is
recorded by a transaction logger.
"""

__version__ = "1.0.0"
