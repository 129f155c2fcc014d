"""
MoneyMate - Source Package

A personal finance tracker for logging everyday expenses and keeping
track of money lent to friends until it is paid back.

DESIGN PRINCIPLES:
1. The ledger owns the data; views only call its operations
2. Every change is written to disk immediately
3. Rejected input is reported, never silently dropped
4. Every change is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "MoneyMate Team"
