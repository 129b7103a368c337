"""
Car Ledger

Two small console programs sharing one package: an in-memory car inventory
manager with validated add/list/search/update/delete, and a single-account
bank ledger with deposit, withdraw and balance.
"""

__version__ = "1.0.0"
