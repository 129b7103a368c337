"""
Domain exceptions for the car inventory.

Repository lookups never raise; a missing car is reported as None or False.
Only rule violations on incoming data surface as exceptions.
"""


class CarLedgerError(Exception):
    """Base class for errors raised by car_ledger"""
    pass


class ValidationError(CarLedgerError, ValueError):
    """
    Raised when a car field breaks a business rule:
    - missing make, model or color
    - year outside the accepted model-year range
    - negative price
    """
    pass
