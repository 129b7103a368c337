"""
Car Inventory Module

Manages the car inventory: the Car record, the repository that keeps cars in
an in-memory store, and the service that validates and normalizes every
write before it reaches the repository.
"""

from datetime import datetime, timezone
from dataclasses import dataclass
from typing import List, Optional
import math
import uuid

from .errors import ValidationError
from .logging_config import get_logger, log_action
from .storage import RecordStore, StorageRecord


EARLIEST_MODEL_YEAR = 1886
MODEL_YEAR_LOOKAHEAD = 1

SAMPLE_CARS = [
    ("Toyota", "Corolla", 2020, "White", 15000),
    ("Honda", "Civic", 2019, "Blue", 14000),
    ("Tata", "Nexon", 2023, "Red", 1200000),
]

logger = get_logger(__name__)


def normalize_text(value: str) -> str:
    """Trim and upper-case the first character, leaving the rest untouched"""
    value = value.strip()
    if not value:
        return value
    return value[0].upper() + value[1:]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass
class Car(StorageRecord):
    """
    A car in the inventory
    """
    make: str
    model: str
    year: int
    color: str
    price: float

    def describe(self, price_decimals: int = 2) -> str:
        """Single-line listing used by the console"""
        return (
            f"ID: {self.id} | {self.make} {self.model} | Year: {self.year} | "
            f"Color: {self.color} | Price: {self.price:.{price_decimals}f}"
        )

    def __str__(self) -> str:
        return self.describe()


class CarRepository:
    """
    Keyed collection of cars over a record store.

    Lookups never raise: a missing car comes back as None, a missed delete
    as False.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def save(self, car: Car) -> Car:
        """Insert or overwrite a car by id"""
        self.store.put(car.id, car.to_dict())
        return car

    def find_by_id(self, car_id: str) -> Optional[Car]:
        car_dict = self.store.get(car_id)
        if car_dict is not None:
            return Car.from_dict(car_dict)
        return None

    def find_all(self) -> List[Car]:
        """Snapshot of all cars in insertion order"""
        return [Car.from_dict(data) for data in self.store.values()]

    def search(self, keyword: str) -> List[Car]:
        """
        Case-insensitive substring match against make, model, color and id.

        A car matches when any one of the four fields contains the keyword.
        """
        needle = keyword.lower()
        return [
            car for car in self.find_all()
            if needle in car.make.lower()
            or needle in car.model.lower()
            or needle in car.color.lower()
            or needle in car.id.lower()
        ]

    def delete(self, car_id: str) -> bool:
        return self.store.remove(car_id)

    def clear(self) -> None:
        self.store.clear()

    def count(self) -> int:
        return self.store.size()


class CarService:
    """
    Validation and business rules for the car inventory
    """

    def __init__(self, repository: CarRepository,
                 earliest_year: int = EARLIEST_MODEL_YEAR,
                 year_lookahead: int = MODEL_YEAR_LOOKAHEAD):
        self.repository = repository
        self.earliest_year = earliest_year
        self.year_lookahead = year_lookahead

    @property
    def latest_year(self) -> int:
        """Newest model year accepted today"""
        return datetime.now().year + self.year_lookahead

    def add_car(self, make: str, model: str, year: int, color: str, price: float) -> Car:
        """
        Validate, normalize and store a new car

        Args:
            make: Manufacturer name
            model: Model name
            year: Model year
            color: Exterior color
            price: Asking price, zero or more

        Returns:
            The stored Car with its generated id

        Raises:
            ValidationError: if any field breaks a rule; nothing is stored
        """
        try:
            self._require_text("Make", make)
            self._require_text("Model", model)
            self._require_text("Color", color)
            self._validate_year(year)
            price = self._validate_price(price)
        except ValidationError as e:
            log_action(logger, "info", f"Rejected new car: {e}",
                       action="car_validation_failed")
            raise

        now = datetime.now(timezone.utc)
        car = Car(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            make=normalize_text(make),
            model=normalize_text(model),
            year=year,
            color=normalize_text(color),
            price=price
        )

        self.repository.save(car)

        log_action(logger, "info", "Car added", action="car_added", resource=car.id,
                   extra={"make": car.make, "model": car.model, "year": car.year})

        return car

    def update_car(
        self,
        car_id: str,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        color: Optional[str] = None,
        price: Optional[float] = None
    ) -> bool:
        """
        Partially update a car.

        Only supplied fields change. None, and for text fields a blank string,
        means "keep the current value". Every supplied field is validated
        before anything is written.

        Returns:
            False if no car has this id, True once the update is stored

        Raises:
            ValidationError: if a supplied year or price is invalid
        """
        car = self.repository.find_by_id(car_id)
        if car is None:
            log_action(logger, "info", "Update for unknown car", action="car_update_missed",
                       resource=car_id)
            return False

        changes = {}
        if not _is_blank(make):
            changes["make"] = normalize_text(make)
        if not _is_blank(model):
            changes["model"] = normalize_text(model)
        if not _is_blank(color):
            changes["color"] = normalize_text(color)

        try:
            if year is not None:
                self._validate_year(year)
                changes["year"] = year
            if price is not None:
                changes["price"] = self._validate_price(price)
        except ValidationError as e:
            log_action(logger, "info", f"Rejected update: {e}",
                       action="car_validation_failed", resource=car_id)
            raise

        for field_name, value in changes.items():
            setattr(car, field_name, value)
        if changes:
            car.updated_at = datetime.now(timezone.utc)
            self.repository.save(car)

        log_action(logger, "info", "Car updated", action="car_updated", resource=car_id,
                   extra={"fields": sorted(changes)})

        return True

    def get_car(self, car_id: str) -> Optional[Car]:
        return self.repository.find_by_id(car_id)

    def list_all(self) -> List[Car]:
        return self.repository.find_all()

    def search(self, keyword: str) -> List[Car]:
        return self.repository.search(keyword)

    def delete(self, car_id: str) -> bool:
        deleted = self.repository.delete(car_id)
        if deleted:
            log_action(logger, "info", "Car deleted", action="car_deleted", resource=car_id)
        return deleted

    def reset(self) -> None:
        """Remove every car from the inventory"""
        self.repository.clear()

    def _require_text(self, label: str, value: Optional[str]) -> None:
        if _is_blank(value):
            raise ValidationError(f"{label} is required.")

    def _validate_year(self, year: int) -> None:
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValidationError("Year must be a whole number.")
        latest = self.latest_year
        if year < self.earliest_year or year > latest:
            raise ValidationError(f"Year must be between {self.earliest_year} and {latest}")

    def _validate_price(self, price: float) -> float:
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError("Price must be a number.")
        if math.isnan(price) or math.isinf(price):
            raise ValidationError("Price must be a finite number.")
        if price < 0:
            raise ValidationError("Price must be non-negative.")
        return float(price)


def seed_sample_cars(service: CarService) -> List[Car]:
    """Add the three demo cars shown when the console starts"""
    return [service.add_car(*sample) for sample in SAMPLE_CARS]
