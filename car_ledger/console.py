"""
Console Front-End Module

Menu-driven consoles for the car inventory and the bank ledger. Both read
line-oriented input from an injected stream and write to an injected stream,
so the core layers never touch stdin or stdout.
"""

import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Optional, TextIO

from .bank import BankAccount
from .cars import CarRepository, CarService, seed_sample_cars
from .config import CarLedgerConfig, get_config
from .errors import ValidationError
from .logging_config import get_logger, log_action
from .storage import InMemoryStore


logger = get_logger(__name__)

CAR_MENU = (
    "===== Car Management =====",
    "1. Add Car",
    "2. List All Cars",
    "3. Search Cars",
    "4. Update Car",
    "5. Delete Car",
    "6. Exit",
)

BANK_MENU = "1.Deposit  2.Withdraw  3.Check Balance  4.Exit"


class LineConsole:
    """Shared prompt/print plumbing over a pair of text streams"""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def prompt(self, label: str) -> str:
        """Print a label and read one line; EOFError once input is exhausted"""
        self.stdout.write(label)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def report_unexpected(self, error: Exception) -> None:
        self.write(f"Unexpected error: {error}")
        log_action(logger, "error", f"Unexpected console error: {error}",
                   action="console_error", extra={"error_type": type(error).__name__})


class CarConsole(LineConsole):
    """
    Numbered-menu front-end over a CarService
    """

    def __init__(self, service: CarService, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None, price_decimals: int = 2):
        super().__init__(stdin, stdout)
        self.service = service
        self.price_decimals = price_decimals
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.add_car_flow,
            "2": self.list_cars_flow,
            "3": self.search_flow,
            "4": self.update_flow,
            "5": self.delete_flow,
        }

    def run(self) -> None:
        """Loop over the menu until the user exits or input runs out"""
        while True:
            self.print_menu()
            try:
                choice = self.prompt("Choose an option: ").strip()
                if choice == "6":
                    self.write("Exiting. Bye!")
                    return
                action = self._actions.get(choice)
                if action is None:
                    self.write("Invalid option. Try again.")
                else:
                    action()
            except EOFError:
                self.write()
                return
            except ValidationError as e:
                self.write(f"Validation error: {e}")
            except Exception as e:
                self.report_unexpected(e)

            self.write()

    def print_menu(self) -> None:
        for line in CAR_MENU:
            self.write(line)

    def format_car(self, car) -> str:
        return car.describe(self.price_decimals)

    def add_car_flow(self) -> None:
        make = self.prompt("Make: ")
        model = self.prompt("Model: ")
        year = int(self.prompt("Year: ").strip())
        color = self.prompt("Color: ")
        price = float(self.prompt("Price: ").strip())

        car = self.service.add_car(make, model, year, color, price)
        self.write("Added:")
        self.write(self.format_car(car))

    def list_cars_flow(self) -> None:
        cars = self.service.list_all()
        if not cars:
            self.write("No cars found.")
            return
        self.write(f"---- Cars ({len(cars)}) ----")
        for car in cars:
            self.write(self.format_car(car))

    def search_flow(self) -> None:
        keyword = self.prompt("Enter keyword (id/make/model/color): ")
        results = self.service.search(keyword)
        if not results:
            self.write("No matches.")
            return
        self.write(f"---- Results ({len(results)}) ----")
        for car in results:
            self.write(self.format_car(car))

    def update_flow(self) -> None:
        car_id = self.prompt("Enter Car ID to update: ").strip()

        make = self.prompt("New make (leave blank to keep): ")
        model = self.prompt("New model (leave blank to keep): ")
        # Each number is parsed before the next prompt
        year_text = self.prompt("New year (leave blank to keep): ").strip()
        year = int(year_text) if year_text else None
        color = self.prompt("New color (leave blank to keep): ")
        price_text = self.prompt("New price (leave blank to keep): ").strip()
        price = float(price_text) if price_text else None

        updated = self.service.update_car(
            car_id,
            make=make or None,
            model=model or None,
            year=year,
            color=color or None,
            price=price
        )
        self.write("Updated successfully." if updated else "Car not found.")

    def delete_flow(self) -> None:
        car_id = self.prompt("Enter Car ID to delete: ").strip()
        self.write("Deleted." if self.service.delete(car_id) else "Car not found.")


class BankConsole(LineConsole):
    """
    Deposit/withdraw/balance front-end over a single BankAccount
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 decimals: int = 2):
        super().__init__(stdin, stdout)
        self.decimals = decimals
        self.account: Optional[BankAccount] = None

    def read_amount(self, label: str) -> Decimal:
        text = self.prompt(label).strip()
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {text!r}")
        if not amount.is_finite():
            raise ValueError(f"Invalid amount: {text!r}")
        return amount

    def open_account(self) -> BankAccount:
        """Ask for the holder and opening balance, re-asking on a bad balance"""
        name = self.prompt("Enter Account Holder Name: ").strip()
        while True:
            try:
                balance = self.read_amount("Enter Initial Balance: ")
                break
            except ValueError as e:
                self.report_unexpected(e)
        self.account = BankAccount(name, balance)
        return self.account

    def run(self) -> None:
        try:
            self.open_account()
        except EOFError:
            self.write()
            return

        while True:
            self.write()
            self.write(BANK_MENU)
            try:
                choice = self.prompt("").strip()
                if choice == "1":
                    amount = self.read_amount("Enter amount: ")
                    self.account.deposit(amount)
                    self.write(f"Deposited: {amount:.{self.decimals}f}")
                elif choice == "2":
                    amount = self.read_amount("Enter amount: ")
                    if self.account.withdraw(amount):
                        self.write(f"Withdrawn: {amount:.{self.decimals}f}")
                    else:
                        self.write("Insufficient balance!")
                elif choice == "3":
                    self.write(self.account.describe_balance(self.decimals))
                elif choice == "4":
                    self.write("Exiting...")
                    return
                else:
                    self.write("Invalid choice!")
            except EOFError:
                self.write()
                return
            except Exception as e:
                self.report_unexpected(e)


def create_car_service(config: Optional[CarLedgerConfig] = None) -> CarService:
    """Wire a fresh store, repository and service from configuration"""
    config = config or get_config()
    repository = CarRepository(InMemoryStore())
    service = CarService(
        repository,
        earliest_year=config.earliest_model_year,
        year_lookahead=config.model_year_lookahead
    )
    if config.seed_sample_cars:
        seed_sample_cars(service)
    return service


def create_car_console(config: Optional[CarLedgerConfig] = None,
                       stdin: Optional[TextIO] = None,
                       stdout: Optional[TextIO] = None) -> CarConsole:
    config = config or get_config()
    return CarConsole(create_car_service(config), stdin, stdout,
                      price_decimals=config.price_decimals)


def create_bank_console(config: Optional[CarLedgerConfig] = None,
                        stdin: Optional[TextIO] = None,
                        stdout: Optional[TextIO] = None) -> BankConsole:
    config = config or get_config()
    return BankConsole(stdin, stdout, decimals=config.price_decimals)
