"""Interactive console front end.

Prints the numbered menu, reads one choice per line and dispatches it
to the road plan service. Malformed or out-of-range numbers are
re-prompted here; everything else is reported from the service's
OperationResult messages.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TextIO

from ..config import ConsoleConfig, get_config
from ..domain.models import OperationResult
from ..services.planning import RoadPlanService

MENU = """
ROADS-BUDGET-PLAN-CONSOLE-APPLICATION
--------------------------------------
1. Add new City(ies)
2. Add roads between cities
3. Add the budget for roads
4. Edit city
5. Search for a city using index
6. Display cities
7. Display roads
8. Display recorded data on console
9. Exit the application"""

EXIT_CHOICE = 9


@dataclass
class ConsoleApp:
    """Menu loop over a RoadPlanService.

    Attributes:
        service: The service every menu entry calls into
        config: Console settings (retry cap, budget unit)
        read: Returns the next input line; raises EOFError at end of input
        out: Stream for prompts, tables and messages
        err: Stream for export failures
    """

    service: RoadPlanService
    config: ConsoleConfig = field(default_factory=lambda: get_config().console)
    read: Callable[[], str] = input
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(self) -> int:
        """Run the menu loop until the exit choice or end of input.

        Returns:
            The process exit code, always 0.
        """
        handlers = self._handlers()
        while True:
            self._print(MENU)
            try:
                line = self._prompt("Enter your choice: ")
            except EOFError:
                self._print()
                break
            try:
                choice = int(line.strip())
            except ValueError:
                self._print("Invalid input. Please enter a number.")
                continue

            if choice == EXIT_CHOICE:
                break
            handler = handlers.get(choice)
            if handler is None:
                self._print("Invalid choice. Please try again.")
                continue

            self._logger.debug("Dispatching menu choice", extra={"choice": choice})
            try:
                handler()
            except EOFError:
                self._print()
                break

        self._print("Exiting application. Goodbye!")
        return 0

    def _handlers(self) -> Dict[int, Callable[[], None]]:
        return {
            1: self.add_cities,
            2: self.add_road,
            3: self.set_budget,
            4: self.rename_city,
            5: self.find_city,
            6: self.show_cities,
            7: self.show_roads,
            8: self.show_report,
        }

    # ---- Menu entries ----------------------------------------------------
    def add_cities(self) -> None:
        count = self._prompt_int(
            "Enter the number of cities to add: ",
            "Invalid input. Please enter a positive number: ",
            lambda n: n > 0,
        )
        try:
            for _ in range(count):
                self._add_one_city()
        finally:
            self._emit_export(self.service.export_cities())

    def add_road(self) -> None:
        first = self._prompt("Enter the name of the first City: ")
        second = self._prompt("Enter the name of the second City: ")
        self._emit(self.service.add_road(first, second))

    def set_budget(self) -> None:
        first = self._prompt("Enter the name of the first City: ")
        second = self._prompt("Enter the name of the second City: ")
        found = self.service.find_road(first, second)
        if not found.success:
            self._print(found.message)
            self._emit_export(self.service.export_roads())
            return

        amount = self._prompt_float(
            f"Enter the budget for the road (in {self.config.budget_unit}): ",
            "Invalid input. Please enter a non-negative number: ",
            lambda x: math.isfinite(x) and x >= 0,
        )
        self._emit(self.service.set_budget(first, second, amount))

    def rename_city(self) -> None:
        index = self._prompt_index("Enter the index for the city to edit: ")
        if index is None:
            return
        for _ in range(self.config.max_name_retries):
            new_name = self._prompt(f"Enter the new name for City {index}: ")
            result = self.service.rename_city(index, new_name)
            self._emit(result)
            if result.success:
                return
        self._print(f"City {index} left unchanged.")

    def find_city(self) -> None:
        index = self._prompt_index("Enter the index of the city to search: ")
        if index is not None:
            self._emit(self.service.find_city(index))

    def show_cities(self) -> None:
        self._print_lines(self.service.list_cities())

    def show_roads(self) -> None:
        if self.service.network.city_count:
            self._print_lines(self.service.list_cities())
        self._print_lines(self.service.render_road_matrix())

    def show_report(self) -> None:
        self._print_lines(self.service.render_full_report())

    # ---- Helpers ---------------------------------------------------------
    def _add_one_city(self) -> None:
        display_id = self.service.network.city_count + 1
        attempts = self.config.max_name_retries
        for _ in range(attempts):
            name = self._prompt(f"Enter name of city {display_id}: ")
            result = self.service.add_city(name)
            self._print(result.message)
            if result.success:
                return
        self._logger.warning(
            "City slot abandoned", extra={"display_id": display_id, "attempts": attempts}
        )
        self._print(f"Giving up on city {display_id} after {attempts} attempts.")

    def _prompt_index(self, text: str) -> Optional[int]:
        count = self.service.network.city_count
        if count == 0:
            self._print("No cities recorded yet.")
            return None
        return self._prompt_int(
            text,
            f"Invalid index. Please enter a number between 1 and {count}: ",
            lambda n: 1 <= n <= count,
        )

    def _prompt_int(self, text: str, retry: str, accept: Callable[[int], bool]) -> int:
        line = self._prompt(text)
        while True:
            try:
                value = int(line.strip())
            except ValueError:
                pass
            else:
                if accept(value):
                    return value
            line = self._prompt(retry)

    def _prompt_float(
        self, text: str, retry: str, accept: Callable[[float], bool]
    ) -> float:
        line = self._prompt(text)
        while True:
            try:
                value = float(line.strip())
            except ValueError:
                pass
            else:
                if accept(value):
                    return value
            line = self._prompt(retry)

    def _prompt(self, text: str) -> str:
        self.out.write(text)
        self.out.flush()
        return self.read()

    def _emit(self, result: OperationResult) -> None:
        self._print(result.message)
        if result.export is not None:
            self._emit_export(result.export)

    def _emit_export(self, result: OperationResult) -> None:
        if result.success:
            self._print(result.message)
        else:
            print(result.message, file=self.err)

    def _print_lines(self, lines: List[str]) -> None:
        for line in lines:
            self._print(line)

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)
