"""Fractional and 0/1 knapsack solvers with an interactive menu."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "Item",
    "fractional_knapsack",
    "knapsack_01",
    "greedy_01",
    "compare_strategies",
    "main",
]


@dataclass(frozen=True)
class Item:
    """An item with an identifier, a weight and the profit it earns."""

    id: int
    weight: float
    profit: float

    def __post_init__(self) -> None:
        if self.weight < 0 or self.profit < 0:
            raise ValueError("weight and profit must not be negative")

    @property
    def ratio(self) -> float:
        """Profit earned per unit of weight."""
        if self.weight:
            return self.profit / self.weight
        return math.inf if self.profit else 0.0


def _by_ratio(items: Iterable[Item]) -> list[Item]:
    return sorted(items, key=lambda item: item.ratio, reverse=True)


def _check_capacity(capacity: float) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Return the best profit when items may be split, filling by profit/weight ratio."""
    _check_capacity(capacity)
    total_weight = 0.0
    total_profit = 0.0
    for item in _by_ratio(items):
        if total_weight + item.weight <= capacity:
            total_weight += item.weight
            total_profit += item.profit
        else:
            remain = capacity - total_weight
            total_profit += item.profit * remain / item.weight
            break
    return total_profit


def knapsack_01(items: Iterable[Item], capacity: float) -> int:
    """Return the best whole-item profit by dynamic programming.

    The capacity, each weight used as an offset and each summed profit are
    truncated to integers.
    """
    _check_capacity(capacity)
    limit = int(capacity)
    best = [0] * (limit + 1)
    for item in items:
        for room in range(limit, 0, -1):
            if item.weight <= room:
                taken = int(item.profit + best[room - int(item.weight)])
                best[room] = max(taken, best[room])
    return best[limit]


def greedy_01(items: Iterable[Item], capacity: float) -> float:
    """Return the profit of taking whole items by descending ratio while they fit."""
    _check_capacity(capacity)
    total_weight = 0.0
    total_profit = 0.0
    for item in _by_ratio(items):
        if total_weight + item.weight <= capacity:
            total_weight += item.weight
            total_profit += item.profit
    return total_profit


def compare_strategies(items: Iterable[Item], capacity: float) -> tuple[float, int]:
    """Return (greedy profit, dynamic-programming profit) for the 0/1 problem."""
    item_list = list(items)
    return greedy_01(item_list, capacity), knapsack_01(item_list, capacity)


def _ask_number(prompt: str, kind: type) -> float:
    while True:
        text = input(prompt).strip()
        try:
            return kind(text)
        except ValueError:
            print("Please enter a number")


def _run_choice(option: str, items: list[Item], capacity: int) -> None:
    if option == "1":
        profit = fractional_knapsack(items, capacity)
        print(f"Total Profit earned Fractional ::{profit:g}")
    elif option == "2":
        print(f"Total Profit earned 0/1 DP ::{knapsack_01(items, capacity)}")
    elif option == "3":
        greedy, best = compare_strategies(items, capacity)
        print(f"Total Profit earned 0/1 Fractional::{greedy:g}")
        print(f"Total Profit earned 0/1 DP ::{best}")
        if best > greedy:
            print("DP Approach yields a better Profit than Greedy Approach")
        else:
            print("Greedy Approach Yields The same Solution")
    else:
        print("Invalid choice!")


def main(argv: list[str] | None = None) -> int:
    """Read items and a capacity from standard input and run the chosen solver."""
    try:
        print("=========Knapsack Problem=======================================")
        count = int(_ask_number("Enter number of items:", int))
        print("Enter weight and profit for each item:")
        items: list[Item] = []
        while len(items) < count:
            ident = len(items) + 1
            print(f"Item {ident}")
            weight = _ask_number("Weight:", float)
            profit = _ask_number("Profit:", float)
            if weight < 0 or profit < 0:
                print("Please enter positive values")
                continue
            items.append(Item(ident, weight, profit))
        capacity = int(_ask_number("Enter capacity of container:", float))
        while True:
            print("1. Fractional Knapsack  \n2. 0/1 Knapsack \n3. Compare  0/1 Knapsack DP and Greedy")
            option = input("Your choice: ").strip()
            try:
                _run_choice(option, items, capacity)
            except ValueError as error:
                print(error)
            choice = input("Do you wish to continue: Y/N ").strip()
            if choice[:1] not in ("Y", "y"):
                print("\n----- Thank you! ----")
                return 0
    except EOFError:
        return 0