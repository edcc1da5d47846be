import logging
import math
import numbers
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, Type

logger = logging.getLogger("structpatterns.pricing")


def currency_symbol() -> str:
    return os.environ.get("STRUCTPATTERNS_CURRENCY", "$")


def format_amount(amount: float) -> str:
    # six significant digits, no trailing zeros: 50, 150.75, 300.5
    return f"{amount:g}"


def _require_real(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


class PricedItem(ABC):
    """Anything that can report a total cost and a description.

    Items are immutable once built, so a chain may be read from several
    threads without locking. Queries recurse once per layer, so a chain
    deeper than the interpreter recursion limit raises RecursionError.
    """

    @abstractmethod
    def total_cost(self) -> float:
        ...

    @abstractmethod
    def description(self) -> str:
        ...


@dataclass(frozen=True)
class BaseItem(PricedItem):
    cost: float
    label: str

    def __post_init__(self) -> None:
        _require_real("cost", self.cost)
        if not self.cost >= 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")
        if not isinstance(self.label, str):
            raise TypeError("label must be a string")
        if not self.label:
            raise ValueError("label must not be empty")

    def total_cost(self) -> float:
        return self.cost

    def description(self) -> str:
        return self.label


@dataclass(frozen=True)
class Modifier(PricedItem):
    """Wraps one item, adding ``delta`` to its cost and ``suffix`` to its text."""

    inner: PricedItem
    delta: float
    suffix: str

    def __post_init__(self) -> None:
        if not isinstance(self.inner, PricedItem):
            raise TypeError(f"inner must be a PricedItem, got {type(self.inner).__name__}")
        _require_real("delta", self.delta)
        if math.isnan(self.delta):
            raise ValueError("delta must not be NaN")
        if not isinstance(self.suffix, str):
            raise TypeError("suffix must be a string")

    def total_cost(self) -> float:
        cost = self.inner.total_cost() + self.delta
        logger.debug("%s: +%s -> %s", type(self).__name__, self.delta, cost)
        return cost

    def description(self) -> str:
        return self.inner.description() + self.suffix


@dataclass(frozen=True)
class GiftWrap(Modifier):
    delta: float = field(default=5.0, init=False)
    suffix: str = field(default=" with Gift Wrap", init=False)


@dataclass(frozen=True)
class ExpressDelivery(Modifier):
    delta: float = field(default=20.0, init=False)
    suffix: str = field(default=" with Express Delivery", init=False)


@dataclass(frozen=True)
class Warranty(Modifier):
    delta: float = field(default=25.0, init=False)
    suffix: str = field(default=" with Warranty", init=False)


@dataclass(frozen=True)
class Insurance(Modifier):
    delta: float = field(default=30.0, init=False)
    suffix: str = field(default=" with Insurance", init=False)


def basic_order() -> BaseItem:
    return BaseItem(50.0, "Basic Order")


MODIFIERS: Dict[str, Type[Modifier]] = {
    "gift_wrap": GiftWrap,
    "express_delivery": ExpressDelivery,
    "warranty": Warranty,
    "insurance": Insurance,
}


def wrap(item: PricedItem, *modifiers: Callable[[PricedItem], PricedItem]) -> PricedItem:
    """Apply ``modifiers`` innermost first and return the outermost item."""
    for make in modifiers:
        item = make(item)
        if logger.isEnabledFor(logging.INFO):
            logger.info("wrapped: %s", item.description())
    return item


def apply_modifiers(item: PricedItem, names: Iterable[str]) -> PricedItem:
    factories = []
    for name in names:
        if name not in MODIFIERS:
            raise KeyError(f"unknown modifier: {name!r}")
        factories.append(MODIFIERS[name])
    return wrap(item, *factories)


def layers(item: PricedItem) -> Iterator[PricedItem]:
    while isinstance(item, Modifier):
        yield item
        item = item.inner
    yield item
