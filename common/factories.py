from dataclasses import dataclass
from typing import Callable, List, Sequence

from structpatterns.models import ExternalClientData1, ExternalClientData2
from structpatterns.pricing import BaseItem, Modifier, PricedItem, wrap


@dataclass(frozen=True)
class Defaults:
    base_cost: float = 50.0
    base_label: str = "Basic Order"


REFERENCE_NAMES = ["gift_wrap", "express_delivery", "warranty", "insurance"]


def make_base(cost: float = Defaults.base_cost, label: str = Defaults.base_label) -> BaseItem:
    return BaseItem(cost, label)


def make_modifiers(deltas: Sequence[float]) -> List[Callable[[PricedItem], Modifier]]:
    return [lambda inner, d=d, n=n: Modifier(inner, d, f" with Extra {n}") for n, d in enumerate(deltas)]


def make_chain(deltas: Sequence[float], base: PricedItem = None) -> PricedItem:
    if base is None:
        base = make_base()
    return wrap(base, *make_modifiers(deltas))


def make_external_clients():
    return (
        ExternalClientData1("John Doe", "123 Main St", "555-1234", "john@example.com"),
        ExternalClientData2("Jane", "Smith", "456 Oak Ave", "555-5678", "jane.smith@example.com"),
    )
