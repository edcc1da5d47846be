import logging
import os
from typing import List

from .clients import ExternalClientData1Adapter, ExternalClientData2Adapter
from .models import ExternalClientData1, ExternalClientData2
from .payments import PayPalPayment, SquarePayment, StripePayment, adapt_gateway
from .pricing import (
    ExpressDelivery,
    GiftWrap,
    Insurance,
    PricedItem,
    Warranty,
    basic_order,
    currency_symbol,
    format_amount,
)
from .storage import CloudStorage, DatabaseStorage, LocalStorage, PDFDocument, TextDocument, XMLDocument

logger = logging.getLogger("structpatterns.service")

RULE = "-" * 54


def order_line(item: PricedItem) -> str:
    return f"{item.description()}: {currency_symbol()}{format_amount(item.total_cost())}"


def run_payments_demo() -> List[str]:
    charges = [
        (PayPalPayment(), 150.75),
        (StripePayment(), 200.00),
        (SquarePayment(), 300.50),
    ]
    return [adapt_gateway(gateway).process_payment(amount) for gateway, amount in charges]


def run_clients_demo() -> List[str]:
    ext1 = ExternalClientData1("John Doe", "123 Main St", "555-1234", "john@example.com")
    ext2 = ExternalClientData2("Jane", "Smith", "456 Oak Ave", "555-5678", "jane.smith@example.com")
    adapters = [ExternalClientData1Adapter(ext1), ExternalClientData2Adapter(ext2)]
    return [a.convert().display() for a in adapters]


def run_storage_demo() -> List[str]:
    documents = [
        TextDocument(LocalStorage()),
        PDFDocument(CloudStorage()),
        XMLDocument(DatabaseStorage()),
    ]
    return [d.save() for d in documents]


def run_decorator_demo() -> List[str]:
    order = basic_order()
    lines = [order_line(order)]
    for modifier in (GiftWrap, ExpressDelivery, Warranty, Insurance):
        order = modifier(order)
        lines.append(order_line(order))
    for line in lines:
        print(line)
    logger.info("decorator demo total=%s", order.total_cost())
    return lines


def main() -> None:
    level = os.environ.get("STRUCTPATTERNS_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(level=level)
    sections = [
        ("Adapter 1", run_payments_demo),
        ("Adapter 2", run_clients_demo),
        ("Bridge", run_storage_demo),
        ("Decorator", run_decorator_demo),
    ]
    for i, (title, run) in enumerate(sections):
        if i:
            print(RULE)
        print(title)
        run()


if __name__ == "__main__":
    main()
