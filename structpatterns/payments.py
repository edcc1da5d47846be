import logging
from abc import ABC, abstractmethod

from .pricing import currency_symbol, format_amount

logger = logging.getLogger("structpatterns.payments")


def _charge_line(provider: str, amount: float) -> str:
    text = f"Processing payment through {provider}: {currency_symbol()}{format_amount(amount)}"
    logger.info("charged provider=%s amount=%s", provider, amount)
    print(text)
    return text


# Third-party gateways, each with its own calling convention.
class PayPalPayment:
    def process_payment(self, amount: float) -> str:
        return _charge_line("PayPal", amount)


class StripePayment:
    def make_payment(self, amount: float) -> str:
        return _charge_line("Stripe", amount)


class SquarePayment:
    def charge(self, amount: float) -> str:
        return _charge_line("Square", amount)


class PaymentProcessor(ABC):
    @abstractmethod
    def process_payment(self, amount: float) -> str:
        ...


class PayPalAdapter(PaymentProcessor):
    def __init__(self, paypal: PayPalPayment):
        self.paypal = paypal

    def process_payment(self, amount: float) -> str:
        return self.paypal.process_payment(amount)


class StripeAdapter(PaymentProcessor):
    def __init__(self, stripe: StripePayment):
        self.stripe = stripe

    def process_payment(self, amount: float) -> str:
        return self.stripe.make_payment(amount)


class SquareAdapter(PaymentProcessor):
    def __init__(self, square: SquarePayment):
        self.square = square

    def process_payment(self, amount: float) -> str:
        return self.square.charge(amount)


_ADAPTERS = {
    PayPalPayment: PayPalAdapter,
    StripePayment: StripeAdapter,
    SquarePayment: SquareAdapter,
}


def adapt_gateway(gateway: object) -> PaymentProcessor:
    for gateway_type, adapter in _ADAPTERS.items():
        if isinstance(gateway, gateway_type):
            return adapter(gateway)
    raise TypeError(f"no payment adapter for {type(gateway).__name__}")
