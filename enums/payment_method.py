from enum import Enum


class PaymentMethod(str, Enum):
    """
    Payment method chosen by the user at registration.

    Stored on the user record; orders do not use it yet.
    """
    CASH = "cash"
    CARD = "card"
