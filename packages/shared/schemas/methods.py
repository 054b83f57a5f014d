"""Shared shipping and payment method schema (v1).

Clients send these values on checkout and receive them back on orders. New members may be
added without changing checkout behavior: the backend records them as given.
"""

from __future__ import annotations

from enum import Enum


class ShippingMethod(str, Enum):
    STANDARD = "STANDARD"
    EXPRESS = "EXPRESS"
    CORREIOS_PAC = "CORREIOS_PAC"
    CORREIOS_SEDEX = "CORREIOS_SEDEX"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PIX = "PIX"
    BOLETO = "BOLETO"
