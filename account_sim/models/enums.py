"""Enumeration types for account simulation entities."""

from enum import Enum


class AccountKind(str, Enum):
    FEE = "Fee"
    NICKLE_N_DIME = "NickleNDime"
    GAMBLER = "Gambler"


class Direction(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
