# -*- coding: utf-8 -*-
# Copyright (C) 2013 Oliver Ainsworth

"""Parse, validate and render SteamIDs."""

from .id import (
    EmptyInputError,
    InvalidTradeURLError,
    NumericOverflowError,
    SteamID,
    SteamIDError,
    UnrecognizedFormatError,
    parse,
)
from .types import AccountType, Instance, Universe

__all__ = [
    "AccountType",
    "EmptyInputError",
    "Instance",
    "InvalidTradeURLError",
    "NumericOverflowError",
    "SteamID",
    "SteamIDError",
    "Universe",
    "UnrecognizedFormatError",
    "parse",
]
