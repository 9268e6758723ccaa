# -*- coding: utf-8 -*-
# Copyright (C) 2013 Oliver Ainsworth

"""Enumerations and bit layout shared by all SteamID formats.

A 64-bit SteamID packs four fields::

    universe << 56 | type << 52 | instance << 32 | account number

https://developer.valvesoftware.com/wiki/SteamID
"""

import enum


ACCOUNT_ID_MASK = 0xFFFFFFFF
ACCOUNT_INSTANCE_MASK = 0x000FFFFF
ACCOUNT_TYPE_MASK = 0xF
UNIVERSE_MASK = 0xFF

ACCOUNT_INSTANCE_SHIFT = 32
ACCOUNT_TYPE_SHIFT = 52
UNIVERSE_SHIFT = 56

# Flags OR'd into the instance of chat identifiers
CHAT_INSTANCE_FLAG_CLAN = (ACCOUNT_INSTANCE_MASK + 1) >> 1
CHAT_INSTANCE_FLAG_LOBBY = (ACCOUNT_INSTANCE_MASK + 1) >> 2
CHAT_INSTANCE_FLAG_MMS_LOBBY = (ACCOUNT_INSTANCE_MASK + 1) >> 3


class Universe(enum.IntEnum):
    """Realm an account lives in."""

    INVALID = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4


class AccountType(enum.IntEnum):
    """Kind of entity a SteamID names."""

    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAME_SERVER = 3
    ANON_GAME_SERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    P2P_SUPER_SEEDER = 9
    ANON_USER = 10


class Instance(enum.IntEnum):
    """Client instances of individual accounts."""

    ALL = 0
    DESKTOP = 1
    CONSOLE = 2
    WEB = 3


UNKNOWN_TYPE_CHAR = "i"

type_letter_map = {
    AccountType.INDIVIDUAL: "U",
    AccountType.MULTISEAT: "M",
    AccountType.GAME_SERVER: "G",
    AccountType.ANON_GAME_SERVER: "A",
    AccountType.PENDING: "P",
    AccountType.CONTENT_SERVER: "C",
    AccountType.CLAN: "g",
    AccountType.CHAT: "T",
    AccountType.ANON_USER: "a",
}
letter_type_map = {v: k for k, v in type_letter_map.items()}


def type_char(type_):
    """Get the single character code used for an account type.

    :param type_: an :class:`AccountType` or its integer value.

    :returns: the type's character, or :data:`UNKNOWN_TYPE_CHAR` for
        types without one (including :attr:`AccountType.INVALID`).
    """
    return type_letter_map.get(type_, UNKNOWN_TYPE_CHAR)


def type_from_char(char):
    """Get the account type for a character code.

    :returns: the matching :class:`AccountType`, or
        :attr:`AccountType.INVALID` if no type uses the character.
    """
    return letter_type_map.get(char, AccountType.INVALID)


def enum_or_int(enumeration, value):
    """Convert ``value`` to a member of ``enumeration`` if it names one.

    Values without a member are returned unchanged so they still
    round-trip through the packed form.
    """
    try:
        return enumeration(value)
    except ValueError:
        return value
