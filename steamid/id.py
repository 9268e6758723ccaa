# -*- coding: utf-8 -*-
# Copyright (C) 2013 Oliver Ainsworth

"""
    Provides the ability to process and represent SteamIDs in multiple formats.
"""

import logging
import re

from .types import (
    ACCOUNT_ID_MASK,
    ACCOUNT_INSTANCE_MASK,
    ACCOUNT_INSTANCE_SHIFT,
    ACCOUNT_TYPE_MASK,
    ACCOUNT_TYPE_SHIFT,
    CHAT_INSTANCE_FLAG_CLAN,
    CHAT_INSTANCE_FLAG_LOBBY,
    CHAT_INSTANCE_FLAG_MMS_LOBBY,
    UNIVERSE_MASK,
    UNIVERSE_SHIFT,
    AccountType,
    Instance,
    Universe,
    enum_or_int,
    type_char,
    type_from_char,
)

log = logging.getLogger(__name__)

# Largest value the platform accepts for a 64-bit SteamID (signed)
MAX_ID64 = 2 ** 63 - 1

id64_regex = re.compile(r"^\d+$", re.ASCII)
textual_id_regex = re.compile(r"^STEAM_([0-5]):([0-1]):([0-9]+)$")
bracket_id_regex = re.compile(
    r"^\[([a-zA-Z]):([0-5]):([0-9]+)(:[0-9]+)?]$")
trade_url_regex = re.compile(
    r"^https://steamcommunity\.com/tradeoffer/new/"
    r"\?partner=(\d+)&token=([\w-]+)$", re.ASCII)

type_url_path_map = {
    AccountType.INDIVIDUAL: "profiles",
    AccountType.CLAN: "groups",
}


class SteamIDError(Exception):
    """Base exception for all SteamID errors."""


class EmptyInputError(SteamIDError):
    """Raised when parsing an empty string."""

    def __init__(self):
        super(EmptyInputError, self).__init__("Cannot parse an empty SteamID")


class UnrecognizedFormatError(SteamIDError):
    """Raised when a string is in none of the known SteamID formats.

    :ivar text: the string that failed to parse.
    """

    def __init__(self, text):
        super(UnrecognizedFormatError, self).__init__(
            "Unknown SteamID input format {!r}".format(text))
        self.text = text


class NumericOverflowError(SteamIDError):
    """Raised when a parsed number doesn't fit the field it's decoded to."""


class InvalidTradeURLError(SteamIDError):
    """Raised for URLs which aren't trade offer URLs."""


def _parse_number(name, digits, maximum):
    # Bounded by length first; int() refuses very long digit strings
    significant = digits.lstrip("0") or "0"
    if (len(significant) > len(str(maximum))
            or int(significant) > maximum):
        raise NumericOverflowError(
            "{} {} larger than {}".format(
                name, significant[:32] + ("..." if len(significant) > 32
                                          else ""), maximum))
    return int(significant)


def _check_range(name, value, maximum):
    if not 0 <= value <= maximum:
        raise SteamIDError(
            "{} ({}) out of range 0 to {}".format(name, value, maximum))


class SteamID(object):
    """A SteamID.

    Instances are immutable. They're usually created by :meth:`parse`,
    :meth:`from_individual_account_number` or :meth:`from_trade_url`
    rather than directly.

    :ivar account_number: 32-bit account number.
    :ivar instance: 20-bit instance. For chat identifiers this also
        carries the ``CHAT_INSTANCE_FLAG_*`` bits.
    :ivar type: 4-bit account type; compare against :class:`AccountType`.
    :ivar universe: 8-bit universe; compare against :class:`Universe`.
    :ivar token: trade offer token, empty unless created from a trade URL.
    """

    __slots__ = ("_account_number", "_instance", "_type",
                 "_universe", "_token")

    base_community_url = "https://steamcommunity.com/"

    def __init__(self, account_number, instance, type_, universe, token=""):
        _check_range("Account number", account_number, ACCOUNT_ID_MASK)
        _check_range("Instance", instance, ACCOUNT_INSTANCE_MASK)
        _check_range("Type", type_, ACCOUNT_TYPE_MASK)
        _check_range("Universe", universe, UNIVERSE_MASK)
        self._account_number = int(account_number)
        self._instance = int(instance)
        self._type = int(type_)
        self._universe = int(universe)
        self._token = token

    account_number = property(lambda self: self._account_number)
    instance = property(lambda self: self._instance)
    type = property(lambda self: self._type)
    universe = property(lambda self: self._universe)
    token = property(lambda self: self._token)

    @classmethod
    def parse(cls, text):
        """Parse a SteamID from any of its textual formats.

        The following are accepted, tried in this order:

        * 64-bit decimal, e.g. ``76561198435082001``.
        * Legacy ``STEAM_X:Y:Z`` IDs. A universe of zero is treated as
          :attr:`Universe.PUBLIC` as older games always render zero.
        * Bracketed ``[T:U:W]`` or ``[T:U:W:I]`` IDs.

        Field values are decoded as-is; use :meth:`is_valid` to check
        whether the result makes sense.

        :raises EmptyInputError: if ``text`` is empty.
        :raises UnrecognizedFormatError: if ``text`` matches no format.
        :raises NumericOverflowError: if a number is too large for the
            field it's decoded to.
        """
        if not text:
            raise EmptyInputError()
        for regex, handler in cls._formats:
            match = regex.fullmatch(text)
            if match:
                log.debug("Parsing %r with %s", text, handler.__name__)
                return handler(cls, match)
        log.debug("No SteamID format matched %r", text)
        raise UnrecognizedFormatError(text)

    def _from_id64(cls, match):
        id64 = _parse_number("64-bit ID", match.group(0), MAX_ID64)
        return cls(
            id64 & ACCOUNT_ID_MASK,
            (id64 >> ACCOUNT_INSTANCE_SHIFT) & ACCOUNT_INSTANCE_MASK,
            (id64 >> ACCOUNT_TYPE_SHIFT) & ACCOUNT_TYPE_MASK,
            id64 >> UNIVERSE_SHIFT,
        )

    def _from_text(cls, match):
        universe, y, z = match.groups()
        universe = int(universe)
        z = _parse_number("Account index", z, ACCOUNT_ID_MASK // 2)
        account_number = z * 2 + int(y)
        if universe == Universe.INVALID:
            universe = Universe.PUBLIC
        return cls(account_number, Instance.DESKTOP,
                   AccountType.INDIVIDUAL, universe)

    def _from_bracket(cls, match):
        char, universe, account_number, instance_suffix = match.groups()
        account_number = _parse_number(
            "Account number", account_number, ACCOUNT_ID_MASK)
        instance = Instance.ALL
        # Individual IDs replace any written instance so it isn't decoded
        if instance_suffix and char != "U":
            instance = _parse_number(
                "Instance", instance_suffix[1:], ACCOUNT_INSTANCE_MASK)
        if char == "U":
            type_ = AccountType.INDIVIDUAL
            if instance_suffix:
                instance = Instance.DESKTOP
        elif char == "c":
            type_ = AccountType.CLAN
            instance |= CHAT_INSTANCE_FLAG_CLAN
        elif char == "L":
            type_ = AccountType.CHAT
            instance |= CHAT_INSTANCE_FLAG_LOBBY
        else:
            type_ = type_from_char(char)
        return cls(account_number, instance, type_, int(universe))

    _formats = [
        (id64_regex, _from_id64),
        (textual_id_regex, _from_text),
        (bracket_id_regex, _from_bracket),
    ]
    del _from_id64, _from_text, _from_bracket

    @classmethod
    def from_individual_account_number(cls, account_number):
        """Create a public, desktop SteamID for an individual account.

        Out of range account numbers are rejected rather than wrapped or
        clamped.

        :raises SteamIDError: if the account number doesn't fit 32 bits.
        """
        return cls(account_number, Instance.DESKTOP,
                   AccountType.INDIVIDUAL, Universe.PUBLIC)

    @classmethod
    def from_trade_url(cls, url):
        """Create a SteamID from a trade offer URL.

        The URL must be of the form
        ``https://steamcommunity.com/tradeoffer/new/?partner=W&token=T``.
        The partner number is taken as an individual account number and
        the token is kept verbatim as :attr:`token`.

        :raises InvalidTradeURLError: if the URL isn't a trade offer URL.
        """
        match = trade_url_regex.fullmatch(url)
        if not match:
            raise InvalidTradeURLError(
                "Invalid trade URL {!r}".format(url))
        partner, token = match.groups()
        try:
            individual = cls.from_individual_account_number(
                _parse_number("Partner", partner, ACCOUNT_ID_MASK))
        except SteamIDError as exc:
            raise InvalidTradeURLError(
                "Invalid trade URL partner {}: {}".format(partner, exc)
            ) from exc
        return cls(individual.account_number, individual.instance,
                   individual.type, individual.universe, token)

    @property
    def account_type(self):
        """The :class:`AccountType`, or the raw integer if unknown."""
        return enum_or_int(AccountType, self.type)

    @property
    def universe_type(self):
        """The :class:`Universe`, or the raw integer if unknown."""
        return enum_or_int(Universe, self.universe)

    @property
    def type_name(self):
        """
            Convenience method which maps the account type to a more
            meaningful name.
        """
        account_type = self.account_type
        return getattr(account_type, "name", "UNKNOWN")

    @property
    def universe_name(self):
        return getattr(self.universe_type, "name", "UNKNOWN")

    def is_valid(self):
        """Check whether Steam would consider the ID valid.

        This doesn't check that the account exists, nor that it's an
        individual account in the public universe. The token is ignored.
        """
        if not AccountType.INVALID < self.type <= AccountType.ANON_USER:
            return False
        if not Universe.INVALID < self.universe <= Universe.DEV:
            return False
        if self.type == AccountType.INDIVIDUAL:
            if self.account_number == 0 or self.instance > Instance.WEB:
                return False
        elif self.type == AccountType.CLAN:
            if self.account_number == 0 or self.instance != Instance.ALL:
                return False
        elif self.type == AccountType.GAME_SERVER:
            if self.account_number == 0:
                return False
        return True

    def is_valid_individual(self):
        """Check the ID is a valid, public, desktop individual account.

        This is what most people mean by a SteamID.
        """
        return (self.universe == Universe.PUBLIC
                and self.type == AccountType.INDIVIDUAL
                and self.instance == Instance.DESKTOP
                and self.is_valid())

    def is_group_chat(self):
        """Check whether the ID is for a legacy group chat room."""
        return (self.type == AccountType.CHAT
                and bool(self.instance & CHAT_INSTANCE_FLAG_CLAN))

    def is_lobby(self):
        """Check whether the ID is for a game lobby."""
        return (self.type == AccountType.CHAT
                and bool(self.instance & (CHAT_INSTANCE_FLAG_LOBBY
                                          | CHAT_INSTANCE_FLAG_MMS_LOBBY)))

    def as_legacy(self, new_universe_numbering=False):
        """Render the ID in the legacy ``STEAM_X:Y:Z`` form.

        Older games render the public universe as ``0``, which is what
        this does unless ``new_universe_numbering`` is set.

        :returns: the rendered ID, or an empty string if the ID isn't for
            an individual account.
        """
        if self.type != AccountType.INDIVIDUAL:
            return ""
        universe = self.universe
        if not new_universe_numbering and universe == Universe.PUBLIC:
            universe = 0
        return "STEAM_{}:{}:{}".format(
            universe, self.account_number & 1, self.account_number // 2)

    def as_bracket(self):
        """Render the ID in the bracketed ``[T:U:W]`` form.

        The instance is appended as a fourth field for anonymous game
        servers, multiseat accounts and non-desktop individual accounts.
        """
        if self.instance & CHAT_INSTANCE_FLAG_CLAN:
            char = "c"
        elif self.instance & CHAT_INSTANCE_FLAG_LOBBY:
            char = "L"
        else:
            char = type_char(self.type)
        if (self.type in (AccountType.ANON_GAME_SERVER,
                          AccountType.MULTISEAT)
                or (self.type == AccountType.INDIVIDUAL
                    and self.instance != Instance.DESKTOP)):
            return "[{}:{}:{}:{}]".format(
                char, self.universe, self.account_number, self.instance)
        return "[{}:{}:{}]".format(char, self.universe, self.account_number)

    def as_int(self):
        """Pack the ID into its 64-bit integer form."""
        return (self.universe << UNIVERSE_SHIFT
                | self.type << ACCOUNT_TYPE_SHIFT
                | self.instance << ACCOUNT_INSTANCE_SHIFT
                | self.account_number)

    def as_64(self):
        """
            Returns the 64-bit ID as a decimal string. This is the
            canonical textual form used across Steam.
        """
        return str(self.as_int())

    def community_url(self, id64=True):
        """
            Returns a fully qualified URL to the Steam community page
            relating to the SteamID. Can use either the 64-bit (default)
            or bracketed ID.

            Only available for individual and clan IDs.
        """
        try:
            path = type_url_path_map[self.type]
        except KeyError:
            raise SteamIDError(
                "Cannot generate community URL for "
                "type {}".format(self.type_name))
        return "{}{}/{}".format(self.base_community_url, path,
                                self.as_64() if id64 else self.as_bracket())

    def trade_url(self):
        """Render the trade offer URL this ID was created from.

        Only individual accounts can be trade partners.

        :raises SteamIDError: if the ID has no token or isn't for an
            individual account.
        """
        if self.type != AccountType.INDIVIDUAL:
            raise SteamIDError(
                "Cannot generate trade URL for type {}".format(self.type_name))
        if not self.token:
            raise SteamIDError("SteamID has no trade token")
        return "{}tradeoffer/new/?partner={}&token={}".format(
            self.base_community_url, self.account_number, self.token)

    def _fields(self):
        return (self.account_number, self.instance, self.type, self.universe)

    def __int__(self):
        return self.as_int()

    def __str__(self):
        return self.as_64()

    def __repr__(self):
        if self.token:
            return "<{} {} token={!r}>".format(
                self.__class__.__name__, self.as_bracket(), self.token)
        return "<{} {}>".format(self.__class__.__name__, self.as_bracket())

    def __eq__(self, other):
        try:
            return self._fields() == other._fields()
        except AttributeError:
            return False

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._fields())


def parse(text):
    """Parse a SteamID. See :meth:`SteamID.parse`."""
    return SteamID.parse(text)
