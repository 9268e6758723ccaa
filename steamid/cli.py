# -*- coding: utf-8 -*-
# Copyright (C) 2013 Oliver Ainsworth

"""Command-line interface for inspecting SteamIDs."""

import logging
import sys

import docopt

from .id import SteamID, SteamIDError


log = logging.getLogger(__name__)
# Docopt limitation prevents us from using ``python -m steamid.cli``
# instead of the substituted ``{program}``.
# See: https://github.com/docopt/docopt/issues/41
_USAGE = """
Usage:
  {program} [-n] [-d] ID...
  {program} -t URL [-n] [-d]

Arguments:
  ID            SteamID in 64-bit, STEAM_X:Y:Z or [T:U:W] form.

Options:
  -h --help     Show this help.
  -t URL --trade-url=URL
                Describe the SteamID of a trade offer URL.
  -n --new-format
                Render STEAM_X:Y:Z IDs with the public universe as 1
                rather than 0.
  -d --debug    Log debugging information to stderr.
"""


def describe(steam_id, new_universe_numbering=False):
    """Describe a SteamID in all of its formats.

    :returns: a multi-line string, one field per line.
    """
    lines = [
        "SteamID: {}".format(steam_id.as_64()),
        "Account number: {}".format(steam_id.account_number),
        "Type: {} ({})".format(steam_id.type, steam_id.type_name),
        "Universe: {} ({})".format(steam_id.universe,
                                   steam_id.universe_name),
        "Instance: {}".format(steam_id.instance),
        "Legacy: {}".format(steam_id.as_legacy(new_universe_numbering)),
        "Bracket: {}".format(steam_id.as_bracket()),
    ]
    try:
        lines.append("Community URL: {}".format(steam_id.community_url()))
    except SteamIDError:
        log.debug("No community URL for %r", steam_id)
    if steam_id.token:
        lines.append("Trade token: {}".format(steam_id.token))
    lines += [
        "Valid: {}".format(steam_id.is_valid()),
        "Valid individual: {}".format(steam_id.is_valid_individual()),
        "Group chat: {}".format(steam_id.is_group_chat()),
        "Lobby: {}".format(steam_id.is_lobby()),
    ]
    return "\n".join(lines)


def _main(argv=None):
    """SteamID inspector entry-point.

    Each given ID is parsed and described on stdout. IDs which fail to
    parse are reported on stderr.

    :param argv: command line options.

    :returns: the exit status; 1 if any ID failed to parse.
    """
    arguments = docopt.docopt(_USAGE.format(program=sys.argv[0]), argv)
    if arguments["--debug"]:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(message)s",
                            level=logging.DEBUG)
    new_format = arguments["--new-format"]
    if arguments["--trade-url"] is not None:
        inputs = [(SteamID.from_trade_url, arguments["--trade-url"])]
    else:
        inputs = [(SteamID.parse, text) for text in arguments["ID"]]
    status = 0
    descriptions = []
    for factory, text in inputs:
        try:
            steam_id = factory(text)
        except SteamIDError as exc:
            print("{}: {}".format(text, exc), file=sys.stderr)
            status = 1
        else:
            descriptions.append(describe(steam_id, new_format))
    if descriptions:
        print("\n\n".join(descriptions))
    return status


if __name__ == "__main__":
    sys.exit(_main())
