"""
Closed catalogs used across Lodestone pages.

Each catalog is an Enum whose value is the canonical display string.
Parsing goes through a per-catalog lookup table keyed by the uppercased,
trimmed text, so synonyms and historical spellings map onto the same
member. Unknown text raises the catalog's own CatalogParseError subclass
carrying the original string.
"""

from enum import Enum

from xiv_lodestone.exceptions import (
    CatalogParseError,
    ClanParseError,
    DatacenterParseError,
    GenderParseError,
    GrandCompanyParseError,
    LanguageParseError,
    RaceParseError,
    ServerNameParseError,
)


def _lookup(table: dict[str, Enum], text: str, error: type[CatalogParseError]):
    member = table.get(text.strip().upper())
    if member is None:
        raise error(text)
    return member


def _table(members, synonyms: dict[str, str] | None = None) -> dict:
    table = {member.value.upper(): member for member in members}
    for alias, canonical in (synonyms or {}).items():
        table[alias.upper()] = table[canonical.upper()]
    return table


class Race(Enum):
    AU_RA = "Au Ra"
    ELEZEN = "Elezen"
    HROTHGAR = "Hrothgar"
    HYUR = "Hyur"
    LALAFELL = "Lalafell"
    MIQOTE = "Miqo'te"
    ROEGADYN = "Roegadyn"
    VIERA = "Viera"

    @classmethod
    def parse(cls, text: str) -> "Race":
        return _lookup(_RACES, text, RaceParseError)

    def __str__(self) -> str:
        return self.value


class Clan(Enum):
    RAEN = "Raen"
    XAELA = "Xaela"
    WILDWOOD = "Wildwood"
    DUSKWIGHT = "Duskwight"
    HELIONS = "Helions"
    THE_LOST = "The Lost"
    MIDLANDER = "Midlander"
    HIGHLANDER = "Highlander"
    PLAINSFOLK = "Plainsfolk"
    DUNESFOLK = "Dunesfolk"
    SEEKER_OF_THE_SUN = "Seeker of the Sun"
    KEEPER_OF_THE_MOON = "Keeper of the Moon"
    SEA_WOLF = "Sea Wolf"
    HELLSGUARD = "Hellsguard"
    RAVA = "Rava"
    VEENA = "Veena"

    @classmethod
    def parse(cls, text: str) -> "Clan":
        return _lookup(_CLANS, text, ClanParseError)

    @property
    def race(self) -> Race:
        return _CLAN_RACE[self]

    def __str__(self) -> str:
        return self.value


class Gender(Enum):
    FEMALE = "Female"
    MALE = "Male"

    @classmethod
    def parse(cls, text: str) -> "Gender":
        return _lookup(_GENDERS, text, GenderParseError)

    @property
    def symbol(self) -> str:
        return "♀" if self is Gender.FEMALE else "♂"

    def __str__(self) -> str:
        return self.value


class GrandCompany(Enum):
    MAELSTROM = "Maelstrom"
    TWIN_ADDER = "Order of the Twin Adder"
    IMMORTAL_FLAMES = "Immortal Flames"
    UNAFFILIATED = "Unaffiliated"

    @classmethod
    def parse(cls, text: str) -> "GrandCompany":
        return _lookup(_GRAND_COMPANIES, text, GrandCompanyParseError)

    @property
    def gcid(self) -> int:
        """Numeric id used by the search and ranking filters."""
        return _GCID[self]

    def __str__(self) -> str:
        return self.value


class Language(Enum):
    JAPANESE = "Japanese"
    ENGLISH = "English"
    GERMAN = "German"
    FRENCH = "French"

    @classmethod
    def parse(cls, text: str) -> "Language":
        return _lookup(_LANGUAGES, text, LanguageParseError)

    @property
    def code(self) -> str:
        return _LANGUAGE_CODES[self]

    def __str__(self) -> str:
        return self.value


class Datacenter(Enum):
    AETHER = "Aether"
    CHAOS = "Chaos"
    CRYSTAL = "Crystal"
    DYNAMIS = "Dynamis"
    ELEMENTAL = "Elemental"
    GAIA = "Gaia"
    LIGHT = "Light"
    MANA = "Mana"
    MATERIA = "Materia"
    METEOR = "Meteor"
    PRIMAL = "Primal"

    @classmethod
    def parse(cls, text: str) -> "Datacenter":
        return _lookup(_DATACENTERS, text, DatacenterParseError)

    @property
    def servers(self) -> list["Server"]:
        return list(_DATACENTER_SERVERS[self])

    def __str__(self) -> str:
        return self.value


class Server(Enum):
    # Declaration order follows the world status page.
    # Elemental
    AEGIS = "Aegis"
    ATOMOS = "Atomos"
    CARBUNCLE = "Carbuncle"
    GARUDA = "Garuda"
    GUNGNIR = "Gungnir"
    KUJATA = "Kujata"
    TONBERRY = "Tonberry"
    TYPHON = "Typhon"
    # Gaia
    ALEXANDER = "Alexander"
    BAHAMUT = "Bahamut"
    DURANDAL = "Durandal"
    FENRIR = "Fenrir"
    IFRIT = "Ifrit"
    RIDILL = "Ridill"
    TIAMAT = "Tiamat"
    ULTIMA = "Ultima"
    # Mana
    ANIMA = "Anima"
    ASURA = "Asura"
    CHOCOBO = "Chocobo"
    HADES = "Hades"
    IXION = "Ixion"
    MASAMUNE = "Masamune"
    PANDAEMONIUM = "Pandaemonium"
    TITAN = "Titan"
    # Meteor
    BELIAS = "Belias"
    MANDRAGORA = "Mandragora"
    RAMUH = "Ramuh"
    SHINRYU = "Shinryu"
    UNICORN = "Unicorn"
    VALEFOR = "Valefor"
    YOJIMBO = "Yojimbo"
    ZEROMUS = "Zeromus"
    # Aether
    ADAMANTOISE = "Adamantoise"
    CACTUAR = "Cactuar"
    FAERIE = "Faerie"
    GILGAMESH = "Gilgamesh"
    JENOVA = "Jenova"
    MIDGARDSORMR = "Midgardsormr"
    SARGATANAS = "Sargatanas"
    SIREN = "Siren"
    # Primal
    BEHEMOTH = "Behemoth"
    EXCALIBUR = "Excalibur"
    EXODUS = "Exodus"
    FAMFRIT = "Famfrit"
    HYPERION = "Hyperion"
    LAMIA = "Lamia"
    LEVIATHAN = "Leviathan"
    ULTROS = "Ultros"
    # Crystal
    BALMUNG = "Balmung"
    BRYNHILDR = "Brynhildr"
    COEURL = "Coeurl"
    DIABOLOS = "Diabolos"
    GOBLIN = "Goblin"
    MALBORO = "Malboro"
    MATEUS = "Mateus"
    ZALERA = "Zalera"
    # Dynamis
    CUCHULAINN = "Cuchulainn"
    GOLEM = "Golem"
    HALICARNASSUS = "Halicarnassus"
    KRAKEN = "Kraken"
    MADUIN = "Maduin"
    MARILITH = "Marilith"
    RAFFLESIA = "Rafflesia"
    SERAPH = "Seraph"
    # Chaos
    CERBERUS = "Cerberus"
    LOUISOIX = "Louisoix"
    MOOGLE = "Moogle"
    OMEGA = "Omega"
    PHANTOM = "Phantom"
    RAGNAROK = "Ragnarok"
    SAGITTARIUS = "Sagittarius"
    SPRIGGAN = "Spriggan"
    # Light
    ALPHA = "Alpha"
    LICH = "Lich"
    ODIN = "Odin"
    PHOENIX = "Phoenix"
    RAIDEN = "Raiden"
    SHIVA = "Shiva"
    TWINTANIA = "Twintania"
    ZODIARK = "Zodiark"
    # Materia
    BISMARCK = "Bismarck"
    RAVANA = "Ravana"
    SEPHIROT = "Sephirot"
    SOPHIA = "Sophia"
    ZURVAN = "Zurvan"

    @classmethod
    def parse(cls, text: str) -> "Server":
        return _lookup(_SERVERS, text, ServerNameParseError)

    @property
    def datacenter(self) -> Datacenter:
        return _SERVER_DATACENTER[self]

    def __str__(self) -> str:
        return self.value


_RACES = _table(Race)
_CLANS = _table(Clan)
_GENDERS = _table(Gender, {"♀": "Female", "♂": "Male"})
_GRAND_COMPANIES = _table(
    GrandCompany,
    {
        "Twin Adder": "Order of the Twin Adder",
        "Order of the Immortal Flames": "Immortal Flames",
        "": "Unaffiliated",
        "None": "Unaffiliated",
    },
)
_LANGUAGES = _table(Language, {"ja": "Japanese", "en": "English", "de": "German", "fr": "French"})
_DATACENTERS = _table(Datacenter)
_SERVERS = _table(Server, {"Aniuma": "Anima"})

_DATACENTER_SERVERS: dict[Datacenter, tuple[Server, ...]] = {
    Datacenter.ELEMENTAL: (
        Server.AEGIS, Server.ATOMOS, Server.CARBUNCLE, Server.GARUDA,
        Server.GUNGNIR, Server.KUJATA, Server.TONBERRY, Server.TYPHON,
    ),
    Datacenter.GAIA: (
        Server.ALEXANDER, Server.BAHAMUT, Server.DURANDAL, Server.FENRIR,
        Server.IFRIT, Server.RIDILL, Server.TIAMAT, Server.ULTIMA,
    ),
    Datacenter.MANA: (
        Server.ANIMA, Server.ASURA, Server.CHOCOBO, Server.HADES,
        Server.IXION, Server.MASAMUNE, Server.PANDAEMONIUM, Server.TITAN,
    ),
    Datacenter.METEOR: (
        Server.BELIAS, Server.MANDRAGORA, Server.RAMUH, Server.SHINRYU,
        Server.UNICORN, Server.VALEFOR, Server.YOJIMBO, Server.ZEROMUS,
    ),
    Datacenter.AETHER: (
        Server.ADAMANTOISE, Server.CACTUAR, Server.FAERIE, Server.GILGAMESH,
        Server.JENOVA, Server.MIDGARDSORMR, Server.SARGATANAS, Server.SIREN,
    ),
    Datacenter.PRIMAL: (
        Server.BEHEMOTH, Server.EXCALIBUR, Server.EXODUS, Server.FAMFRIT,
        Server.HYPERION, Server.LAMIA, Server.LEVIATHAN, Server.ULTROS,
    ),
    Datacenter.CRYSTAL: (
        Server.BALMUNG, Server.BRYNHILDR, Server.COEURL, Server.DIABOLOS,
        Server.GOBLIN, Server.MALBORO, Server.MATEUS, Server.ZALERA,
    ),
    Datacenter.DYNAMIS: (
        Server.CUCHULAINN, Server.GOLEM, Server.HALICARNASSUS, Server.KRAKEN,
        Server.MADUIN, Server.MARILITH, Server.RAFFLESIA, Server.SERAPH,
    ),
    Datacenter.CHAOS: (
        Server.CERBERUS, Server.LOUISOIX, Server.MOOGLE, Server.OMEGA,
        Server.PHANTOM, Server.RAGNAROK, Server.SAGITTARIUS, Server.SPRIGGAN,
    ),
    Datacenter.LIGHT: (
        Server.ALPHA, Server.LICH, Server.ODIN, Server.PHOENIX,
        Server.RAIDEN, Server.SHIVA, Server.TWINTANIA, Server.ZODIARK,
    ),
    Datacenter.MATERIA: (
        Server.BISMARCK, Server.RAVANA, Server.SEPHIROT, Server.SOPHIA, Server.ZURVAN,
    ),
}

_SERVER_DATACENTER: dict[Server, Datacenter] = {
    server: datacenter
    for datacenter, servers in _DATACENTER_SERVERS.items()
    for server in servers
}

_CLAN_RACE: dict[Clan, Race] = {
    Clan.RAEN: Race.AU_RA,
    Clan.XAELA: Race.AU_RA,
    Clan.WILDWOOD: Race.ELEZEN,
    Clan.DUSKWIGHT: Race.ELEZEN,
    Clan.HELIONS: Race.HROTHGAR,
    Clan.THE_LOST: Race.HROTHGAR,
    Clan.MIDLANDER: Race.HYUR,
    Clan.HIGHLANDER: Race.HYUR,
    Clan.PLAINSFOLK: Race.LALAFELL,
    Clan.DUNESFOLK: Race.LALAFELL,
    Clan.SEEKER_OF_THE_SUN: Race.MIQOTE,
    Clan.KEEPER_OF_THE_MOON: Race.MIQOTE,
    Clan.SEA_WOLF: Race.ROEGADYN,
    Clan.HELLSGUARD: Race.ROEGADYN,
    Clan.RAVA: Race.VIERA,
    Clan.VEENA: Race.VIERA,
}

_GCID: dict[GrandCompany, int] = {
    GrandCompany.UNAFFILIATED: 0,
    GrandCompany.MAELSTROM: 1,
    GrandCompany.TWIN_ADDER: 2,
    GrandCompany.IMMORTAL_FLAMES: 3,
}

_LANGUAGE_CODES: dict[Language, str] = {
    Language.JAPANESE: "ja",
    Language.ENGLISH: "en",
    Language.GERMAN: "de",
    Language.FRENCH: "fr",
}
