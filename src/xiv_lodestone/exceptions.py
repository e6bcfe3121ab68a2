"""
Custom exceptions for Lodestone retrieval and extraction.

Every failure is a LodestoneError. Transport problems, missing pages,
structural changes in the markup and undecodable values each get their
own branch so callers can tell "the site is down" from "the page layout
changed" from "a value we did not expect".
"""


class LodestoneError(Exception):
    pass


# --- Transport ---


class TransportError(LodestoneError):
    pass


class PageNotFound(TransportError):
    def __init__(self, url: str, message: str | None = None):
        self.url = url
        super().__init__(message or f"Page not found: {url}")


class CharacterNotFound(PageNotFound):
    def __init__(self, user_id: int, url: str):
        self.user_id = user_id
        super().__init__(url, f"Character {user_id} not found")


# --- Catalog lookups ---


class CatalogParseError(LodestoneError):
    kind = "catalog"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid {self.kind} string '{text}'")


class RaceParseError(CatalogParseError):
    kind = "race"


class ClanParseError(CatalogParseError):
    kind = "clan"


class GenderParseError(CatalogParseError):
    kind = "gender"


class GrandCompanyParseError(CatalogParseError):
    kind = "grand company"


class DatacenterParseError(CatalogParseError):
    kind = "datacenter"


class ServerNameParseError(CatalogParseError):
    kind = "server"


class LanguageParseError(CatalogParseError):
    kind = "language"


class ClassTypeParseError(CatalogParseError):
    kind = "class"


# --- Extraction ---


class ExtractionError(LodestoneError):
    pass


class NodeNotFound(ExtractionError):
    def __init__(self, node: str):
        self.node = node
        super().__init__(f"Node not found: {node}")


class InvalidData(ExtractionError):
    def __init__(self, what: str):
        self.what = what
        super().__init__(f"Invalid data found while parsing '{what}'")


class IntegerParseError(InvalidData):
    def __init__(self, what: str, text: str):
        self.what = what
        self.text = text
        ExtractionError.__init__(self, f"Could not parse integer for '{what}' from {text!r}")


class CharacterImageError(ExtractionError):
    def __init__(self, node: str, message: str):
        self.node = node
        super().__init__(message)


class ImageNodeMissing(CharacterImageError):
    def __init__(self, node: str):
        super().__init__(node, f"Unable to find node {node} with an image")


class ImageUrlMissing(CharacterImageError):
    def __init__(self, node: str):
        super().__init__(node, f"Image URL was missing on node {node}")


class ServerParseError(ExtractionError):
    pass


class NodeMissing(ServerParseError):
    def __init__(self, node: str):
        self.node = node
        super().__init__(f"Node was missing: {node}")


class CategoryParseError(ServerParseError):
    def __init__(self, actual: str):
        self.actual = actual
        super().__init__(f"Invalid server category, found '{actual}'")


class FreeCompanyParseError(ExtractionError):
    message = "Free company ranking row is malformed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class TableNotFound(FreeCompanyParseError):
    message = "Couldn't find the ranking table"


class RankingMissing(FreeCompanyParseError):
    message = "Ranking missing"


class FreeCompanyMissing(FreeCompanyParseError):
    message = "Free company missing"


class WorldNameMissing(FreeCompanyParseError):
    message = "World name missing"


class DataCenterMissing(FreeCompanyParseError):
    message = "Data center missing"


class GrandCompanyMissing(FreeCompanyParseError):
    message = "Grand company missing"


class CreditsMissing(FreeCompanyParseError):
    message = "Credits missing"
