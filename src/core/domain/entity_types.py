"""Built-in entity type names of the client (all under the `maltego.` namespace)."""

from __future__ import annotations

NAMESPACE = "maltego"

AS = "maltego.AS"
AFFILIATION = "maltego.Affiliation"
ALIAS = "maltego.Alias"
BANNER = "maltego.Banner"
BUILT_WITH_RELATIONSHIP = "maltego.BuiltWithRelationship"
BUILT_WITH_TECHNOLOGY = "maltego.BuiltWithTechnology"
CIRCULAR_AREA = "maltego.CircularArea"
COMPANY = "maltego.Company"
DNS_NAME = "maltego.DNSName"
DATE_TIME = "maltego.DateTime"
DEVICE = "maltego.Device"
DOCUMENT = "maltego.Document"
DOMAIN = "maltego.Domain"
EMAIL_ADDRESS = "maltego.EmailAddress"
FILE = "maltego.File"
GPS = "maltego.GPS"
HASH = "maltego.Hash"
IPV4_ADDRESS = "maltego.IPv4Address"
IMAGE = "maltego.Image"
LOCATION = "maltego.Location"
MX_RECORD = "maltego.MXRecord"
NS_RECORD = "maltego.NSRecord"
NETBLOCK = "maltego.Netblock"
ORGANIZATION = "maltego.Organization"
PERSON = "maltego.Person"
PHONE_NUMBER = "maltego.PhoneNumber"
PHRASE = "maltego.Phrase"
PORT = "maltego.Port"
SENTIMENT = "maltego.Sentiment"
SERVICE = "maltego.Service"
TWIT = "maltego.Twit"
URL = "maltego.URL"
UNIQUE_IDENTIFIER = "maltego.UniqueIdentifier"
WEB_TITLE = "maltego.WebTitle"
WEBSITE = "maltego.Website"

BUILTIN_ENTITY_TYPES: frozenset[str] = frozenset(
    value
    for key, value in dict(globals()).items()
    if key.isupper() and isinstance(value, str) and value.startswith(NAMESPACE + ".")
)


def qualify(type_name: str) -> str:
    """Prefix a bare type name (`DNSName`) with the builtin namespace.

    Names that already carry a namespace are returned unchanged.
    """

    if "." in type_name:
        return type_name
    return f"{NAMESPACE}.{type_name}"
