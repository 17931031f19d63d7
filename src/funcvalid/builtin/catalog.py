"""
Contains the pre-built string validators. Each of them is an instance of `RegexpRE` with one of the patterns from
`funcvalid.builtin.regexes`, a `KeyIn` over one of the ISO code tables or one of the hand-written validators from
`funcvalid.builtin.uris`. All of them are created once on import and are read-only afterwards.
"""
import logging
from typing import Any

from frozendict import frozendict

from funcvalid.factories import ErrorValidator, KeyIn, RegexpRE
from funcvalid.validator import Validator

from .iso3166 import ISO3166_1_ALPHA2, ISO3166_1_ALPHA3, ISO3166_1_NUMERIC
from .iso4217 import ISO4217, ISO4217_NUMERIC
from .postcodes import POSTCODE_PATTERNS
from .regexes import PATTERNS
from .uris import URI, File, HttpUrl, Url, UrnRFC2141

_logger = logging.getLogger(__name__)


def _regexp(key: str, rule_name: str) -> RegexpRE:
    return RegexpRE(PATTERNS[key], rule_name)


# pylint: disable=invalid-name
Alpha = _regexp("alpha", "Alpha")
AlphaNumeric = _regexp("alpha_numeric", "AlphaNumeric")
AlphaUnicode = _regexp("alpha_unicode", "AlphaUnicode")
AlphaUnicodeNumeric = _regexp("alpha_unicode_numeric", "AlphaUnicodeNumeric")
Numeric = _regexp("numeric", "Numeric")
Number = _regexp("number", "Number")
Hexadecimal = _regexp("hexadecimal", "Hexadecimal")
HexColor = _regexp("hex_color", "HexColor")
Rgb = _regexp("rgb", "Rgb")
Rgba = _regexp("rgba", "Rgba")
Hsl = _regexp("hsl", "Hsl")
Hsla = _regexp("hsla", "Hsla")
E164 = _regexp("e164", "E164")
Email = _regexp("email", "Email")
Base64 = _regexp("base64", "Base64")
Base64URL = _regexp("base64_url", "Base64URL")
Base64RawURL = _regexp("base64_raw_url", "Base64RawURL")
ISBN10 = _regexp("isbn10", "ISBN10")
ISBN13 = _regexp("isbn13", "ISBN13")
UUID3 = _regexp("uuid3", "UUID3")
UUID4 = _regexp("uuid4", "UUID4")
UUID5 = _regexp("uuid5", "UUID5")
UUID = _regexp("uuid", "UUID")
UUID3RFC4122 = _regexp("uuid3_rfc4122", "UUID3RFC4122")
UUID4RFC4122 = _regexp("uuid4_rfc4122", "UUID4RFC4122")
UUID5RFC4122 = _regexp("uuid5_rfc4122", "UUID5RFC4122")
UUIDRFC4122 = _regexp("uuid_rfc4122", "UUIDRFC4122")
ULID = _regexp("ulid", "ULID")
Md4 = _regexp("md4", "Md4")
Md5 = _regexp("md5", "Md5")
Sha256 = _regexp("sha256", "Sha256")
Sha384 = _regexp("sha384", "Sha384")
Sha512 = _regexp("sha512", "Sha512")
Ripemd128 = _regexp("ripemd128", "Ripemd128")
Ripemd160 = _regexp("ripemd160", "Ripemd160")
Tiger128 = _regexp("tiger128", "Tiger128")
Tiger160 = _regexp("tiger160", "Tiger160")
Tiger192 = _regexp("tiger192", "Tiger192")
ASCII = _regexp("ascii", "ASCII")
PrintableASCII = _regexp("printable_ascii", "PrintableASCII")
Multibyte = _regexp("multibyte", "Multibyte")
DataURI = _regexp("data_uri", "DataURI")
Latitude = _regexp("latitude", "Latitude")
Longitude = _regexp("longitude", "Longitude")
SSN = _regexp("ssn", "SSN")
HostnameRFC952 = _regexp("hostname_rfc952", "HostnameRFC952")
HostnameRFC1123 = _regexp("hostname_rfc1123", "HostnameRFC1123")
FqdnRFC1123 = _regexp("fqdn_rfc1123", "FqdnRFC1123")
BtcAddress = _regexp("btc_address", "BtcAddress")
BtcUpperAddressBech32 = _regexp("btc_upper_address_bech32", "BtcUpperAddressBech32")
BtcLowerAddressBech32 = _regexp("btc_lower_address_bech32", "BtcLowerAddressBech32")
EthAddress = _regexp("eth_address", "EthAddress")
URLEncoded = _regexp("url_encoded", "URLEncoded")
HTMLEncoded = _regexp("html_encoded", "HTMLEncoded")
HTML = _regexp("html", "HTML")
JWT = _regexp("jwt", "JWT")
SplitParams = _regexp("split_params", "SplitParams")
Bic = _regexp("bic", "Bic")
Semver = _regexp("semver", "Semver")
DnsRFC1035Label = _regexp("dns_rfc1035_label", "DnsRFC1035Label")
Cve = _regexp("cve", "Cve")
Mongodb = _regexp("mongodb", "Mongodb")
Cron = _regexp("cron", "Cron")
SpicedbID = _regexp("spicedb_id", "SpicedbID")
SpicedbPermission = _regexp("spicedb_permission", "SpicedbPermission")
SpicedbType = _regexp("spicedb_type", "SpicedbType")

Iso3166Alpha2: KeyIn[str, str] = KeyIn(ISO3166_1_ALPHA2)
Iso3166Alpha3: KeyIn[str, str] = KeyIn(ISO3166_1_ALPHA3)
Iso3166AlphaNumeric: KeyIn[int, str] = KeyIn(ISO3166_1_NUMERIC)
Iso4217: KeyIn[str, int] = KeyIn(ISO4217)
Iso4217Numeric: KeyIn[int, str] = KeyIn(ISO4217_NUMERIC)


def PostCodeByIso3166(country_code: str) -> Validator[Any]:
    """
    Returns a validator for the postal codes of the given country (ISO 3166-1 alpha-2 code). For an unknown country
    code the returned validator fails on every input, i.e. the error shows up when validating, not here.
    """
    try:
        pattern = POSTCODE_PATTERNS.get(country_code)
    except TypeError:
        # unhashable country code
        pattern = None
    if pattern is None:
        _logger.debug("No postal code pattern for country code %r", country_code)
        return ErrorValidator("invalid country code")
    return RegexpRE(pattern, f"PostCodeByIso3166[{country_code}]")


CATALOG: frozendict[str, Validator[Any]] = frozendict(
    {
        "alpha": Alpha,
        "alpha_numeric": AlphaNumeric,
        "alpha_unicode": AlphaUnicode,
        "alpha_unicode_numeric": AlphaUnicodeNumeric,
        "numeric": Numeric,
        "number": Number,
        "hexadecimal": Hexadecimal,
        "hex_color": HexColor,
        "rgb": Rgb,
        "rgba": Rgba,
        "hsl": Hsl,
        "hsla": Hsla,
        "e164": E164,
        "email": Email,
        "base64": Base64,
        "base64_url": Base64URL,
        "base64_raw_url": Base64RawURL,
        "isbn10": ISBN10,
        "isbn13": ISBN13,
        "uuid3": UUID3,
        "uuid4": UUID4,
        "uuid5": UUID5,
        "uuid": UUID,
        "uuid3_rfc4122": UUID3RFC4122,
        "uuid4_rfc4122": UUID4RFC4122,
        "uuid5_rfc4122": UUID5RFC4122,
        "uuid_rfc4122": UUIDRFC4122,
        "ulid": ULID,
        "md4": Md4,
        "md5": Md5,
        "sha256": Sha256,
        "sha384": Sha384,
        "sha512": Sha512,
        "ripemd128": Ripemd128,
        "ripemd160": Ripemd160,
        "tiger128": Tiger128,
        "tiger160": Tiger160,
        "tiger192": Tiger192,
        "ascii": ASCII,
        "printable_ascii": PrintableASCII,
        "multibyte": Multibyte,
        "data_uri": DataURI,
        "latitude": Latitude,
        "longitude": Longitude,
        "ssn": SSN,
        "hostname_rfc952": HostnameRFC952,
        "hostname_rfc1123": HostnameRFC1123,
        "fqdn_rfc1123": FqdnRFC1123,
        "btc_address": BtcAddress,
        "btc_upper_address_bech32": BtcUpperAddressBech32,
        "btc_lower_address_bech32": BtcLowerAddressBech32,
        "eth_address": EthAddress,
        "url_encoded": URLEncoded,
        "html_encoded": HTMLEncoded,
        "html": HTML,
        "jwt": JWT,
        "split_params": SplitParams,
        "bic": Bic,
        "semver": Semver,
        "dns_rfc1035_label": DnsRFC1035Label,
        "cve": Cve,
        "mongodb": Mongodb,
        "cron": Cron,
        "spicedb_id": SpicedbID,
        "spicedb_permission": SpicedbPermission,
        "spicedb_type": SpicedbType,
        "iso3166_alpha2": Iso3166Alpha2,
        "iso3166_alpha3": Iso3166Alpha3,
        "iso3166_alpha_numeric": Iso3166AlphaNumeric,
        "iso4217": Iso4217,
        "iso4217_numeric": Iso4217Numeric,
        "url": Url,
        "http_url": HttpUrl,
        "uri": URI,
        "urn_rfc2141": UrnRFC2141,
        "file": File,
    }
)
"""Maps the names of the catalog validators onto the validators"""


def lookup(name: str) -> Validator[Any]:
    """
    Returns the catalog validator registered under `name`. For an unknown name the returned validator fails on every
    input (the same way `PostCodeByIso3166` handles unknown country codes).
    """
    try:
        validator = CATALOG.get(name)
    except TypeError:
        validator = None
    if validator is None:
        _logger.debug("No catalog validator named %r", name)
        return ErrorValidator(f"unknown validator {name}")
    return validator


_logger.debug("Built validator catalog with %d entries", len(CATALOG))
