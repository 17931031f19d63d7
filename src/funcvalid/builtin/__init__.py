"""
Contains the catalog of pre-built string validators (formats, ISO codes, postal codes, URLs, URNs and files).
"""
from .catalog import (
    ASCII,
    CATALOG,
    HTML,
    ISBN10,
    ISBN13,
    JWT,
    SSN,
    ULID,
    UUID,
    UUID3,
    UUID3RFC4122,
    UUID4,
    UUID4RFC4122,
    UUID5,
    UUID5RFC4122,
    UUIDRFC4122,
    Alpha,
    AlphaNumeric,
    AlphaUnicode,
    AlphaUnicodeNumeric,
    Base64,
    Base64RawURL,
    Base64URL,
    Bic,
    BtcAddress,
    BtcLowerAddressBech32,
    BtcUpperAddressBech32,
    Cron,
    Cve,
    DataURI,
    DnsRFC1035Label,
    E164,
    Email,
    EthAddress,
    FqdnRFC1123,
    Hexadecimal,
    HexColor,
    HostnameRFC952,
    HostnameRFC1123,
    Hsl,
    Hsla,
    HTMLEncoded,
    Iso3166Alpha2,
    Iso3166Alpha3,
    Iso3166AlphaNumeric,
    Iso4217,
    Iso4217Numeric,
    Latitude,
    Longitude,
    Md4,
    Md5,
    Mongodb,
    Multibyte,
    Number,
    Numeric,
    PostCodeByIso3166,
    PrintableASCII,
    Rgb,
    Rgba,
    Ripemd128,
    Ripemd160,
    Semver,
    Sha256,
    Sha384,
    Sha512,
    SpicedbID,
    SpicedbPermission,
    SpicedbType,
    SplitParams,
    Tiger128,
    Tiger160,
    Tiger192,
    URLEncoded,
    lookup,
)
from .uris import URI, File, FileValidator, HttpUrl, Url, UrnRFC2141, is_existing_file
