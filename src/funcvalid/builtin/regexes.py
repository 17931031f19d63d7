"""
Contains the regular expressions the catalog validators are built from. The collection follows the one of the
go-playground validator project (https://github.com/go-playground/validator). Unicode property classes are expressed
with the character classes the `re` module supports.
"""
import re

from frozendict import frozendict

# characters outside of ASCII which are allowed in email addresses and hostnames (RFC 6531)
_UCS = "\u00a0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef"
_EMAIL_ATEXT = "[a-zA-Z0-9!#$%&'*+\\-/=?^_`{|}~" + _UCS + "]"
_EMAIL_QUOTED = '"(?:[\\x20\\x09]|[\\x01-\\x08\\x0b\\x0c\\x0e-\\x1f\\x7f\\x21\\x23-\\x5b\\x5d-\\x7e' + _UCS + "])*\""
_EMAIL_LABEL = "[a-zA-Z0-9" + _UCS + "](?:[a-zA-Z0-9\\-.~" + _UCS + "]*[a-zA-Z0-9" + _UCS + "])?"
_EMAIL_TLD = "[a-zA-Z" + _UCS + "](?:[a-zA-Z0-9\\-.~" + _UCS + "]*[a-zA-Z" + _UCS + "])?"
_BASE64 = "(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})"
_RGB_BYTE = "(?:0|[1-9]\\d?|1\\d\\d?|2[0-4]\\d|25[0-5])"
_HUE = "(?:0|[1-9]\\d?|[12]\\d\\d|3[0-5]\\d|360)"
_PERCENT = "(?:(?:0|[1-9]\\d?|100)%)"
_ALPHA_CHANNEL = "(?:(?:0\\.\\d+)|[01](?:\\.0+)?)"
_SEMVER_IDENTIFIER = "(?:0|[1-9]\\d*|\\d*[a-zA-Z-][0-9a-zA-Z-]*)"

PATTERN_STRINGS: frozendict[str, str] = frozendict(
    {
        "alpha": r"^[a-zA-Z]+$",
        "alpha_numeric": r"^[a-zA-Z0-9]+$",
        "alpha_unicode": r"^[^\W\d_]+$",
        "alpha_unicode_numeric": r"^[^\W_]+$",
        "numeric": r"^[-+]?[0-9]+(?:\.[0-9]+)?$",
        "number": r"^[0-9]+$",
        "hexadecimal": r"^(0[xX])?[0-9a-fA-F]+$",
        "hex_color": r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$",
        "rgb": (
            rf"^rgb\(\s*(?:{_RGB_BYTE}\s*,\s*{_RGB_BYTE}\s*,\s*{_RGB_BYTE}"
            rf"|{_RGB_BYTE}%\s*,\s*{_RGB_BYTE}%\s*,\s*{_RGB_BYTE}%)\s*\)$"
        ),
        "rgba": (
            rf"^rgba\(\s*(?:{_RGB_BYTE}\s*,\s*{_RGB_BYTE}\s*,\s*{_RGB_BYTE}"
            rf"|{_RGB_BYTE}%\s*,\s*{_RGB_BYTE}%\s*,\s*{_RGB_BYTE}%)\s*,\s*{_ALPHA_CHANNEL}\s*\)$"
        ),
        "hsl": rf"^hsl\(\s*{_HUE}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*\)$",
        "hsla": rf"^hsla\(\s*{_HUE}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*,\s*{_ALPHA_CHANNEL}\s*\)$",
        "e164": r"^\+[1-9]?[0-9]{7,14}$",
        "email": (
            f"^(?:{_EMAIL_ATEXT}+(?:\\.{_EMAIL_ATEXT}+)*|{_EMAIL_QUOTED})"
            f"@(?:{_EMAIL_LABEL}\\.)+{_EMAIL_TLD}\\.?$"
        ),
        "base64": f"^{_BASE64}$",
        "base64_url": r"^(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2}==|[A-Za-z0-9_-]{3}=|[A-Za-z0-9_-]{4})$",
        "base64_raw_url": r"^(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2,4})$",
        "isbn10": r"^(?:[0-9]{9}X|[0-9]{10})$",
        "isbn13": r"^(?:(?:97(?:8|9))[0-9]{10})$",
        "uuid3": r"^[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$",
        "uuid4": r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
        "uuid5": r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
        "uuid": r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
        "uuid3_rfc4122": r"^[0-9a-f]{8}-?[0-9a-f]{4}-?3[0-9a-f]{3}-?[0-9a-f]{4}-?[0-9a-f]{12}$",
        "uuid4_rfc4122": r"^[0-9a-f]{8}-?[0-9a-f]{4}-?4[0-9a-f]{3}-?[89ab][0-9a-f]{3}-?[0-9a-f]{12}$",
        "uuid5_rfc4122": r"^[0-9a-f]{8}-?[0-9a-f]{4}-?5[0-9a-f]{3}-?[89ab][0-9a-f]{3}-?[0-9a-f]{12}$",
        "uuid_rfc4122": r"^[0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12}$",
        "ulid": r"(?i)^[A-HJKMNP-TV-Z0-9]{26}$",
        "md4": r"^[0-9a-f]{32}$",
        "md5": r"^[0-9a-f]{32}$",
        "sha256": r"^[0-9a-f]{64}$",
        "sha384": r"^[0-9a-f]{96}$",
        "sha512": r"^[0-9a-f]{128}$",
        "ripemd128": r"^[0-9a-f]{32}$",
        "ripemd160": r"^[0-9a-f]{40}$",
        "tiger128": r"^[0-9a-f]{32}$",
        "tiger160": r"^[0-9a-f]{40}$",
        "tiger192": r"^[0-9a-f]{48}$",
        "ascii": r"^[\x00-\x7F]*$",
        "printable_ascii": r"^[\x20-\x7E]*$",
        "multibyte": r"[^\x00-\x7F]",
        "data_uri": rf"^data:(?:\w+/[-+.\w]+(?:;[-\w]+=[-\w.]+)*)?;base64,{_BASE64}$",
        "latitude": r"^[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)$",
        "longitude": r"^[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)$",
        "ssn": (
            r"^[0-9]{3}[ -]?(0[1-9]|[1-9][0-9])[ -]?"
            r"([1-9][0-9]{3}|[0-9][1-9][0-9]{2}|[0-9]{2}[1-9][0-9]|[0-9]{3}[1-9])$"
        ),
        "hostname_rfc952": r"^[a-zA-Z]([a-zA-Z0-9\-]+[\.]?)*[a-zA-Z0-9]$",
        "hostname_rfc1123": r"^([a-zA-Z0-9]{1}[a-zA-Z0-9-]{0,62}){1}(\.[a-zA-Z0-9]{1}[a-zA-Z0-9-]{0,62})*?$",
        "fqdn_rfc1123": (
            r"^([a-zA-Z0-9]{1}[a-zA-Z0-9-]{0,62})(\.[a-zA-Z0-9]{1}[a-zA-Z0-9-]{0,62})*?"
            r"(\.[a-zA-Z]{1}[a-zA-Z0-9]{0,62})\.?$"
        ),
        "btc_address": r"^[13][a-km-zA-HJ-NP-Z1-9]{25,34}$",
        "btc_upper_address_bech32": r"^BC1[02-9AC-HJ-NP-Z]{7,76}$",
        "btc_lower_address_bech32": r"^bc1[02-9ac-hj-np-z]{7,76}$",
        "eth_address": r"^0x[0-9a-fA-F]{40}$",
        "url_encoded": r"^(?:[^%]|%[0-9A-Fa-f]{2})*$",
        "html_encoded": r"&#[x]?([0-9a-fA-F]{2})|(&gt)|(&lt)|(&quot)|(&amp)+[;]?",
        "html": r"<[/]?([a-zA-Z]+).*?>",
        "jwt": r"^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*$",
        "split_params": r"'[^']*'|\S+",
        "bic": r"^[A-Za-z]{6}[A-Za-z0-9]{2}([A-Za-z0-9]{3})?$",
        "semver": (
            r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
            rf"(?:-({_SEMVER_IDENTIFIER}(?:\.{_SEMVER_IDENTIFIER})*))?"
            r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
        ),
        "dns_rfc1035_label": r"^[a-z]([-a-z0-9]*[a-z0-9]){0,62}$",
        "cve": r"^CVE-(1999|2\d{3})-(0[^0]\d{2}|0\d[^0]\d{1}|0\d{2}[^0]|[1-9]{1}\d{3,})$",
        "mongodb": r"^[a-f\d]{24}$",
        "cron": (
            r"(@(annually|yearly|monthly|weekly|daily|hourly|reboot))"
            r"|(@every (\d+(ns|us|µs|ms|s|m|h))+)"
            r"|((((\d+,)+\d+|((\*|\d+)(\/|-)\d+)|\d+|\*) ?){5,7})"
        ),
        "spicedb_id": r"^(([a-zA-Z0-9/_|\-=+]{1,})|\*)$",
        "spicedb_permission": r"^([a-z][a-z0-9_]{1,62}[a-z0-9])?$",
        "spicedb_type": r"^([a-z][a-z0-9_]{1,61}[a-z0-9]/)?[a-z][a-z0-9_]{1,62}[a-z0-9]$",
    }
)


def anchor_at_end(pattern: str) -> str:
    """
    Returns the pattern with every `$` outside of a character class replaced by `\\Z`. Unlike `$`, `\\Z` does not match
    in front of a trailing newline, so `^\\d{4}$` no longer accepts "8200\\n".
    """
    translated: list[str] = []
    in_class = False
    class_start = 0
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "\\":
            translated.append(pattern[index : index + 2])
            index += 2
            continue
        if char == "[" and not in_class:
            in_class = True
            # a "]" directly after "[" or "[^" is a literal
            class_start = index + 2 if pattern[index + 1 : index + 2] == "^" else index + 1
        elif char == "]" and in_class and index > class_start:
            in_class = False
        elif char == "$" and not in_class:
            char = r"\Z"
        translated.append(char)
        index += 1
    return "".join(translated)


PATTERNS: frozendict[str, re.Pattern] = frozendict(
    {name: re.compile(anchor_at_end(pattern)) for name, pattern in PATTERN_STRINGS.items()}
)
