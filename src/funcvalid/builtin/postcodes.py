"""
Contains the postal code patterns by ISO 3166-1 alpha-2 country code.
"""
import re

from frozendict import frozendict

from .regexes import anchor_at_end

POSTCODE_PATTERN_STRINGS: frozendict[str, str] = frozendict(
    {
        "AD": r"^AD\d{3}$",
        "AM": r"^(37)?\d{4}$",
        "AR": r"^([A-HJ-NP-Z])?\d{4}([A-Z]{3})?$",
        "AS": r"^96799$",
        "AT": r"^\d{4}$",
        "AU": r"^\d{4}$",
        "AX": r"^22\d{3}$",
        "AZ": r"^\d{4}$",
        "BA": r"^\d{5}$",
        "BB": r"^(BB\d{5})?$",
        "BD": r"^\d{4}$",
        "BE": r"^\d{4}$",
        "BG": r"^\d{4}$",
        "BH": r"^((1[0-2]|[2-9])\d{2})?$",
        "BM": r"^[A-Z]{2}[ ]?[A-Z0-9]{2}$",
        "BN": r"^[A-Z]{2}[ ]?\d{4}$",
        "BR": r"^\d{5}[\-]?\d{3}$",
        "BY": r"^\d{6}$",
        "CA": r"^[ABCEGHJKLMNPRSTVXY]\d[ABCEGHJ-NPRSTV-Z][ ]?\d[ABCEGHJ-NPRSTV-Z]\d$",
        "CC": r"^6799$",
        "CH": r"^\d{4}$",
        "CK": r"^\d{4}$",
        "CL": r"^\d{7}$",
        "CN": r"^\d{6}$",
        "CR": r"^\d{4,5}|\d{3}-\d{4}$",
        "CS": r"^\d{5}$",
        "CV": r"^\d{4}$",
        "CX": r"^6798$",
        "CY": r"^\d{4}$",
        "CZ": r"^\d{3}[ ]?\d{2}$",
        "DE": r"^\d{5}$",
        "DK": r"^\d{4}$",
        "DO": r"^\d{5}$",
        "DZ": r"^\d{5}$",
        "EC": r"^([A-Z]\d{4}[A-Z]|(?:[A-Z]{2})?\d{6})?$",
        "EE": r"^\d{5}$",
        "EG": r"^\d{5}$",
        "ES": r"^\d{5}$",
        "ET": r"^\d{4}$",
        "FI": r"^\d{5}$",
        "FK": r"^FIQQ 1ZZ$",
        "FM": r"^(9694[1-4])([ \-]\d{4})?$",
        "FO": r"^\d{3}$",
        "FR": r"^\d{2}[ ]?\d{3}$",
        "GB": (
            r"^(GIR ?0AA|[A-PR-UWYZ]([0-9]{1,2}|([A-HK-Y][0-9]([0-9ABEHMNPRV-Y])?)|[0-9][A-HJKPS-UW])"
            r" ?[0-9][ABD-HJLNP-UW-Z]{2})$"
        ),
        "GE": r"^\d{4}$",
        "GF": r"^9[78]3\d{2}$",
        "GG": r"^GY\d[\dA-Z]?[ ]?\d[ABD-HJLN-UW-Z]{2}$",
        "GL": r"^39\d{2}$",
        "GN": r"^\d{3}$",
        "GP": r"^9[78][01]\d{2}$",
        "GR": r"^\d{3}[ ]?\d{2}$",
        "GS": r"^SIQQ 1ZZ$",
        "GT": r"^\d{5}$",
        "GU": r"^969[123]\d([ \-]\d{4})?$",
        "GW": r"^\d{4}$",
        "HM": r"^\d{4}$",
        "HN": r"^(?:\d{5})?$",
        "HR": r"^\d{5}$",
        "HT": r"^\d{4}$",
        "HU": r"^\d{4}$",
        "ID": r"^\d{5}$",
        "IL": r"^\d{5}$",
        "IM": r"^IM\d[\dA-Z]?[ ]?\d[ABD-HJLN-UW-Z]{2}$",
        "IN": r"^\d{6}$",
        "IO": r"^BBND 1ZZ$",
        "IQ": r"^\d{5}$",
        "IS": r"^\d{3}$",
        "IT": r"^\d{5}$",
        "JE": r"^JE\d[\dA-Z]?[ ]?\d[ABD-HJLN-UW-Z]{2}$",
        "JO": r"^\d{5}$",
        "JP": r"^\d{3}-\d{4}$",
        "KE": r"^\d{5}$",
        "KG": r"^\d{6}$",
        "KH": r"^\d{5}$",
        "KR": r"^\d{3}[\-]\d{3}$",
        "KW": r"^\d{5}$",
        "KZ": r"^\d{6}$",
        "LA": r"^\d{5}$",
        "LB": r"^(\d{4}([ ]?\d{4})?)?$",
        "LI": r"^(948[5-9])|(949[0-7])$",
        "LK": r"^\d{5}$",
        "LR": r"^\d{4}$",
        "LS": r"^\d{3}$",
        "LT": r"^((LT)[\-])?\d{5}$",
        "LU": r"^(L[\-])?\d{4}$",
        "LV": r"^(LV)[\-]\d{4}$",
        "MA": r"^\d{5}$",
        "MC": r"^980\d{2}$",
        "MD": r"^\d{4}$",
        "ME": r"^8\d{4}$",
        "MG": r"^\d{3}$",
        "MH": r"^969[67]\d([ \-]\d{4})?$",
        "MK": r"^\d{4}$",
        "MN": r"^\d{6}$",
        "MP": r"^9695[012]([ \-]\d{4})?$",
        "MQ": r"^9[78]2\d{2}$",
        "MT": r"^[A-Z]{3}[ ]?\d{2,4}$",
        "MU": r"^(\d{3}[A-Z]{2}\d{3})?$",
        "MV": r"^\d{5}$",
        "MX": r"^\d{5}$",
        "MY": r"^\d{5}$",
        "NC": r"^988\d{2}$",
        "NE": r"^\d{4}$",
        "NF": r"^2899$",
        "NG": r"^(\d{6})?$",
        "NI": r"^((\d{4}-)?\d{3}-\d{3}(-\d{1})?)?$",
        "NL": r"^\d{4}[ ]?[A-Z]{2}$",
        "NO": r"^\d{4}$",
        "NP": r"^\d{5}$",
        "NZ": r"^\d{4}$",
        "OM": r"^(PC )?\d{3}$",
        "PF": r"^987\d{2}$",
        "PG": r"^\d{3}$",
        "PH": r"^\d{4}$",
        "PK": r"^\d{5}$",
        "PL": r"^\d{2}-\d{3}$",
        "PM": r"^9[78]5\d{2}$",
        "PN": r"^PCRN 1ZZ$",
        "PR": r"^00[679]\d{2}([ \-]\d{4})?$",
        "PT": r"^\d{4}([\-]\d{3})?$",
        "PW": r"^96940$",
        "PY": r"^\d{4}$",
        "RE": r"^9[78]4\d{2}$",
        "RO": r"^\d{6}$",
        "RS": r"^\d{5,6}$",
        "RU": r"^\d{6}$",
        "SA": r"^\d{5}$",
        "SE": r"^\d{3}[ ]?\d{2}$",
        "SG": r"^\d{6}$",
        "SH": r"^(ASCN|STHL) 1ZZ$",
        "SI": r"^\d{4}$",
        "SJ": r"^\d{4}$",
        "SK": r"^\d{3}[ ]?\d{2}$",
        "SM": r"^4789\d$",
        "SN": r"^\d{5}$",
        "SO": r"^\d{5}$",
        "SZ": r"^[HLMS]\d{3}$",
        "TC": r"^TKCA 1ZZ$",
        "TH": r"^\d{5}$",
        "TJ": r"^\d{6}$",
        "TM": r"^\d{6}$",
        "TN": r"^\d{4}$",
        "TR": r"^\d{5}$",
        "TW": r"^\d{3}(\d{2})?$",
        "UA": r"^\d{5}$",
        "US": r"^\d{5}([ \-]\d{4})?$",
        "UY": r"^\d{5}$",
        "UZ": r"^\d{6}$",
        "VA": r"^00120$",
        "VE": r"^\d{4}$",
        "VI": r"^008(([0-4]\d)|(5[01]))([ \-]\d{4})?$",
        "WF": r"^986\d{2}$",
        "XK": r"^\d{5}$",
        "YT": r"^976\d{2}$",
        "YU": r"^\d{5}$",
        "ZA": r"^\d{4}$",
        "ZM": r"^\d{5}$",
    }
)

POSTCODE_PATTERNS: frozendict[str, re.Pattern] = frozendict(
    {country_code: re.compile(anchor_at_end(pattern)) for country_code, pattern in POSTCODE_PATTERN_STRINGS.items()}
)
