from typing import Any

import pytest

from funcvalid import ErrorValidator, FailureKind, Validator
from funcvalid.builtin import (
    ASCII,
    CATALOG,
    HTML,
    ISBN10,
    ISBN13,
    JWT,
    ULID,
    UUID,
    UUID4,
    UUID4RFC4122,
    Alpha,
    AlphaNumeric,
    AlphaUnicode,
    AlphaUnicodeNumeric,
    Base64,
    Bic,
    BtcAddress,
    Cron,
    Cve,
    DataURI,
    E164,
    Email,
    EthAddress,
    FqdnRFC1123,
    HexColor,
    HostnameRFC1123,
    Hsl,
    Iso3166Alpha2,
    Iso3166Alpha3,
    Iso3166AlphaNumeric,
    Iso4217,
    Iso4217Numeric,
    Latitude,
    Longitude,
    Mongodb,
    Multibyte,
    Numeric,
    PostCodeByIso3166,
    Rgb,
    Semver,
    Sha256,
    lookup,
)
from funcvalid.builtin.postcodes import POSTCODE_PATTERNS
from funcvalid.builtin.regexes import PATTERN_STRINGS, anchor_at_end


class TestRegexCatalog:
    @pytest.mark.parametrize(
        "validator, valid, invalid",
        [
            pytest.param(Alpha, "test", "test_", id="Alpha"),
            pytest.param(AlphaNumeric, "test42", "test 42", id="AlphaNumeric"),
            pytest.param(AlphaUnicode, "árvíztűrő", "abc1", id="AlphaUnicode"),
            pytest.param(AlphaUnicodeNumeric, "tükör42", "abc_", id="AlphaUnicodeNumeric"),
            pytest.param(Numeric, "-12.5", "12.", id="Numeric"),
            pytest.param(Email, "test@test.com", "test", id="Email"),
            pytest.param(Email, "john.doe+tag@mail.example.org", "john@", id="Email subaddress"),
            pytest.param(UUID, "6ba7b810-9dad-11d1-80b4-00c04fd430c8", "6ba7b810-9dad-11d1-80b4", id="UUID"),
            pytest.param(
                UUID4, "9b2f3a8e-4c1d-4e5f-8a6b-7c8d9e0f1a2b", "9b2f3a8e-4c1d-1e5f-8a6b-7c8d9e0f1a2b", id="UUID4"
            ),
            pytest.param(
                UUID4RFC4122, "9b2f3a8e4c1d4e5f8a6b7c8d9e0f1a2b", "9b2f3a8e4c1d1e5f8a6b7c8d9e0f1a2b", id="UUID4RFC4122"
            ),
            pytest.param(ULID, "01ARZ3NDEKTSV4RRFFQ69G5FAV", "01ARZ3NDEKTSV4RRFFQ69G5FAI", id="ULID"),
            pytest.param(Sha256, "a" * 64, "a" * 63, id="Sha256"),
            pytest.param(HexColor, "#fff", "#ff", id="HexColor"),
            pytest.param(Rgb, "rgb(255, 0, 128)", "rgb(256,0,0)", id="Rgb"),
            pytest.param(Hsl, "hsl(360, 100%, 50%)", "hsl(361, 100%, 50%)", id="Hsl"),
            pytest.param(E164, "+36301234567", "0036301234567", id="E164"),
            pytest.param(Base64, "aGVsbG8=", "aGVsbG8", id="Base64"),
            pytest.param(DataURI, "data:text/plain;base64,aGVsbG8=", "data:text/plain,hello", id="DataURI"),
            pytest.param(ISBN10, "012345678X", "012345678Y", id="ISBN10"),
            pytest.param(ISBN13, "9780123456789", "9770123456789", id="ISBN13"),
            pytest.param(Latitude, "47.4979", "91", id="Latitude"),
            pytest.param(Longitude, "-180", "180.1", id="Longitude"),
            pytest.param(HostnameRFC1123, "example.com", "-example.com", id="HostnameRFC1123"),
            pytest.param(FqdnRFC1123, "www.example.com", "localhost", id="FqdnRFC1123"),
            pytest.param(
                BtcAddress, "1BoatSLRHtKNngkdXEeobR76b53LETtpyT", "1BoatSLRHtKNngkdXEeobR76b53LETtpy0", id="Btc"
            ),
            pytest.param(EthAddress, "0x" + "a" * 40, "0x" + "g" * 40, id="EthAddress"),
            pytest.param(JWT, "aaa.bbb.ccc", "aaa.bbb", id="JWT"),
            pytest.param(Bic, "DEUTDEFF", "DEUT", id="Bic"),
            pytest.param(Semver, "1.2.3-beta.1+build.5", "1.2", id="Semver"),
            pytest.param(Cve, "CVE-2021-44228", "CVE-2021-0000", id="Cve"),
            pytest.param(Mongodb, "507f1f77bcf86cd799439011", "507f1f77bcf86cd79943901", id="Mongodb"),
            pytest.param(Cron, "@daily", "never", id="Cron"),
            pytest.param(HTML, "<b>bold</b>", "plain", id="HTML"),
            pytest.param(ASCII, "hello", "héllo", id="ASCII"),
            pytest.param(Multibyte, "héllo", "hello", id="Multibyte"),
        ],
    )
    def test_format(self, validator: Validator[str], valid: str, invalid: str):
        assert validator(valid) is None
        error = validator(invalid)
        assert error is not None
        assert error.kind == FailureKind.PATTERN

    def test_rule_name(self):
        error = Email("test")
        assert error is not None
        assert str(error) == "error: Email"

    def test_non_string_input(self):
        error = Email(42)  # type:ignore[arg-type]
        assert error is not None
        assert error.kind == FailureKind.TYPE

    def test_cron_with_five_fields(self):
        assert Cron("*/5 * * * *") is None


class TestLookupCatalog:
    @pytest.mark.parametrize(
        "validator, valid, invalid",
        [
            pytest.param(Iso3166Alpha2, "HU", "XX", id="Iso3166Alpha2"),
            pytest.param(Iso3166Alpha3, "HUN", "HU", id="Iso3166Alpha3"),
            pytest.param(Iso3166AlphaNumeric, 348, "348", id="Iso3166AlphaNumeric"),
            pytest.param(Iso4217, "EUR", "EURO", id="Iso4217"),
            pytest.param(Iso4217Numeric, 978, 979_000, id="Iso4217Numeric"),
        ],
    )
    def test_membership(self, validator: Validator[Any], valid: Any, invalid: Any):
        assert validator(valid) is None
        error = validator(invalid)
        assert error is not None
        assert error.kind == FailureKind.MEMBERSHIP


class TestPostCodeByIso3166:
    def test_valid_post_code(self):
        assert PostCodeByIso3166("HU")("8200") is None

    def test_unknown_country_code(self):
        validator = PostCodeByIso3166("HUS")
        assert isinstance(validator, ErrorValidator)
        error = validator("8200")
        assert error is not None
        assert error.kind == FailureKind.CONFIGURATION
        assert str(error) == "error: invalid country code"

    def test_pattern_mismatch(self):
        error = PostCodeByIso3166("HU")("82001")
        assert error is not None
        assert error.kind == FailureKind.PATTERN

    @pytest.mark.parametrize(
        "country_code, post_code",
        [
            ("US", "12345-6789"),
            ("DE", "10115"),
            ("NL", "1012 AB"),
            ("CA", "K1A 0B1"),
            ("GB", "SW1A 1AA"),
            ("JP", "100-0001"),
            ("PL", "00-950"),
        ],
    )
    def test_countries(self, country_code: str, post_code: str):
        assert PostCodeByIso3166(country_code)(post_code) is None

    def test_country_codes_are_iso3166_alpha2_shaped(self):
        assert all(len(country_code) == 2 and country_code.isupper() for country_code in POSTCODE_PATTERNS)


class TestRegistry:
    def test_lookup(self):
        assert lookup("email") is Email
        assert lookup("iso4217") is Iso4217

    def test_unknown_name(self):
        validator = lookup("no_such_validator")
        error = validator("anything")
        assert error is not None
        assert error.kind == FailureKind.CONFIGURATION

    def test_every_pattern_is_registered(self):
        assert set(PATTERN_STRINGS) <= set(CATALOG)

    def test_read_only(self):
        with pytest.raises(TypeError):
            CATALOG["email"] = Alpha  # type:ignore[index]


class TestTrailingNewline:
    @pytest.mark.parametrize(
        "validator, inp",
        [
            pytest.param(Email, "a@b.com\n", id="Email"),
            pytest.param(UUID4, "a987fbc9-4bed-4078-8f07-9141ba07c9f3\n", id="UUID4"),
            pytest.param(Alpha, "test\n", id="Alpha"),
            pytest.param(Semver, "1.2.3\n", id="Semver"),
            pytest.param(PostCodeByIso3166("HU"), "8200\n", id="PostCodeByIso3166[HU]"),
            pytest.param(PostCodeByIso3166("GB"), "SW1A 1AA\n", id="PostCodeByIso3166[GB]"),
        ],
    )
    def test_is_rejected(self, validator: Validator[str], inp: str):
        assert validator(inp.rstrip("\n")) is None
        error = validator(inp)
        assert error is not None
        assert error.kind == FailureKind.PATTERN

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            pytest.param(r"^\d{4}$", r"^\d{4}\Z", id="trailing anchor"),
            pytest.param(r"^(a$|b$)", r"^(a\Z|b\Z)", id="anchors in alternatives"),
            pytest.param(r"^[#$%]+$", r"^[#$%]+\Z", id="dollar in character class"),
            pytest.param(r"^[]$]$", r"^[]$]\Z", id="bracket first in character class"),
            pytest.param(r"^\$\d+$", r"^\$\d+\Z", id="escaped dollar"),
        ],
    )
    def test_anchor_at_end(self, pattern: str, expected: str):
        assert anchor_at_end(pattern) == expected


class TestUnhashableArguments:
    def test_post_code_country_code(self):
        validator = PostCodeByIso3166(["HU"])  # type:ignore[arg-type]
        assert isinstance(validator, ErrorValidator)
        error = validator("8200")
        assert error is not None
        assert error.kind == FailureKind.CONFIGURATION

    def test_lookup_name(self):
        error = lookup({"name": "email"})("a@b.com")  # type:ignore[arg-type]
        assert error is not None
        assert error.kind == FailureKind.CONFIGURATION
