"""
Unit Tests for the Argon2id Codec
=================================
Formatting and strict parsing of encoded hash strings.
"""

import pytest

B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

SALT = bytes(range(16))
KEY = bytes(range(100, 132))
SALT_B64 = "AAECAwQFBgcICQoLDA0ODw"
KEY_B64 = "ZGVmZ2hpamtsbW5vcHFyc3R1dnd4eXp7fH1+f4CBgoM"


def _encoded(version="v=19", params="m=65536,t=2,p=4", salt=SALT_B64, key=KEY_B64):
    return f"$argon2id${version}${params}${salt}${key}"


class TestFormat:
    """Tests for canonical string formatting."""

    def test_format_hash(self):
        """Should render the canonical six-segment string."""
        from argon2id_core.codec import EncodedHash, format_hash

        encoded = format_hash(EncodedHash(
            version=19,
            memory_cost=65536,
            time_cost=2,
            parallelism=4,
            salt=SALT,
            key=KEY,
        ))

        assert encoded == _encoded()
        assert encoded.count("$") == 5
        assert "=" not in encoded.split("$")[4]

    def test_b64encode_has_no_padding(self):
        """Should strip base64 padding."""
        from argon2id_core.codec import b64encode

        assert b64encode(b"a") == "YQ"
        assert b64encode(b"ab") == "YWI"
        assert b64encode(b"abc") == "YWJj"


class TestParse:
    """Tests for parsing well-formed strings."""

    def test_parse_hash(self):
        """Should recover every component."""
        from argon2id_core.codec import parse_hash

        parsed = parse_hash(_encoded())

        assert parsed.algorithm == "argon2id"
        assert parsed.version == 19
        assert parsed.memory_cost == 65536
        assert parsed.time_cost == 2
        assert parsed.parallelism == 4
        assert parsed.salt == SALT
        assert parsed.key == KEY

    def test_format_of_parsed_is_identical(self):
        """Parsing then formatting should reproduce the input exactly."""
        from argon2id_core.codec import format_hash, parse_hash

        encoded = _encoded(params="m=4294967295,t=4294967295,p=255")

        assert format_hash(parse_hash(encoded)) == encoded

    def test_largest_version(self):
        """The largest signed 64-bit version should still parse."""
        from argon2id_core.codec import parse_hash

        assert parse_hash(_encoded(version="v=9223372036854775807")).version == 2 ** 63 - 1


class TestMalformed:
    """Tests for structural rejection."""

    @pytest.mark.parametrize("encoded", [
        "not-a-hash",
        "",
        "$argon2id$v=19$m=65536,t=2,p=4$" + SALT_B64,
        _encoded() + "$extra",
        "argon2id$v=19$m=65536,t=2,p=4$" + SALT_B64 + "$" + KEY_B64,
    ])
    def test_wrong_segment_count(self, encoded):
        """Should reject anything without exactly six segments."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import MalformedHashError

        with pytest.raises(MalformedHashError) as exc_info:
            parse_hash(encoded)

        assert exc_info.value.reason == "parts"

    @pytest.mark.parametrize("algorithm", ["argon2i", "argon2d", "bcrypt", "ARGON2ID", ""])
    def test_wrong_algorithm(self, algorithm):
        """Should reject any tag other than argon2id."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import MalformedHashError

        encoded = _encoded().replace("argon2id", algorithm, 1)

        with pytest.raises(MalformedHashError) as exc_info:
            parse_hash(encoded)

        assert exc_info.value.reason == "algorithm"

    def test_malformed_is_value_error(self):
        """Structural errors should also be ValueErrors."""
        from argon2id_core.codec import parse_hash

        with pytest.raises(ValueError):
            parse_hash("not-a-hash")


class TestScan:
    """Tests for version and parameter scanning."""

    @pytest.mark.parametrize("version", [
        "v=", "v=abc", "v=19x", "19", "x=19", "v=-1", "v= 19",
        "v=9223372036854775808", "v=9999999999999999999",
    ])
    def test_bad_version(self, version):
        """Should raise ScanError for a malformed or out-of-range version."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import ScanError

        with pytest.raises(ScanError) as exc_info:
            parse_hash(_encoded(version=version))

        assert exc_info.value.field == "version"

    @pytest.mark.parametrize("params", [
        "m=abc,t=2,p=4",
        "m=65536,t=2",
        "t=2,m=65536,p=4",
        "m=65536,t=2,p=4,x=1",
        "m=65536,t=2,p=256",
        "m=4294967296,t=2,p=4",
        "m=65536, t=2, p=4",
        "",
    ])
    def test_bad_params(self, params):
        """Should raise ScanError for malformed or out-of-range parameters."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import ScanError

        with pytest.raises(ScanError) as exc_info:
            parse_hash(_encoded(params=params))

        assert exc_info.value.field == "params"


class TestDecode:
    """Tests for strict unpadded base64 decoding."""

    @pytest.mark.parametrize("salt", [
        SALT_B64 + "==",
        "AAECAwQFBgcICQoLDA0OD-",
        "AAECAwQFBgcI_QoLDA0ODw",
        "AAECA wQFBgcICQoLDA0ODw",
        "AAAAA",
        "",
    ])
    def test_bad_salt(self, salt):
        """Should raise DecodeError for non-canonical salt encodings."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import DecodeError

        with pytest.raises(DecodeError) as exc_info:
            parse_hash(_encoded(salt=salt))

        assert exc_info.value.field == "salt"

    def test_non_zero_trailing_bits(self):
        """Should reject encodings whose unused trailing bits are set."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import DecodeError

        last = B64_ALPHABET.index(KEY_B64[-1])
        tweaked = KEY_B64[:-1] + B64_ALPHABET[(last & ~3) | 1]

        with pytest.raises(DecodeError) as exc_info:
            parse_hash(_encoded(key=tweaked))

        assert exc_info.value.field == "key"

    def test_bad_key(self):
        """Should report the key field when the key is invalid."""
        from argon2id_core.codec import parse_hash
        from argon2id_core.exceptions import DecodeError

        with pytest.raises(DecodeError) as exc_info:
            parse_hash(_encoded(key="!!!!"))

        assert exc_info.value.field == "key"
