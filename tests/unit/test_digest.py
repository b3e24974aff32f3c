"""
Unit tests for the Digest value type.

Tests cover:
- Canonical rendering (sha1 bare, others prefixed)
- Parsing canonical strings, including the sha1 default
- Verification order and error messages
- Immutability and value semantics
"""

import pytest
from pydantic import ValidationError

from digestkit import (
    AlgorithmMismatchError,
    Digest,
    DigestAlgorithm,
    UnrecognizedAlgorithmError,
    ValueMismatchError,
    new_digest,
    parse_digest_string,
    verify,
)
from tests.vectors import SHA1_HEX, SHA256_HEX, SHA512_HEX


class TestDigestAlgorithm:
    """Tests for the DigestAlgorithm enum."""

    def test_canonical_names(self):
        """Each algorithm renders as its lowercase name."""
        assert str(DigestAlgorithm.SHA1) == "sha1"
        assert str(DigestAlgorithm.SHA256) == "sha256"
        assert str(DigestAlgorithm.SHA512) == "sha512"

    def test_formats_as_name_in_fstrings(self):
        """f-strings use the canonical name, not the member name."""
        assert f"{DigestAlgorithm.SHA256}" == "sha256"

    def test_from_name(self):
        """Canonical names resolve to enum members."""
        assert DigestAlgorithm.from_name("sha512") is DigestAlgorithm.SHA512

    def test_from_name_is_case_sensitive(self):
        """Uppercase names are not recognized."""
        with pytest.raises(UnrecognizedAlgorithmError) as exc_info:
            DigestAlgorithm.from_name("SHA256")
        assert exc_info.value.prefix == "SHA256"


class TestDigestString:
    """Tests for canonical rendering."""

    def test_sha1_excludes_algorithm(self):
        digest = new_digest("sha1", SHA1_HEX)
        assert str(digest) == SHA1_HEX

    def test_sha256_includes_algorithm(self):
        digest = new_digest("sha256", SHA256_HEX)
        assert str(digest) == f"sha256:{SHA256_HEX}"

    def test_sha512_includes_algorithm(self):
        digest = new_digest("sha512", SHA512_HEX)
        assert str(digest) == f"sha512:{SHA512_HEX}"

    def test_sha1_renders_any_value_bare(self):
        """Rendering does not inspect the value."""
        assert str(new_digest(DigestAlgorithm.SHA1, "not-hex")) == "not-hex"


class TestParseDigestString:
    """Tests for parse_digest_string."""

    @pytest.mark.parametrize(
        "text,algorithm,value",
        [
            (f"sha1:{SHA1_HEX}", DigestAlgorithm.SHA1, SHA1_HEX),
            (f"sha256:{SHA256_HEX}", DigestAlgorithm.SHA256, SHA256_HEX),
            (f"sha512:{SHA512_HEX}", DigestAlgorithm.SHA512, SHA512_HEX),
        ],
    )
    def test_prefixed(self, text, algorithm, value):
        """Prefixed strings resolve the named algorithm."""
        digest = parse_digest_string(text)
        assert digest.algorithm is algorithm
        assert digest.value == value

    def test_default_is_sha1(self):
        """A string without a colon is a sha1 value."""
        digest = parse_digest_string(SHA1_HEX)
        assert digest.algorithm is DigestAlgorithm.SHA1
        assert digest.value == SHA1_HEX

    def test_unrecognized_prefix_errors(self):
        with pytest.raises(UnrecognizedAlgorithmError) as exc_info:
            parse_digest_string("unrecognized:something")
        assert str(exc_info.value) == "Unrecognized digest algorithm: unrecognized"
        assert exc_info.value.prefix == "unrecognized"

    def test_uppercase_prefix_is_unrecognized(self):
        """Prefix matching is case-sensitive; there is no sha1 fallback."""
        with pytest.raises(UnrecognizedAlgorithmError, match="Unrecognized digest algorithm: SHA256"):
            parse_digest_string(f"SHA256:{SHA256_HEX}")

    def test_empty_prefix_is_unrecognized(self):
        with pytest.raises(UnrecognizedAlgorithmError) as exc_info:
            parse_digest_string(":abc")
        assert str(exc_info.value) == "Unrecognized digest algorithm: "

    def test_splits_on_first_colon(self):
        """Everything after the first colon is the value."""
        digest = parse_digest_string("sha256:abc:def")
        assert digest.algorithm is DigestAlgorithm.SHA256
        assert digest.value == "abc:def"

    def test_unrecognized_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_digest_string("md5:abc")

    def test_classmethod_spelling(self):
        assert Digest.parse(f"sha256:{SHA256_HEX}") == new_digest("sha256", SHA256_HEX)

    @pytest.mark.parametrize("algorithm", list(DigestAlgorithm))
    def test_round_trip(self, algorithm):
        """Parsing a rendered digest gives back the same digest."""
        digest = new_digest(algorithm, "0123abcd")
        assert parse_digest_string(str(digest)) == digest


class TestVerify:
    """Tests for digest verification."""

    def test_matching(self):
        expected = new_digest(DigestAlgorithm.SHA1, SHA1_HEX)
        actual = new_digest(DigestAlgorithm.SHA1, SHA1_HEX)
        assert expected.verify(actual) is None

    def test_reflexive(self):
        digest = new_digest("sha512", SHA512_HEX)
        verify(digest, digest)

    def test_mismatching_algorithm(self):
        expected = new_digest(DigestAlgorithm.SHA1, SHA1_HEX)
        actual = new_digest(DigestAlgorithm.SHA256, SHA1_HEX)

        with pytest.raises(AlgorithmMismatchError) as exc_info:
            expected.verify(actual)
        assert str(exc_info.value) == "Expected sha1 algorithm but received sha256"
        assert exc_info.value.expected is expected
        assert exc_info.value.actual is actual

    def test_mismatching_value(self):
        expected = new_digest(DigestAlgorithm.SHA1, SHA1_HEX)
        actual = new_digest(DigestAlgorithm.SHA1, "b1e66f505465c28d705cf587b041a6506cfe749f")

        with pytest.raises(ValueMismatchError) as exc_info:
            verify(expected, actual)
        assert str(exc_info.value) == (
            f'Expected sha1 digest "{SHA1_HEX}" '
            'but received "b1e66f505465c28d705cf587b041a6506cfe749f"'
        )

    def test_algorithm_checked_before_value(self):
        """Both differing reports the algorithm mismatch."""
        expected = new_digest(DigestAlgorithm.SHA1, SHA1_HEX)
        actual = new_digest(DigestAlgorithm.SHA256, SHA256_HEX)

        with pytest.raises(AlgorithmMismatchError):
            verify(expected, actual)

    def test_value_comparison_is_case_sensitive(self):
        expected = new_digest("sha256", SHA256_HEX)
        actual = new_digest("sha256", SHA256_HEX.upper())

        with pytest.raises(ValueMismatchError):
            verify(expected, actual)


class TestDigestValue:
    """Tests for construction and value semantics."""

    def test_accessors(self):
        digest = new_digest("sha256", SHA256_HEX)
        assert digest.algorithm is DigestAlgorithm.SHA256
        assert digest.value == SHA256_HEX

    def test_accepts_garbage_value(self):
        """Construction never validates the value."""
        digest = new_digest("sha512", "ZZ not hex")
        assert digest.value == "ZZ not hex"

    def test_value_case_preserved(self):
        assert new_digest("sha1", "ABCDEF").value == "ABCDEF"

    def test_new_digest_unknown_name(self):
        with pytest.raises(UnrecognizedAlgorithmError):
            new_digest("crc32", "abc")

    def test_model_accepts_name(self):
        assert Digest(algorithm="sha256", value="ab").algorithm is DigestAlgorithm.SHA256

    def test_model_rejects_unknown_name(self):
        with pytest.raises(ValidationError):
            Digest(algorithm="crc32", value="ab")

    def test_immutable(self):
        digest = new_digest("sha1", SHA1_HEX)
        with pytest.raises(ValidationError):
            digest.value = "other"  # type: ignore[misc]

    def test_equality_and_hash(self):
        a = new_digest("sha256", SHA256_HEX)
        b = new_digest(DigestAlgorithm.SHA256, SHA256_HEX)
        c = new_digest("sha512", SHA256_HEX)

        assert a == b
        assert a != c
        assert {a, b, c} == {a, c}
