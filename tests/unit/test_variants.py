"""
Unit tests for the pure-Python Tiger and GOST R 34.11-94 cores and the
variant adapters wrapping them.
"""

import pytest

from filedigest.hashing.algorithms import Algorithm, GostVariant, TigerVariant
from filedigest.hashing.gost94 import CRYPTOPRO_SBOX, TEST_SBOX, Gost341194
from filedigest.hashing.tiger import Tiger, Tiger2
from filedigest.hashing.variants import GostAdapter, TigerAdapter, reverse_words8

from vectors import ABC_VECTORS, EMPTY_VECTORS, GOST_TEST_ABC, TIGER2_ABC, TIGER2_EMPTY


class TestTigerCore:
    """Tests for the raw Tiger compression output."""

    def test_raw_digest_abc(self):
        """The core emits chaining words little-endian."""
        assert Tiger(b"abc").hexdigest() == "2aab1484e8c158f2bfb8c5ff41b57a525129131c957b5f93"

    def test_raw_digest_two_blocks(self):
        """A 56-byte message pads into a second block."""
        data = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
        assert Tiger(data).hexdigest() == "0f7bf9a19b9c58f2b7610df7e84f0ac3a71c631e7b53f78e"

    def test_raw_tiger2_abc(self):
        assert Tiger2(b"abc").hexdigest() == "f68d7bc5af4b43a06e048d7829560d4a9415658bb0b1f3bf"

    def test_incremental_updates_match_one_shot(self):
        """Splitting the input across updates does not change the digest."""
        data = bytes(range(256)) * 3
        hasher = Tiger()
        for i in range(0, len(data), 37):
            hasher.update(data[i : i + 37])
        assert hasher.digest() == Tiger(data).digest()

    def test_digest_does_not_consume_state(self):
        hasher = Tiger(b"ab")
        hasher.digest()
        hasher.update(b"c")
        assert hasher.hexdigest() == Tiger(b"abc").hexdigest()


class TestGostCore:
    """Tests for GOST R 34.11-94 with both S-boxes."""

    def test_test_sbox_32_byte_message(self):
        """Published vector for an exactly one-block message."""
        digest = Gost341194(b"This is message, length=32 bytes", sbox=TEST_SBOX).hexdigest()
        assert digest == "b1c466d37519b82e8319819ff32595e047a28cb6f83eff1c6916a815a637fffa"

    def test_cryptopro_message_digest(self):
        digest = Gost341194(b"message digest", sbox=CRYPTOPRO_SBOX).hexdigest()
        assert digest == "bc6041dd2aa401ebfa6e9886734174febdb4729aa972d60f549ac39b29721ba0"

    def test_cryptopro_single_byte(self):
        digest = Gost341194(b"a").hexdigest()
        assert digest == "e74c52dd282183bf37af0079c9f78055715a103f17e3133ceff1aacf2f403011"

    def test_memoryview_input(self):
        """Buffer views are accepted like bytes."""
        hasher = Gost341194()
        hasher.update(memoryview(b"message digest"))
        assert hasher.hexdigest() == Gost341194(b"message digest").hexdigest()


class TestReverseWords8:
    def test_reverses_each_word(self):
        raw = bytes(range(16))
        assert reverse_words8(raw) == bytes([7, 6, 5, 4, 3, 2, 1, 0, 15, 14, 13, 12, 11, 10, 9, 8])


class TestTigerAdapter:
    """Tests for the Tiger word-order adapter."""

    def test_default_variant_is_tiger(self):
        assert TigerAdapter().variant is TigerVariant.TIGER

    @pytest.mark.parametrize(
        ("variant", "data", "expected"),
        [
            (TigerVariant.TIGER, b"", EMPTY_VECTORS[Algorithm.TIGER192]),
            (TigerVariant.TIGER, b"abc", ABC_VECTORS[Algorithm.TIGER192]),
            (TigerVariant.TIGER2, b"", TIGER2_EMPTY),
            (TigerVariant.TIGER2, b"abc", TIGER2_ABC),
        ],
    )
    def test_published_vectors(self, variant, data, expected):
        adapter = TigerAdapter(variant)
        adapter.update(data)
        assert adapter.finalize().hex() == expected

    def test_finalize_reverses_words_of_raw_digest(self):
        """finalize() output is the raw digest with every 8-byte word flipped."""
        adapter = TigerAdapter()
        adapter.update(b"abc")
        assert adapter.finalize() == reverse_words8(Tiger(b"abc").digest())

    def test_finalized_adapter_refuses_updates(self):
        adapter = TigerAdapter()
        adapter.finalize()
        with pytest.raises(RuntimeError):
            adapter.update(b"more")
        with pytest.raises(RuntimeError):
            adapter.finalize()


class TestGostAdapter:
    """Tests for the GOST S-box adapter."""

    def test_default_variant_is_cryptopro(self):
        assert GostAdapter().variant is GostVariant.CRYPTOPRO

    @pytest.mark.parametrize(
        ("variant", "expected"),
        [
            (GostVariant.CRYPTOPRO, ABC_VECTORS[Algorithm.GOST]),
            (GostVariant.TEST, GOST_TEST_ABC),
        ],
    )
    def test_abc(self, variant, expected):
        adapter = GostAdapter(variant)
        adapter.update(b"abc")
        assert adapter.finalize().hex() == expected

    def test_finalize_returns_raw_digest(self):
        adapter = GostAdapter(GostVariant.TEST)
        adapter.update(b"abc")
        assert adapter.finalize() == Gost341194(b"abc", sbox=TEST_SBOX).digest()

    def test_finalized_adapter_refuses_updates(self):
        adapter = GostAdapter()
        adapter.finalize()
        with pytest.raises(RuntimeError):
            adapter.update(b"x")
