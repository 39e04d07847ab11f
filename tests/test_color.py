"""Tests for the hex color codec and elevation color interpolation."""

import re

import pytest

from surface.color import BLUE, RED, RGBA, HexColorError, decode_hex, encode_hex, interpolate


class TestDecodeHex:
    """Tests for decode_hex()."""

    def test_long_form(self):
        assert decode_hex("#0000ff") == RGBA(0, 0, 255, 255)
        assert decode_hex("#12ab9F") == RGBA(0x12, 0xAB, 0x9F, 255)

    def test_short_form_duplicates_digits(self):
        assert decode_hex("#abc") == RGBA(0xAA, 0xBB, 0xCC, 255)
        assert decode_hex("#f00") == decode_hex("#ff0000")

    def test_case_insensitive(self):
        assert decode_hex("#ABCDEF") == decode_hex("#abcdef")

    def test_alpha_always_opaque(self):
        assert decode_hex("#000").a == 255

    def test_bad_length(self):
        for text in ["red", "", "#", "#12345", "#1234567", "#ff00"]:
            with pytest.raises(HexColorError) as exc:
                decode_hex(text)
            assert exc.value.kind == "length"

    def test_bad_digits(self):
        for text in ["#ggg", "#12345z", "#-12345", "#12_345", "0000ff0"]:
            with pytest.raises(HexColorError) as exc:
                decode_hex(text)
            assert exc.value.kind == "digits"

    def test_message_echoes_input(self):
        with pytest.raises(HexColorError, match='"red"'):
            decode_hex("red")


class TestEncodeHex:
    """Tests for encode_hex()."""

    def test_lowercase_two_digits_per_channel(self):
        assert encode_hex(RGBA(255, 0, 10)) == "#ff000a"

    def test_alpha_dropped(self):
        assert encode_hex(RGBA(1, 2, 3, 0)) == "#010203"

    def test_format(self):
        for c in [RGBA(0, 0, 0), RGBA(255, 255, 255), RGBA(7, 128, 200)]:
            assert re.fullmatch(r"#[0-9a-f]{6}", encode_hex(c))

    def test_decode_inverts_encode(self):
        for c in [RGBA(0, 0, 0), RGBA(255, 255, 255), RGBA(18, 52, 86), BLUE, RED]:
            assert decode_hex(encode_hex(c)) == c


class TestInterpolate:
    """Tests for interpolate()."""

    def test_endpoints(self):
        assert interpolate(BLUE, RED, -1.0) == RGBA(0, 0, 255, 255)
        assert interpolate(BLUE, RED, 1.0) == RGBA(255, 0, 0, 255)

    def test_midpoint_floors(self):
        """t = 0.5: red rises to 127; blue's delta wraps to 1, so it stays 255."""
        assert interpolate(BLUE, RED, 0.0) == RGBA(127, 0, 255, 255)

    def test_blue_to_red_fades_through_magenta(self):
        """Blue only leaves 255 when t reaches 1."""
        for z in (-1.0, -0.5, 0.0, 0.5, 0.99):
            assert interpolate(BLUE, RED, z).b == 255
        assert interpolate(BLUE, RED, 1.0).b == 0

    def test_wraps_above_range(self):
        """t = 2 overshoots: 510 % 256 = 254 and (255 + 2 * 1) % 256 = 1."""
        c = interpolate(BLUE, RED, 3.0)
        assert (c.r, c.g, c.b) == (254, 0, 1)

    def test_wraps_below_range(self):
        """t = -0.5: red goes to floor(-127.5) % 256 = 128."""
        c = interpolate(BLUE, RED, -2.0)
        assert c.r == 128

    def test_monotonic_without_wrap(self):
        zs = [-1.0 + k * 0.05 for k in range(40)]
        reds = [interpolate(BLUE, RED, z).r for z in zs]
        assert reds == sorted(reds)
        assert len(set(reds)) > 30

    def test_falling_channel_wraps(self):
        """high < low: the delta (100 - 200) % 256 = 156 overshoots and wraps."""
        low = RGBA(200, 0, 0)
        high = RGBA(100, 0, 0)
        reds = [interpolate(low, high, z).r for z in (-1.0, 0.0, 1.0)]
        assert reds == [200, 22, 100]
        assert reds != sorted(reds) and reds != sorted(reds, reverse=True)

    def test_alpha_uses_low_blue_as_base(self):
        low = RGBA(0, 0, 10, 255)
        high = RGBA(0, 0, 10, 255)
        assert interpolate(low, high, 0.3).a == 10

    def test_identical_endpoints(self):
        c = RGBA(40, 50, 60)
        assert interpolate(c, c, 123.0).r == 40

    def test_non_finite_elevation_maps_to_low(self):
        assert interpolate(BLUE, RED, float("inf")) == interpolate(BLUE, RED, -1.0)
