import pytest

from textcipher.codec import (
    DECRYPT, ENCRYPT, SHIFT, UNICODE, shift_char, shift_text, transform, trim,
)

SAMPLES = [
    "Welcome to hyperskill!",
    "abcABC 123",
    "The quick brown fox jumps over the lazy dog.",
    "zZ aA, mixed-CASE #42?",
    "ñandú Ωmega café",
]
KEYS = [0, 1, 5, 25, 26, 27, 52, 100, -1, -5, -26, -27, -1000]


def test_shift_known_scenarios():
    assert transform("Welcome to hyperskill!", 5, ENCRYPT, SHIFT) == "Bjqhtrj yt mdujwxpnqq!"
    assert transform("Bjqhtrj yt mdujwxpnqq!", 5, DECRYPT, SHIFT) == "Welcome to hyperskill!"


def test_unicode_known_scenario():
    assert transform("Welcome to hyperskill!", 5, ENCRYPT, UNICODE) == "\\jqhtrj%yt%mdujwxpnqq&"


def test_default_algorithm_and_mode_is_shift_encrypt():
    assert transform("hello", 3) == transform("hello", 3, ENCRYPT, SHIFT) == "khoor"


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("key", KEYS)
def test_shift_round_trip(text, key):
    enc = transform(text, key, ENCRYPT, SHIFT)
    assert transform(enc, key, DECRYPT, SHIFT) == text.strip()
    dec = transform(text, key, DECRYPT, SHIFT)
    assert transform(dec, key, ENCRYPT, SHIFT) == text.strip()


@pytest.mark.parametrize("text", SAMPLES + ["日本語 😀 emoji"])
@pytest.mark.parametrize("key", [0, 1, 5, 1000])
def test_unicode_round_trip(text, key):
    enc = transform(text, key, ENCRYPT, UNICODE)
    assert transform(enc, key, DECRYPT, UNICODE) == text.strip()


@pytest.mark.parametrize("alg", [SHIFT, UNICODE])
def test_length_preserved_after_trim(alg):
    text = "  \t padded  text \n"
    assert len(transform(text, 7, ENCRYPT, alg)) == len("padded  text")


def test_trim_keeps_interior_whitespace():
    assert transform("  a  b \n", 1) == "b  c"


def test_case_preserved():
    out = transform("AbC xYz", 3, ENCRYPT, SHIFT)
    assert out == "DeF aBc"
    for src, dst in zip("AbC xYz", out):
        assert src.isupper() == dst.isupper()
        assert src.islower() == dst.islower()


def test_non_latin_passes_through():
    text = "123 !?-_ ñ ü Ω 日本"
    assert shift_text(text, 11) == text


def test_key_zero_is_identity():
    for mode in (ENCRYPT, DECRYPT):
        assert transform(" Hello, World! ", 0, mode, SHIFT) == "Hello, World!"


def test_large_negative_key_is_euclidean():
    # -27 equivale a -1
    assert shift_char("a", -27) == "z"
    assert shift_text("a", 27, DECRYPT) == "z"
    assert shift_text("B", 53, DECRYPT) == "A"


def test_unicode_out_of_range_raises():
    with pytest.raises(ValueError):
        transform("a", -1000, ENCRYPT, UNICODE)


def test_unknown_mode_or_algorithm():
    with pytest.raises(ValueError):
        transform("a", 1, "sideways", SHIFT)
    with pytest.raises(ValueError):
        transform("a", 1, ENCRYPT, "rot13")


def test_trim_drops_control_chars_at_the_ends():
    assert trim("\x00\x01 \t a b \r\n\x1f") == "a b"
    assert transform("\x00a", 1, ENCRYPT, UNICODE) == "b"


def test_trim_keeps_non_ascii_spaces():
    assert trim("\u00a0a\u2003") == "\u00a0a\u2003"
    assert transform("\u00a0a", 1, ENCRYPT, UNICODE) == "\u00a1b"


def test_dotted_capital_i_passes_through():
    # "İ".lower() son dos code points, no una letra del alfabeto
    assert shift_char("İ", 3) == "İ"
    assert transform("İa", 3) == "İd"
