#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
codec.py — Transformaciones de texto: César (shift) y corrimiento Unicode.
Uso:
  >>> transform("Welcome to hyperskill!", 5, "encrypt", "shift")
  'Bjqhtrj yt mdujwxpnqq!'
  >>> transform("Welcome to hyperskill!", 5, "encrypt", "unicode")
  '\\\\jqhtrj%yt%mdujwxpnqq&'
Notas:
- shift solo desplaza letras [A-Z][a-z]; el resto pasa intacto.
- unicode suma/resta la clave al code point, sin validar el resultado.
- El texto se recorta antes de transformar: solo caracteres <= U+0020
  (espacio y controles), no el resto de espacios Unicode.
"""
from typing import Callable, Dict

ALPH_LOW = "abcdefghijklmnopqrstuvwxyz"
ALPH_LEN = len(ALPH_LOW)

ENCRYPT = "encrypt"
DECRYPT = "decrypt"
MODES = (ENCRYPT, DECRYPT)

SHIFT = "shift"
UNICODE = "unicode"
ALGORITHMS = (SHIFT, UNICODE)

# caracteres <= U+0020: espacio, \t, \r, \n, \x00 y demás controles
TRIM_CHARS = "".join(map(chr, range(0x21)))


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def shift_char(ch: str, k: int) -> str:
    low = ch.lower()
    # U+0130 (İ) baja a "i" + punto combinante: no es una letra del alfabeto
    if len(low) != 1 or low not in ALPH_LOW:
        return ch
    # % de Python ya es euclidiano: siempre 0..25 aunque k sea negativo
    out = ALPH_LOW[(ALPH_LOW.index(low) + k) % ALPH_LEN]
    return out.upper() if ch.isupper() else out


def shift_text(text: str, k: int, mode: str = ENCRYPT) -> str:
    if mode == DECRYPT:
        k = -k
    return "".join(shift_char(c, k) for c in text)


def unicode_text(text: str, k: int, mode: str = ENCRYPT) -> str:
    if mode == DECRYPT:
        k = -k
    # chr() lanza ValueError si el resultado sale de 0..0x10FFFF
    return "".join(chr(ord(c) + k) for c in text)


_ALGORITHMS: Dict[str, Callable[[str, int, str], str]] = {
    SHIFT: shift_text,
    UNICODE: unicode_text,
}


def transform(text: str, key: int, mode: str = ENCRYPT, algorithm: str = SHIFT) -> str:
    """Cifra o descifra `text` (ya recortado) con el algoritmo indicado.

    Devuelve un str con la misma cantidad de code points que trim(text).
    """
    if mode not in MODES:
        raise ValueError(f"modo desconocido: {mode!r}")
    try:
        func = _ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"algoritmo desconocido: {algorithm!r}") from None
    return func(trim(text), key, mode)
