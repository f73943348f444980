# -*- coding: utf-8 -*-
"""
errors.py — Fallos internos. En la salida todos se ven igual: "Error".
"""


class CipherError(Exception):
    """Base de los fallos esperados de una invocación."""


class MissingPayloadError(CipherError):
    """Ni -data ni -in."""


class BadKeyError(CipherError):
    """-key no es un entero."""


class BadChoiceError(CipherError):
    """Valor fuera de la enumeración de -mode o -alg."""


class PayloadIOError(CipherError):
    """No se pudo leer -in o escribir -out."""
