#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
args.py — Parser de argumentos estilo "-flag valor".
Uso:
  parse_args(["-mode", "dec", "-key", "5", "-data", "Bjqhtrj"])
Notas:
- Los tokens se leen de a pares (flag, valor); un flag sin valor se ignora.
- Flags repetidos: gana el último. Flags desconocidos: se ignoran.
- Si vienen -data y -in, gana -data y el archivo no se lee.
"""
import argparse
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .codec import ALGORITHMS, DECRYPT, ENCRYPT, SHIFT
from .errors import BadChoiceError, BadKeyError, MissingPayloadError

# ---------- CONFIGURACIÓN ----------
MODE = "-mode"
KEY = "-key"
ALG = "-alg"
DATA = "-data"
IN = "-in"
OUT = "-out"
VERBOSE = "-verbose"
FLAGS = (MODE, KEY, ALG, DATA, IN, OUT, VERBOSE)

CONSOLE = "console"
ERROR = "Error"

# enc/dec en la línea de comandos -> modo del codec
MODE_NAMES = {"enc": ENCRYPT, "dec": DECRYPT}
# ---------- FIN CONFIG ----------


@dataclass(frozen=True)
class Config:
    algorithm: str = SHIFT
    mode: str = ENCRYPT
    key: int = 0
    inline_data: Optional[str] = None
    input_path: Optional[str] = None
    output_path: Optional[str] = CONSOLE
    verbose: bool = False

    @property
    def to_console(self) -> bool:
        return self.output_path is None or self.output_path == CONSOLE


class _ArgParser(argparse.ArgumentParser):
    """argparse sin sys.exit(): los errores suben como excepciones."""

    def error(self, message):
        # con pares ya filtrados, lo único que puede fallar es un choices=
        raise BadChoiceError(message)


def _parse_key(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise BadKeyError(f"-key no es entero: {raw!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgParser(prog="textcipher", add_help=False, allow_abbrev=False)
    parser.add_argument(MODE, dest="mode", default="enc", choices=list(MODE_NAMES))
    # BadKeyError no es ValueError: argparse no lo atrapa y sube tal cual
    parser.add_argument(KEY, dest="key", default=0, type=_parse_key)
    parser.add_argument(ALG, dest="alg", default=SHIFT, choices=ALGORITHMS)
    parser.add_argument(DATA, dest="data")
    parser.add_argument(IN, dest="input")
    parser.add_argument(OUT, dest="out", default=CONSOLE)
    parser.add_argument(VERBOSE, dest="verbose", default="off")
    return parser


def pair_tokens(tokens: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Recorre los tokens de a pares: (t[0], t[1]), (t[2], t[3]), ...

    Un token final sin pareja se descarta.
    """
    toks = list(tokens)
    for i in range(1, len(toks), 2):
        yield toks[i - 1], toks[i]


def _known_pairs(tokens: Iterable[str]) -> Dict[str, str]:
    found: Dict[str, str] = {}
    for flag, value in pair_tokens(tokens):
        if flag in FLAGS:
            found[flag] = value
    return found


def parse_args(tokens: Iterable[str]) -> Config:
    found = _known_pairs(tokens)
    # forma -flag=valor: argparse no confunde valores que empiezan con '-'
    argv: List[str] = [f"{flag}={value}" for flag, value in found.items()]
    ns = _build_parser().parse_args(argv)
    if ns.data is None and ns.input is None:
        raise MissingPayloadError("falta -data o -in")

    return Config(
        algorithm=ns.alg,
        mode=MODE_NAMES[ns.mode],
        key=ns.key,
        inline_data=ns.data,
        input_path=ns.input if ns.data is None else None,
        output_path=ns.out,
        verbose=ns.verbose == "on",
    )
