#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cli.py — Cifrado/descifrado de texto (shift o unicode) desde la línea de comandos.
Uso:
  python3 -m textcipher -mode enc -key 5 -data "Welcome to hyperskill!" -alg shift
  python3 -m textcipher -mode dec -key 5 -in cifrado.txt -out claro.txt
  python3 -m textcipher -key 3 -data "hola" -alg unicode -verbose on
Notas:
- Cualquier fallo imprime "Error" en stdout; el detalle va a stderr.
"""
import sys
import traceback
from typing import List

from .args import ERROR, Config, parse_args
from .codec import transform
from .errors import CipherError
from .router import emit, load_payload


def info(cfg: Config, msg: str) -> None:
    if cfg.verbose:
        print(f"[i] {msg}", file=sys.stderr)


def run(cfg: Config) -> str:
    payload = load_payload(cfg)
    info(cfg, f"Entrada: {len(payload)} caracteres ({'-data' if cfg.inline_data is not None else cfg.input_path})")
    result = transform(payload, cfg.key, cfg.mode, cfg.algorithm)
    info(cfg, f"{cfg.mode} con alg={cfg.algorithm} key={cfg.key}")
    emit(cfg, result)
    info(cfg, f"Salida: {'stdout' if cfg.to_console else cfg.output_path}")
    return result


def main(argv: List[str]) -> int:
    try:
        run(parse_args(argv))
    except Exception as e:
        print(f"[!] {type(e).__name__}: {e}", file=sys.stderr)
        if not isinstance(e, CipherError):
            traceback.print_exc()
        print(ERROR)
        return 1
    return 0


def main_entry() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    main_entry()
