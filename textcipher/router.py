# -*- coding: utf-8 -*-
"""
router.py — De dónde sale el texto y a dónde va el resultado.
- Entrada: -data (inline) o el archivo -in completo.
- Salida: stdout ("console" o sin -out) con salto de línea, o el archivo -out sin él.
- Los archivos se leen y escriben con newline="": los \r\n quedan tal cual.
"""
import sys

from .args import Config
from .errors import MissingPayloadError, PayloadIOError


def load_payload(cfg: Config) -> str:
    if cfg.inline_data is not None:
        return cfg.inline_data
    if cfg.input_path is None:
        raise MissingPayloadError("falta -data o -in")
    try:
        # encoding por defecto del sistema, igual que el resto de la salida
        with open(cfg.input_path, "r", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PayloadIOError(f"no se pudo leer {cfg.input_path}: {e}") from e


def emit(cfg: Config, result: str) -> None:
    if cfg.to_console:
        print(result)
        sys.stdout.flush()
        return
    try:
        with open(cfg.output_path, "w", newline="") as fh:
            fh.write(result)
    except (OSError, UnicodeEncodeError) as e:
        raise PayloadIOError(f"no se pudo escribir {cfg.output_path}: {e}") from e
