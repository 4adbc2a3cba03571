#config.py
import os
import codecs
import logging
from pathlib import Path
from dotenv import load_dotenv

# Carrega variáveis de ambiente do arquivo `.env` ao lado deste módulo.
# `override=True` garante que valores definidos nesse arquivo
# substituam variáveis já presentes no ambiente.
load_dotenv(Path(__file__).resolve().with_name('.env'), override=True)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ENCODING = "utf-8"
DEFAULT_SEPARATOR = "\n\n"
DEFAULT_MIN_LENGTH = 0
DEFAULT_VALID_EXTS = ".txt,.md,.rst"

# — Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

# — Leitura de arquivos
INPUT_ENCODING = os.getenv("INPUT_ENCODING", DEFAULT_ENCODING)
VALID_EXTS = tuple(
    e.strip().lower()
    for e in os.getenv("VALID_EXTS", DEFAULT_VALID_EXTS).split(",")
    if e.strip()
)


def decode_escapes(value: str) -> str:
    """Interpreta sequências de escape (ex: \\n) preservando caracteres não-ASCII."""
    return codecs.decode(value.encode("latin-1", "backslashreplace"), "unicode_escape")


# — Saída
# Aceita sequências de escape no .env (ex: PARAGRAPH_SEPARATOR=\n---\n)
_raw_separator = os.getenv("PARAGRAPH_SEPARATOR")
PARAGRAPH_SEPARATOR = decode_escapes(_raw_separator) if _raw_separator else DEFAULT_SEPARATOR

# Parágrafos com menos caracteres (após strip) são descartados pela CLI.
try:
    PARAGRAPH_MIN_LENGTH = int(os.getenv("PARAGRAPH_MIN_LENGTH", str(DEFAULT_MIN_LENGTH)))
except ValueError:
    logging.warning("PARAGRAPH_MIN_LENGTH nao numerico; usando %s", DEFAULT_MIN_LENGTH)
    PARAGRAPH_MIN_LENGTH = DEFAULT_MIN_LENGTH
if PARAGRAPH_MIN_LENGTH < 0:
    logging.warning(
        "PARAGRAPH_MIN_LENGTH=%s invalido; usando %s", PARAGRAPH_MIN_LENGTH, DEFAULT_MIN_LENGTH
    )
    PARAGRAPH_MIN_LENGTH = DEFAULT_MIN_LENGTH


def validate_config():
    invalid = []
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        invalid.append("LOG_LEVEL")
    try:
        codecs.lookup(INPUT_ENCODING)
    except LookupError:
        invalid.append("INPUT_ENCODING")
    if not VALID_EXTS or not all(e.startswith(".") for e in VALID_EXTS):
        invalid.append("VALID_EXTS")
    if invalid:
        logging.error(f"Variáveis inválidas: {invalid}")
        raise RuntimeError(f"Variáveis inválidas: {invalid}")
