# utils.py
import logging
import os
from typing import List

from config import LOG_LEVEL, VALID_EXTS, INPUT_ENCODING
from split_paragraphs import Span, paragraph_spans


def setup_logging(level: str = LOG_LEVEL):
    # force=True: avisos emitidos na importação de config já configuram o root logger
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s', force=True)


def is_valid_file(path: str) -> bool:
    """Verifica existência e extensão suportada."""
    if not os.path.isfile(path) or not path.lower().endswith(VALID_EXTS):
        logging.error(f"Arquivo inválido: {path}")
        return False
    return True


def read_text(path: str, encoding: str = INPUT_ENCODING) -> str:
    # newline='' preserva CR/LF originais; a separação depende deles
    with open(path, encoding=encoding, newline='') as f:
        return f.read()


def filter_paragraphs(text: str, min_length: int = 0, reverse: bool = False) -> List[Span]:
    """
    Devolve as posições dos parágrafos de `text`, descartando os curtos
    (< min_length chars após strip). Com reverse=True, do último ao primeiro.
    """
    spans = paragraph_spans(text)
    result: List[Span] = []
    for span in (reversed(spans) if reverse else spans):
        if len(text[span.start:span.end].strip()) < min_length:
            continue
        result.append(span)
    return result
