#!/usr/bin/env python3
import os
import sys
import json
import argparse
import time
import logging
from typing import List, Optional, TextIO
from tqdm import tqdm

# Garante imports locais
sys.path.insert(0, os.path.dirname(__file__))

from config import (
    LOG_LEVEL, INPUT_ENCODING, PARAGRAPH_SEPARATOR, PARAGRAPH_MIN_LENGTH,
    decode_escapes, validate_config
)
from split_paragraphs import Span
from utils import setup_logging, is_valid_file, read_text, filter_paragraphs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="split-paragraphs",
        description="Divide textos em parágrafos (duas ou mais quebras de linha).",
    )
    parser.add_argument("files", nargs="*", help="arquivos de texto; sem arquivos lê stdin")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="uma lista JSON por arquivo")
    output.add_argument("--count", action="store_true", help="apenas a quantidade de parágrafos")
    parser.add_argument("--spans", action="store_true", help="posições start/end em vez do texto")
    parser.add_argument("--reverse", action="store_true", help="do último ao primeiro parágrafo")
    parser.add_argument("--min-length", type=int, default=PARAGRAPH_MIN_LENGTH,
                        help="descarta parágrafos menores que N caracteres")
    parser.add_argument("--separator", type=decode_escapes, default=None,
                        help="texto impresso entre parágrafos (aceita escapes como \\n)")
    parser.add_argument("--encoding", default=INPUT_ENCODING)
    parser.add_argument("--verbose", action="store_true")
    return parser


def render(text: str, spans: List[Span], args: argparse.Namespace) -> str:
    """Formata os parágrafos de um texto conforme as opções de saída."""
    if args.count:
        return str(len(spans))
    if args.spans:
        items = [[s.start, s.end] for s in spans]
        if args.json:
            return json.dumps(items)
        return "\n".join(f"{start}\t{end}" for start, end in items)
    paras = [text[s.start:s.end] for s in spans]
    if args.json:
        return json.dumps(paras, ensure_ascii=False)
    return args.separator.join(paras)


def process_text(text: str, args: argparse.Namespace, out: TextIO) -> int:
    spans = filter_paragraphs(text, args.min_length, reverse=args.reverse)
    rendered = render(text, spans, args)
    if rendered:
        out.write(rendered + "\n")
    return len(spans)


def process_file(path: str, args: argparse.Namespace, stats: dict,
                 out: Optional[TextIO] = None):
    """
    Processa um único arquivo: lê o texto, separa os parágrafos e escreve o
    resultado em `out`. Erros são logados e contados em stats['errors'].
    """
    out = out or sys.stdout
    filename = os.path.basename(path)
    logging.debug(f"→ Processando arquivo: {filename}")

    if not is_valid_file(path):
        stats['errors'] += 1
        return

    try:
        text = read_text(path, args.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logging.error(f"Erro lendo '{filename}': {e}")
        stats['errors'] += 1
        return

    total = process_text(text, args, out)
    stats['processed'] += 1
    logging.info(f"→ '{filename}': {total} parágrafos.")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    validate_config()
    setup_logging("DEBUG" if args.verbose else LOG_LEVEL)
    if args.separator is None:
        args.separator = PARAGRAPH_SEPARATOR

    if args.min_length < 0:
        logging.warning(f"--min-length {args.min_length} invalido; usando 0")
        args.min_length = 0

    if not args.files:
        data = sys.stdin.buffer.read()
        try:
            text = data.decode(args.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logging.error(f"Erro decodificando stdin: {e}")
            return 1
        process_text(text, args, sys.stdout)
        return 0

    stats = {"processed": 0, "errors": 0}
    start = time.perf_counter()

    pbar = tqdm(args.files, unit="arquivo", disable=len(args.files) < 2)
    for path in pbar:
        pbar.set_description(f"Processando → {os.path.basename(path)}")
        process_file(path, args, stats)
        pbar.set_postfix({"P": stats['processed'], "E": stats['errors']})
    pbar.close()

    dt = time.perf_counter() - start
    logging.info(
        f"Processados: {stats['processed']}  •  Erros: {stats['errors']}  •  Tempo total: {dt:.2f}s"
    )
    return 1 if stats['errors'] else 0


if __name__ == "__main__":
    sys.exit(main())
