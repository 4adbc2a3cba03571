# split_paragraphs.py
"""
Iterador preguiçoso de parágrafos sobre um buffer de texto.

Um limite de parágrafo é uma sequência máxima de duas ou mais quebras de linha,
onde cada quebra é um LF ou um par CR+LF. Um CR solto (inclusive no fim do
buffer) é conteúdo, não quebra.

    >>> list(paragraphs("foo\\r\\nbar\\n\\nbaz\\r"))
    ['foo\\r\\nbar', 'baz\\r']
"""
import logging
from typing import NamedTuple, Optional, Tuple, Union

Text = Union[str, bytes, bytearray]

# Quantidade mínima de quebras consecutivas que separa dois parágrafos
MIN_BOUNDARY_UNITS = 2


class Span(NamedTuple):
    """Posição [start, end) de um parágrafo dentro do buffer original."""
    start: int
    end: int


class Paragraphs:
    """
    Iterador sobre os parágrafos de `text`, como fatias do buffer original.

    - Consome pela frente com next() e por trás com next_back(); os dois
      cursores se encontram no meio e cada parágrafo sai uma única vez.
    - Limites no início ou no fim do buffer não geram parágrafo vazio.
    - Depois de esgotado, toda chamada levanta StopIteration.
    """

    def __init__(self, text: Text):
        if isinstance(text, str):
            self._lf, self._cr = "\n", "\r"
        elif isinstance(text, (bytes, bytearray)):
            self._lf, self._cr = b"\n", b"\r"
        else:
            raise TypeError(
                f"esperado str, bytes ou bytearray, recebido {type(text).__name__}"
            )
        self._crlf = self._cr + self._lf
        self._text = text
        self._front = 0
        self._back = len(text)
        self._finished = False

    def __iter__(self):
        return self

    def __next__(self) -> Text:
        start, end = self._next_span()
        return self._text[start:end]

    def next_back(self) -> Text:
        """Devolve o último parágrafo ainda não consumido."""
        start, end = self._next_back_span()
        return self._text[start:end]

    def __reversed__(self):
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    @property
    def exhausted(self) -> bool:
        return self._finished

    # ------------------------------------------------------------------
    # Varredura
    # ------------------------------------------------------------------
    def _find_boundary(self, lo: int, hi: int) -> Optional[Tuple[int, int]]:
        """Primeiro limite em [lo, hi) como (início, fim), ou None."""
        text, lf, cr, crlf = self._text, self._lf, self._cr, self._crlf
        i = text.find(lf, lo, hi)
        while i != -1:
            start = i - 1 if i > lo and text.startswith(cr, i - 1) else i
            stop, units = i + 1, 1
            while True:
                if text.startswith(lf, stop, hi):
                    stop += 1
                elif text.startswith(crlf, stop, hi):
                    stop += 2
                else:
                    break
                units += 1
            if units >= MIN_BOUNDARY_UNITS:
                return start, stop
            i = text.find(lf, stop, hi)
        return None

    def _rfind_boundary(self, lo: int, hi: int) -> Optional[Tuple[int, int]]:
        """Último limite em [lo, hi) como (início, fim), ou None."""
        text, lf, cr = self._text, self._lf, self._cr
        i = text.rfind(lf, lo, hi)
        while i != -1:
            stop = k = i + 1
            units = 0
            while k > lo and text.startswith(lf, k - 1):
                k -= 1
                # CR imediatamente antes do LF pertence à mesma quebra
                if k > lo and text.startswith(cr, k - 1):
                    k -= 1
                units += 1
            if units >= MIN_BOUNDARY_UNITS:
                return k, stop
            i = text.rfind(lf, lo, k)
        return None

    def _finish(self) -> None:
        self._finished = True
        logging.debug(f"Paragraphs esgotado (buffer de {len(self._text)} posições)")

    def _next_span(self) -> Span:
        while not self._finished:
            if self._front >= self._back:
                self._finish()
                break
            found = self._find_boundary(self._front, self._back)
            if found is None:
                span = Span(self._front, self._back)
                self._finish()
                return span
            start, stop = found
            span = Span(self._front, start)
            self._front = stop
            if self._front >= self._back:
                self._finish()
            # Parágrafo vazio só ocorre com limite no início; é descartado
            if span.start < span.end:
                return span
        raise StopIteration

    def _next_back_span(self) -> Span:
        while not self._finished:
            if self._back <= self._front:
                self._finish()
                break
            found = self._rfind_boundary(self._front, self._back)
            if found is None:
                span = Span(self._front, self._back)
                self._finish()
                return span
            start, stop = found
            span = Span(stop, self._back)
            self._back = start
            if self._back <= self._front:
                self._finish()
            if span.start < span.end:
                return span
        raise StopIteration


class ParagraphSpans(Paragraphs):
    """Mesma iteração de Paragraphs, mas devolve Span(start, end) sem copiar."""

    def __next__(self) -> Span:
        return self._next_span()

    def next_back(self) -> Span:
        return self._next_back_span()


def paragraphs(text: Text) -> Paragraphs:
    """Iterador sobre os parágrafos de `text`."""
    return Paragraphs(text)


def paragraph_spans(text: Text) -> ParagraphSpans:
    """Iterador sobre as posições (start, end) dos parágrafos de `text`."""
    return ParagraphSpans(text)
