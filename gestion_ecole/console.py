"""Word-oriented terminal input and output used by the interactive screens."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_MOT = re.compile(r"\S+")


class Console:
    """Reads whitespace-separated words and characters and writes text."""

    def __init__(self, entree: TextIO | None = None, sortie: TextIO | None = None):
        self._entree = entree if entree is not None else sys.stdin
        self._sortie = sortie if sortie is not None else sys.stdout
        self._tampon = ""

    def ecrire(self, texte: str) -> None:
        """Write text to the output stream."""
        self._sortie.write(texte)
        self._sortie.flush()

    def _sauter_blancs(self) -> None:
        while True:
            self._tampon = self._tampon.lstrip()
            if self._tampon:
                return
            ligne = self._entree.readline()
            if not ligne:
                raise EOFError("fin de l'entrée")
            self._tampon = ligne

    def lire_mot(self) -> str:
        """Return the next whitespace-delimited word."""
        self._sauter_blancs()
        correspondance = _MOT.match(self._tampon)
        self._tampon = self._tampon[correspondance.end():]
        return correspondance.group()

    def lire_entier(self) -> int:
        """Return the next word as an integer."""
        mot = self.lire_mot()
        try:
            return int(mot)
        except ValueError:
            raise ValueError(f"entier attendu : {mot!r}") from None

    def lire_caractere(self) -> str:
        """Return the next non-blank character."""
        self._sauter_blancs()
        caractere, self._tampon = self._tampon[0], self._tampon[1:]
        return caractere