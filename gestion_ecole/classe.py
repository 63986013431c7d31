"""A class of pupils with its teacher."""

from __future__ import annotations

from dataclasses import dataclass, field

from .console import Console
from .eleve import Eleve

MAX_ELEVES = 25


@dataclass
class Professeur:
    nom: str = ""
    prenom: str = ""


@dataclass
class Classe:
    """A class: its level name, teacher and pupils."""

    nom: str = ""
    prof: Professeur = field(default_factory=Professeur)
    eleves: list[Eleve] = field(default_factory=list)

    @property
    def nb_eleves(self) -> int:
        return len(self.eleves)

    @property
    def nb_garcons(self) -> int:
        return sum(eleve.garcon for eleve in self.eleves)

    @property
    def nb_filles(self) -> int:
        return self.nb_eleves - self.nb_garcons

    def afficher_eleves(self, console: Console) -> None:
        for eleve in self.eleves:
            eleve.afficher(console)

    def rechercher_eleve(self, nom: str, prenom: str) -> int | None:
        """Return the index of the pupil with this name, or None."""
        return next(
            (
                indice
                for indice, eleve in enumerate(self.eleves)
                if eleve.nom == nom and eleve.prenom == prenom
            ),
            None,
        )

    def saisir_prof(self, console: Console) -> None:
        console.ecrire("Saisir le nom et le prénom du professeur : ")
        nom = console.lire_mot()
        prenom = console.lire_mot()
        self.prof = Professeur(nom, prenom)

    def afficher(self, console: Console) -> None:
        console.ecrire(
            f"Pour la classe {self.nom}, nous avons {self.nb_eleves} élève(s) "
            f"sous la direction de M.{self.prof.prenom} {self.prof.nom} et contient "
            f"{self.nb_filles} fille(s) et {self.nb_garcons} garçon(s).\n"
        )
        self.afficher_eleves(console)

    def imprimer_eleves(self, nom_fichier) -> None:
        for eleve in self.eleves:
            eleve.imprimer(nom_fichier)

    def imprimer(self, nom_fichier, console: Console) -> None:
        """Append the class summary and its pupils to a text file."""
        with open(nom_fichier, "a", encoding="utf-8") as fichier:
            console.ecrire(">>> Enregistrement des classes\n")
            fichier.write(
                f"Dans la classe il y a {self.nb_filles} fille(s) "
                f"et {self.nb_garcons} garçon(s).\n\n"
            )
        self.imprimer_eleves(nom_fichier)