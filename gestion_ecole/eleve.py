"""Pupils: entry, class assignment by age, display and printing."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from datetime import date

from .console import Console

NIVEAUX = {1: "CP", 2: "CE1", 3: "CE2", 4: "CM1", 5: "CM2"}

_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{1,4})")


def nom_niveau(num_classe: int) -> str:
    """Return the level name (CP ... CM2) for a class number, or ''."""
    return NIVEAUX.get(num_classe, "")


def _ecart_annees(naissance: date, aujourd_hui: date | None) -> int:
    aujourd_hui = aujourd_hui or date.today()
    return aujourd_hui.year - naissance.year


def classe_selon_age(naissance: date, aujourd_hui: date | None = None) -> int | None:
    """Return the class number for the given birth date, or None if out of range."""
    ecart = _ecart_annees(naissance, aujourd_hui)
    if 7 <= ecart <= 11:
        return ecart - 6
    return None


def _format_date(jour: date | None) -> str:
    if jour is None:
        return ""
    return f"{jour.day:02d}-{jour.month:02d}-{jour.year:04d}"


def _lire_date(console: Console) -> date:
    while True:
        correspondance = _DATE.fullmatch(console.lire_mot())
        if correspondance:
            jour, mois, annee = map(int, correspondance.groups())
            try:
                return date(annee, mois, jour)
            except ValueError:
                pass
        console.ecrire("Date invalide, format attendu dd/mm/yyyy\n")


def _lire_sexe(console: Console, prenom: str, nom: str) -> bool:
    while True:
        console.ecrire(f"Quel est le sexe de {prenom} {nom} ? ('H' ou 'F') : ")
        reponse = console.lire_caractere()
        if reponse in ("H", "F"):
            return reponse == "H"


@dataclass
class Eleve:
    """A pupil; ``garcon`` is True for a boy."""

    nom: str
    prenom: str
    garcon: bool = False
    naissance: date | None = None
    num_classe: int = 0

    @property
    def sexe(self) -> str:
        return "Homme" if self.garcon else "Femme"

    def affecter_classe(self, console: Console, aujourd_hui: date | None = None) -> None:
        """Set the class number from the pupil's age."""
        if self.naissance is None:
            return
        num = classe_selon_age(self.naissance, aujourd_hui)
        if num is not None:
            self.num_classe = num
        elif _ecart_annees(self.naissance, aujourd_hui) <= 6:
            console.ecrire("Trop jeune\n")
        else:
            console.ecrire("Trop vieux\n")

    def copie(self) -> Eleve:
        """Return an independent copy."""
        return dataclasses.replace(self)

    def description(self) -> str:
        """Return the text block describing the pupil."""
        return (
            f"---------- ÉLÈVE {self.prenom} {self.nom} ----------\n"
            f"Nom : {self.nom}\n"
            f"Prénom : {self.prenom}\n"
            f"Sexe : {self.sexe}\n"
            f"Date de naissance : {_format_date(self.naissance)}\n"
            f"Classe de l'élève : {nom_niveau(self.num_classe)}\n"
        )

    def afficher(self, console: Console) -> None:
        console.ecrire(self.description())

    def imprimer(self, nom_fichier) -> None:
        """Append the description and a blank line to a text file."""
        with open(nom_fichier, "a", encoding="utf-8") as fichier:
            fichier.write(self.description())
            fichier.write("\n")


def saisir_eleve(console: Console, aujourd_hui: date | None = None) -> Eleve:
    """Ask for a pupil's details and return the new pupil."""
    console.ecrire("---------- SAISIR ÉLÈVE ----------\n")
    console.ecrire("Quel est le prénom de l'élève ? : ")
    prenom = console.lire_mot()
    console.ecrire("Quel est le nom de l'élève ? : ")
    nom = console.lire_mot()
    garcon = _lire_sexe(console, prenom, nom)
    console.ecrire(f"Quel est la date de naissance de {prenom} {nom} ? (dd/mm/yyyy)\n")
    naissance = _lire_date(console)
    eleve = Eleve(nom, prenom, garcon, naissance)
    eleve.affecter_classe(console, aujourd_hui)
    return eleve


def modifier_eleve(eleve: Eleve, console: Console) -> None:
    """Let the user change one field of a pupil."""
    console.ecrire(f"---------- MODIFIER ÉLÈVE {eleve.prenom} {eleve.nom} -----------\n")
    console.ecrire(
        "-------------------------------------------\n"
        "| Que voulez-vous modifier ? -------------|\n"
        "| -1 : Prénom-----------------------------|\n"
        "| -2 : Nom--------------------------------|\n"
        "| -3 : Sexe-------------------------------|\n"
        "| -4 : Date de naissance------------------|\n"
        "-------------------------------------------\n"
    )
    reponse = console.lire_caractere()
    if reponse == "1":
        console.ecrire(
            f'Vous avez choisi de modifier le prénom "{eleve.prenom}", '
            "par quoi voulez-vous le modifier ?\n"
        )
        eleve.prenom = console.lire_mot()
    elif reponse == "2":
        console.ecrire(
            f'Vous avez choisi de modifier le nom "{eleve.nom}", '
            "par quoi voulez-vous le modifier ?\n"
        )
        eleve.nom = console.lire_mot()
    elif reponse == "3":
        console.ecrire(
            f'Vous avez choisi de modifier le sexe "{eleve.sexe}", '
            "par quoi voulez-vous le modifier ?\n\n"
        )
        eleve.garcon = _lire_sexe(console, eleve.prenom, eleve.nom)
    elif reponse == "4":
        console.ecrire("Vous avez choisi de modifier la date de naissance ")
        console.ecrire(f"Date de naissance : {_format_date(eleve.naissance)}\n")
        console.ecrire(" par quoi voulez-vous la modifier ? (dd/mm/yyyy) \n")
        eleve.naissance = _lire_date(console)
        console.ecrire(f"NOUVELLE Date de naissance : {_format_date(eleve.naissance)}\n")
    else:
        console.ecrire("Veuillez choisir un chiffre entre 1 et 4 ou appuyer sur 'q' pour quitter\n")