"""Saving a school to a text file and loading it back."""

from __future__ import annotations

import re
from datetime import date
from typing import Iterator

from .classe import Classe, Professeur
from .console import Console
from .ecole import NIVEAUX_CLASSE, NUMEROS_CLASSE, Directeur, Ecole
from .eleve import NIVEAUX, Eleve

_NUMERO_NIVEAU = {nom: numero for numero, nom in NIVEAUX.items()}

_ENTETE = re.compile(r"-+ ÉCOLE (?P<nom>.*?) -+\s*")
_DIRECTEUR = re.compile(r"Nom du directeur : (?P<nom>\S*) ?(?P<prenom>.*?)\s*")
_NB_CLASSES = re.compile(
    r"Dans l'école il y a (?P<nb>\d+) classes de (?P<niveau>\S+)\s*"
)
_FIN_ECOLE = "--- FIN ÉCOLE"
_CLASSE = re.compile(r"~+ CLASSE DE (?P<niveau>\S+) (?P<numero>\d+) ~+\s*")
_PROF = re.compile(
    r"Nom du professeur : MMe ou Mr (?P<nom>\S*) ?(?P<prenom>.*?)\s*"
)
_EFFECTIFS = re.compile(
    r"Dans la classe il y a (?P<filles>\d+) fille\(s\) "
    r"et (?P<garcons>\d+) garçon\(s\)\.\s*"
)
_ENTETE_ELEVE = "---------- ÉLÈVE"
_CHAMP = re.compile(r"(?P<cle>[^:]+?) : ?(?P<valeur>.*)")
_DATE = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{1,4})")
_CHAMPS_ELEVE = ("Nom", "Prénom", "Sexe", "Date de naissance", "Classe de l'élève")


def ecrire_fichier_texte(ecole: Ecole, nom_fichier, console: Console) -> None:
    """Write the school, its classes and pupils to a text file, replacing it."""
    console.ecrire(f'>>> Enregistrement en cours dans le fichier "{nom_fichier}"\n')
    total = sum(ecole.nb_classes[1:NIVEAUX_CLASSE])
    with open(nom_fichier, "w", encoding="utf-8") as fichier:
        fichier.write(f"-------------------- ÉCOLE {ecole.nom} --------------------\n")
        fichier.write("\n")
        fichier.write(
            f"Nom du directeur : {ecole.directeur.nom} {ecole.directeur.prenom}\n"
        )
        fichier.write(f"Le total de classes dans l'école est de : {total}\n")
        for niveau, nom in NIVEAUX.items():
            fichier.write(
                f"Dans l'école il y a {ecole.nb_classes[niveau]} classes de {nom}\n"
            )
        fichier.write("--- FIN ÉCOLE -------------------------------------\n")
        fichier.write("\n")

    for niveau, nom in NIVEAUX.items():
        for numero, classe in enumerate(ecole.classes[niveau], start=1):
            if not classe.nb_eleves:
                continue
            with open(nom_fichier, "a", encoding="utf-8") as fichier:
                fichier.write(f"~~~~~~~~~~~~~~ CLASSE DE {nom} {numero} ~~~~~~~~~~~~~~ \n")
                fichier.write(
                    f"Nom du professeur : MMe ou Mr {classe.prof.nom} {classe.prof.prenom}\n"
                )
            classe.imprimer(nom_fichier, console)


def _suivante(lignes: Iterator[str]) -> str:
    try:
        return next(lignes)
    except StopIteration:
        raise ValueError("fin de fichier inattendue") from None


def _non_vide(lignes: Iterator[str]) -> str:
    while True:
        ligne = _suivante(lignes)
        if ligne.strip():
            return ligne


def _attendre(motif: re.Pattern[str], ligne: str) -> re.Match[str]:
    correspondance = motif.fullmatch(ligne)
    if correspondance is None:
        raise ValueError(f"ligne inattendue : {ligne!r}")
    return correspondance


def _niveau(nom: str) -> int:
    try:
        return _NUMERO_NIVEAU[nom]
    except KeyError:
        raise ValueError(f"niveau inconnu : {nom!r}") from None


def _lire_date(texte: str) -> date | None:
    texte = texte.strip()
    if not texte:
        return None
    correspondance = _DATE.fullmatch(texte)
    if correspondance is None:
        raise ValueError(f"date invalide : {texte!r}")
    jour, mois, annee = map(int, correspondance.groups())
    return date(annee, mois, jour)


def _lire_eleve(lignes: Iterator[str], niveau: int) -> Eleve:
    entete = _non_vide(lignes)
    if not entete.startswith(_ENTETE_ELEVE):
        raise ValueError(f"élève attendu : {entete!r}")
    champs = {}
    for _ in _CHAMPS_ELEVE:
        correspondance = _attendre(_CHAMP, _suivante(lignes))
        champs[correspondance["cle"]] = correspondance["valeur"]
    manquants = [cle for cle in _CHAMPS_ELEVE if cle not in champs]
    if manquants:
        raise ValueError(f"champs manquants : {', '.join(manquants)}")
    return Eleve(
        nom=champs["Nom"].strip(),
        prenom=champs["Prénom"].strip(),
        garcon="Homme" in champs["Sexe"],
        naissance=_lire_date(champs["Date de naissance"]),
        num_classe=niveau,
    )


def _lire_classe(ecole: Ecole, entete: re.Match[str], lignes: Iterator[str]) -> None:
    niveau = _niveau(entete["niveau"])
    indice = int(entete["numero"]) - 1
    if not 0 <= indice < NUMEROS_CLASSE:
        raise ValueError(f"numéro de classe invalide : {entete['numero']}")
    classe = ecole.classes[niveau][indice]

    prof = _attendre(_PROF, _non_vide(lignes))
    classe.prof = Professeur(prof["nom"], prof["prenom"])

    effectifs = _attendre(_EFFECTIFS, _non_vide(lignes))
    nombre = int(effectifs["filles"]) + int(effectifs["garcons"])
    classe.eleves = [_lire_eleve(lignes, niveau) for _ in range(nombre)]

    if ecole.nb_classes[niveau] <= indice:
        ecole.nb_classes[niveau] = indice + 1


def lire_fichier_texte(ecole: Ecole, nom_fichier, console: Console) -> None:
    """Load a school written by ``ecrire_fichier_texte`` into ``ecole``."""
    with open(nom_fichier, encoding="utf-8") as fichier:
        lignes = iter(fichier.read().splitlines())

    ecole.nom = _attendre(_ENTETE, _suivante(lignes))["nom"]
    directeur = _attendre(_DIRECTEUR, _non_vide(lignes))
    ecole.directeur = Directeur(directeur["nom"], directeur["prenom"])
    _suivante(lignes)  # total number of classes, recomputed on save

    ecole.classes = [
        [Classe(nom=NIVEAUX.get(niveau, "")) for _ in range(NUMEROS_CLASSE)]
        for niveau in range(NIVEAUX_CLASSE)
    ]
    ecole.nb_classes = [0] * NIVEAUX_CLASSE
    for _ in NIVEAUX:
        compte = _attendre(_NB_CLASSES, _suivante(lignes))
        ecole.nb_classes[_niveau(compte["niveau"])] = int(compte["nb"])

    fin = _suivante(lignes)
    if not fin.startswith(_FIN_ECOLE):
        raise ValueError(f"fin d'école attendue : {fin!r}")

    for ligne in lignes:
        entete = _CLASSE.fullmatch(ligne)
        if entete is not None:
            _lire_classe(ecole, entete, lignes)

    console.ecrire("\nLecture terminée avec succès.\n")