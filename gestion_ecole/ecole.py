"""A school: director, classes by level, pupil entry and class splitting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from .classe import MAX_ELEVES, Classe
from .console import Console
from .eleve import NIVEAUX, Eleve, saisir_eleve

NIVEAUX_CLASSE = 6
NUMEROS_CLASSE = 3


@dataclass
class Directeur:
    nom: str = ""
    prenom: str = ""


def _grille_classes() -> list[list[Classe]]:
    return [[Classe() for _ in range(NUMEROS_CLASSE)] for _ in range(NIVEAUX_CLASSE)]


@dataclass
class Ecole:
    """A school; level 0 of ``classes`` is a scratch area, levels 1 to 5 are CP to CM2."""

    nom: str = ""
    directeur: Directeur = field(default_factory=Directeur)
    classes: list[list[Classe]] = field(default_factory=_grille_classes)
    nb_classes: list[int] = field(default_factory=lambda: [0] * NIVEAUX_CLASSE)

    def afficher(self, console: Console) -> None:
        """Show the school, its director and every non-empty class."""
        console.ecrire(f"\nBienvenue à l'école : {self.nom}\n")
        self.afficher_directeur(console)
        for niveau in self.classes[1:]:
            for classe in niveau:
                if classe.nb_eleves:
                    classe.afficher(console)

    def rechercher_eleve(self, nom: str, prenom: str) -> tuple[int, int, int] | None:
        """Return (level, class number, index) of the pupil, or None."""
        for niveau, classes in enumerate(self.classes):
            for numero, classe in enumerate(classes[: self.nb_classes[niveau]]):
                indice = classe.rechercher_eleve(nom, prenom)
                if indice is not None:
                    return niveau, numero, indice
        return None

    def afficher_directeur(self, console: Console) -> None:
        console.ecrire(
            f"\nL'école {self.nom} est dirigée par "
            f"{self.directeur.nom} {self.directeur.prenom}\n"
        )

    def repartir_classes(self, console: Console) -> None:
        """Split each level's pupils evenly into classes of at most 25 pupils.

        Before the call, the pupils of a level are all in its first class; after
        it, ``nb_classes`` holds the number of classes used at each level.
        """
        for niveau in range(1, NIVEAUX_CLASSE):
            classes = self.classes[niveau]
            eleves = [eleve for classe in classes for eleve in classe.eleves]
            total = len(eleves)
            a_creer = max(1, -(-total // MAX_ELEVES))
            if a_creer > NUMEROS_CLASSE:
                raise ValueError(
                    f"trop d'élèves en {classes[0].nom} : {total} "
                    f"(au plus {NUMEROS_CLASSE * MAX_ELEVES})"
                )
            for numero in range(1, a_creer):
                console.ecrire(f"Saisir le prof de la classe {classes[numero].nom} {numero}\n")
                classes[numero].saisir_prof(console)

            par_classe, reste = divmod(total, a_creer)
            debut = 0
            for numero, classe in enumerate(classes):
                taille = (par_classe + (numero < reste)) if numero < a_creer else 0
                classe.eleves = eleves[debut : debut + taille]
                debut += taille
            self.nb_classes[niveau] = sum(1 for classe in classes if classe.nb_eleves)


def saisir_directeur(directeur: Directeur, console: Console) -> None:
    console.ecrire("\nSaisir le prénom du directeur : ")
    directeur.prenom = console.lire_mot()
    console.ecrire("\nSaisir le nom du directeur : ")
    directeur.nom = console.lire_mot()


def modifier_directeur(directeur: Directeur, console: Console) -> None:
    console.ecrire("\nQuel est le nouveau prénom du directeur : ")
    directeur.prenom = console.lire_mot()
    console.ecrire("\nQuel est le nouveau nom du directeur : ")
    directeur.nom = console.lire_mot()


def _lire_choix(console: Console, invite: str, choix: str) -> str:
    while True:
        console.ecrire(invite)
        reponse = console.lire_caractere()
        if reponse in choix:
            return reponse


def saisir_ecole(ecole: Ecole, console: Console, aujourd_hui: date | None = None) -> None:
    """Ask for a whole school: name, director, pupils and teachers."""
    console.ecrire("\nQuel est le nom de l'école : ")
    ecole.nom = console.lire_mot()
    saisir_directeur(ecole.directeur, console)

    ecole.classes = _grille_classes()
    for niveau, nom in NIVEAUX.items():
        for classe in ecole.classes[niveau]:
            classe.nom = nom
    ecole.nb_classes = [0] * NIVEAUX_CLASSE

    while True:
        eleve: Eleve = saisir_eleve(console, aujourd_hui)
        if eleve.num_classe in NIVEAUX:
            ecole.classes[eleve.num_classe][0].eleves.append(eleve)
            ecole.nb_classes[eleve.num_classe] += 1
        reponse = _lire_choix(
            console, "\nSaisir le caractère (c:continuer q:arrêter) : ", "cq"
        )
        if reponse == "q":
            break

    for niveau in range(1, NIVEAUX_CLASSE):
        premiere = ecole.classes[niveau][0]
        if not premiere.nb_eleves:
            console.ecrire(f"\nIl n'y a pas d'élève(s) en {premiere.nom}\n")
        else:
            console.ecrire(f"Saisir le prof de la première classe de {premiere.nom}\n")
            premiere.saisir_prof(console)

    ecole.repartir_classes(console)


def est_inscrit(
    ecole: Ecole,
    nom: str,
    prenom: str,
    console: Console,
    menu_eleve: Callable[[Ecole, Console], None],
) -> bool:
    """Tell whether the pupil is enrolled; if not, offer to enter them."""
    if ecole.rechercher_eleve(nom, prenom) is not None:
        return True
    reponse = _lire_choix(
        console,
        "\nCet élève n'est pas inscrit\nVoulez-vous l'inscrire ? ('o' ou 'n')\n",
        "on",
    )
    if reponse == "o":
        eleve = saisir_eleve(console)
        attente = ecole.classes[0][0].eleves
        if attente:
            attente[0] = eleve
        else:
            attente.append(eleve)
    else:
        menu_eleve(ecole, console)
    return False