"""Interactive menus and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from datetime import date

from .classe import Classe, Professeur
from .console import Console
from .ecole import Directeur, Ecole, est_inscrit, saisir_directeur, saisir_ecole
from .eleve import Eleve, modifier_eleve, saisir_eleve
from .fichier import ecrire_fichier_texte, lire_fichier_texte

_EFFACER_ECRAN = "\033[H\033[2J"


def _effacer(console: Console) -> None:
    console.ecrire(_EFFACER_ECRAN)


def _lire_choix(console: Console) -> int | None:
    """Read a menu choice; a word that is not a number gives None."""
    try:
        return console.lire_entier()
    except ValueError:
        return None


def _classe_a(ecole: Ecole, niveau: int, numero: int) -> Classe | None:
    if 0 <= niveau < len(ecole.classes) and 0 <= numero < len(ecole.classes[niveau]):
        return ecole.classes[niveau][numero]
    return None


def _eleve_a(ecole: Ecole, niveau: int, numero: int, indice: int) -> Eleve | None:
    classe = _classe_a(ecole, niveau, numero)
    if classe is None or not 0 <= indice < classe.nb_eleves:
        return None
    return classe.eleves[indice]


def _enregistrer_en_attente(ecole: Ecole, eleve: Eleve) -> None:
    attente = ecole.classes[0][0].eleves
    if attente:
        attente[0] = eleve
    else:
        attente.append(eleve)


def _classe_exemple(nom: str, prof: Professeur, eleves: list[Eleve]) -> Classe:
    return Classe(nom=nom, prof=prof, eleves=eleves)


def ecole_exemple() -> Ecole:
    """Return the sample school the program starts with."""
    ecole = Ecole(
        nom="École des Petits Génies",
        directeur=Directeur("Lemoine", "Valérie"),
    )
    ecole.nb_classes = [0, 2, 1, 0, 0, 0]
    ecole.classes[1][0] = _classe_exemple(
        "CP-1",
        Professeur("Lemoine", "Paul"),
        [
            Eleve("Taylor", "Corey", True, date(2016, 12, 8), 1),
            Eleve("Crahan", "Shawn", True, date(2016, 9, 24), 1),
            Eleve("Thomson", "Mick", True, date(2016, 6, 3), 1),
        ],
    )
    ecole.classes[1][1] = _classe_exemple(
        "CP-2",
        Professeur("Roux", "Benoît"),
        [
            Eleve("Root", "Jim", True, date(2016, 2, 2), 1),
            Eleve("Weinberg", "Jay", True, date(2016, 4, 26), 1),
            Eleve("Fehn", "Chris", True, date(2016, 2, 24), 1),
        ],
    )
    ecole.classes[2][0] = _classe_exemple(
        "CE1-1",
        Professeur("Marchand", "Thomas"),
        [
            Eleve("Gray", "Paul", True, date(2015, 4, 8), 2),
            Eleve("Wilson", "Sid", True, date(2015, 1, 20), 2),
            Eleve("Colsefni", "Anders", True, date(2015, 7, 16), 2),
        ],
    )
    return ecole


def menu_accueil(ecole: Ecole, console: Console) -> None:
    """Welcome menu offered when no school has been entered yet."""
    while True:
        console.ecrire(
            "\nBienvenue\n"
            "1 - Saisir une école\n"
            "2 - Lecture d'un fichier d'école existant\n"
            "3 - Impression dans un fichier texte\n"
            "Votre choix : "
        )
        choix = _lire_choix(console)
        if choix in (1, 2, 3):
            break

    if choix == 1:
        saisir_ecole(ecole, console)
        menu_general(ecole, console)
    elif choix == 2:
        console.ecrire("Fonction de lecture de fichier à compléter.\n")


def menu_general(ecole: Ecole, console: Console) -> None:
    """Main menu: navigate between the other menus, read or write a file."""
    _effacer(console)
    while True:
        console.ecrire(
            "\n--- Menu Général ---\n"
            "1 - Menu Élève\n2 - Menu Classe\n3 - Menu École\n"
            "4 - Lire Fichier\n5 - Écrire Fichier\n0 - Quitter\n"
            "Votre choix : "
        )
        choix = _lire_choix(console)
        if choix == 1:
            menu_eleve(ecole, console)
        elif choix == 2:
            menu_classe(ecole, console)
        elif choix == 3:
            menu_ecole(ecole, console)
        elif choix == 4:
            console.ecrire("\nQuel est le nom du fichier que vous souhaitez lire ? ")
            lire_fichier_texte(ecole, console.lire_mot(), console)
        elif choix == 5:
            console.ecrire("\nQuel est le nom du fichier que vous souhaitez écrire ? ")
            ecrire_fichier_texte(ecole, console.lire_mot(), console)
        elif choix == 0:
            console.ecrire("Au revoir !\n")
            return
        else:
            console.ecrire("Choix invalide.\n")


def menu_eleve(ecole: Ecole, console: Console) -> None:
    """Pupil menu: enter, show, modify or look up a pupil."""
    _effacer(console)
    while True:
        console.ecrire(
            "\n--- Menu Élève ---\n"
            "1 - Saisir un élève\n2 - Afficher un élève\n3 - Modifier un élève\n"
            "4 - Rechercher un élève\n6 - Menu Général\n"
            "Votre choix : "
        )
        choix = _lire_choix(console)
        if choix == 1:
            eleve = saisir_eleve(console)
            _enregistrer_en_attente(ecole, eleve)
            console.ecrire("\nVous avez bien saisi l'élève :\n")
            eleve.afficher(console)
        elif choix == 2:
            menu_afficher_eleve(ecole, console)
        elif choix == 3:
            console.ecrire(
                "\nQuel élève souhaitez-vous modifier ?\nSaisir le nom et prénom : "
            )
            nom = console.lire_mot()
            prenom = console.lire_mot()
            console.ecrire(
                "\nSaisir niveau (1-5) et classe (0-2) et l'indice de l'élève : "
            )
            position = (console.lire_entier(), console.lire_entier(), console.lire_entier())
            position = ecole.rechercher_eleve(nom, prenom) or position
            eleve = _eleve_a(ecole, *position)
            if eleve is None:
                console.ecrire("\nAucun élève à cette place\n")
            else:
                modifier_eleve(eleve, console)
        elif choix == 4:
            console.ecrire("Nom et prénom : ")
            nom = console.lire_mot()
            prenom = console.lire_mot()
            if ecole.rechercher_eleve(nom, prenom) is None:
                console.ecrire("\nIl n'est pas présent\n")
        elif choix == 6:
            return


def menu_afficher_eleve(ecole: Ecole, console: Console) -> None:
    """Show pupils, either a whole class or one pupil found by name."""
    _effacer(console)
    while True:
        console.ecrire(
            "\n--- Menu Afficher un Élève ---\n"
            "1 - Vous connaissez la classe et le niveau de l'élève\n"
            "2 - Rechercher par son nom et prénom\n6 - Menu Général\n"
            "Votre choix : "
        )
        choix = _lire_choix(console)
        if choix == 1:
            console.ecrire("Saisir niveau (1-5) et classe (0-2) : ")
            classe = _classe_a(ecole, console.lire_entier(), console.lire_entier())
            if classe is None:
                console.ecrire("Classe inexistante\n")
            else:
                classe.afficher_eleves(console)
        elif choix == 2:
            console.ecrire("\nVeuillez saisir le nom et le prénom de l'élève : ")
            nom = console.lire_mot()
            prenom = console.lire_mot()
            position = ecole.rechercher_eleve(nom, prenom)
            if position is None:
                console.ecrire("Il n'est pas là\n")
            else:
                _eleve_a(ecole, *position).afficher(console)
        elif choix == 6:
            return


def menu_classe(ecole: Ecole, console: Console) -> None:
    """Class menu: show a class."""
    _effacer(console)
    while True:
        console.ecrire(
            "\n--- Menu Classe ---\n"
            "1 - Afficher classe\n5 - Menu Général\n"
            "Votre choix : "
        )
        choix = _lire_choix(console)
        if choix == 1:
            console.ecrire(
                "Les élèves de quelle classe souhaitez-vous afficher ?\n"
                "Saisir niveau (1-5) et classe (0-2) : "
            )
            classe = _classe_a(ecole, console.lire_entier(), console.lire_entier())
            if classe is None:
                console.ecrire("Classe inexistante\n")
            else:
                classe.afficher(console)
        elif choix == 5:
            return


def menu_ecole(ecole: Ecole, console: Console) -> None:
    """School menu: show or enter the school, search pupils, manage the director."""
    _effacer(console)
    while True:
        console.ecrire(
            "\n--- Menu École ---\n"
            "1 - Afficher École\n2 - Saisir École\n3 - Rechercher élève\n"
            "4 - Saisir directeur (écrase le directeur actuel)\n"
            "5 - Afficher directeur\n6 - Savoir si un élève est inscrit\n"
            "7 - Menu Général\n"
            "Votre choix : "
        )
        choix = _lire_choix(console)
        if choix == 1:
            ecole.afficher(console)
        elif choix == 2:
            saisir_ecole(ecole, console)
        elif choix == 3:
            console.ecrire("Nom, prénom, niveau, classe, indice : ")
            nom = console.lire_mot()
            prenom = console.lire_mot()
            for _ in range(3):
                console.lire_entier()
            trouve = ecole.rechercher_eleve(nom, prenom) is not None
            console.ecrire(f"Résultat : {'Trouvé' if trouve else 'Non trouvé'}\n")
        elif choix == 4:
            saisir_directeur(ecole.directeur, console)
        elif choix == 5:
            ecole.afficher_directeur(console)
        elif choix == 6:
            console.ecrire("Nom prénom : ")
            nom = console.lire_mot()
            prenom = console.lire_mot()
            est_inscrit(ecole, nom, prenom, console, menu_eleve)
        elif choix == 7:
            return


def main(argv=None) -> int:
    """Start the interactive school manager on the sample school."""
    parser = argparse.ArgumentParser(
        prog="gestion-ecole",
        description="Gestion interactive d'une école primaire.",
    )
    parser.parse_args(argv)
    console = Console()
    try:
        menu_general(ecole_exemple(), console)
    except EOFError:
        return 0
    except (OSError, ValueError) as erreur:
        print(f"Erreur : {erreur}", file=sys.stderr)
        return 1
    return 0