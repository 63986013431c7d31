import io
from datetime import date

import pytest

from gestion_ecole.classe import Classe, Professeur
from gestion_ecole.console import Console
from gestion_ecole.ecole import Directeur, Ecole
from gestion_ecole.eleve import Eleve
from gestion_ecole.fichier import ecrire_fichier_texte, lire_fichier_texte


def _console():
    sortie = io.StringIO()
    return Console(io.StringIO(""), sortie), sortie


def _ecole():
    ecole = Ecole(nom="École des Petits Génies", directeur=Directeur("Lemoine", "Valérie"))
    ecole.nb_classes = [0, 2, 1, 0, 0, 0]
    ecole.classes[1][0] = Classe(
        nom="CP",
        prof=Professeur("Durand", "Céline"),
        eleves=[
            Eleve("Dubois", "Léo", True, date(2016, 3, 5), 1),
            Eleve("Morel", "Emma", False, date(2017, 10, 12), 1),
            Eleve("Petit", "Noah", True, date(2016, 6, 20), 1),
        ],
    )
    ecole.classes[1][1] = Classe(
        nom="CP",
        prof=Professeur("Roux", "Benoît"),
        eleves=[
            Eleve("Garcia", "Lucas", True, date(2017, 2, 18), 1),
            Eleve("Leroy", "Lina", False, date(2016, 12, 3), 1),
            Eleve("Faure", "Zoé", False, date(2017, 8, 25), 1),
        ],
    )
    ecole.classes[2][0] = Classe(
        nom="CE1",
        prof=Professeur("Marchand", "Thomas"),
        eleves=[
            Eleve("Blanc", "Adam", True, date(2016, 4, 30), 2),
            Eleve("Meunier", "Anna", False, date(2016, 7, 14), 2),
        ],
    )
    return ecole


def test_en_tete_du_fichier(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, _ = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    lignes = chemin.read_text(encoding="utf-8").splitlines()
    assert lignes[0] == "-------------------- ÉCOLE École des Petits Génies --------------------"
    assert lignes[1] == ""
    assert lignes[2] == "Nom du directeur : Lemoine Valérie"
    assert "Dans l'école il y a 2 classes de CP" in lignes
    assert "--- FIN ÉCOLE -------------------------------------" in lignes


def test_classes_vides_non_ecrites(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, _ = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    texte = chemin.read_text(encoding="utf-8")
    assert texte.count("CLASSE DE CP") == 2
    assert texte.count("CLASSE DE CE1") == 1
    assert "CLASSE DE CE2" not in texte
    assert texte.count("---------- ÉLÈVE") == 8


def test_message_enregistrement(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, sortie = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    assert sortie.getvalue().startswith(
        f'>>> Enregistrement en cours dans le fichier "{chemin}"\n'
    )


def test_ecriture_remplace_le_fichier(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, _ = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    premier = chemin.read_text(encoding="utf-8")
    ecrire_fichier_texte(_ecole(), chemin, console)
    assert chemin.read_text(encoding="utf-8") == premier


def test_aller_retour(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, sortie = _console()
    originale = _ecole()
    ecrire_fichier_texte(originale, chemin, console)

    relue = Ecole()
    lire_fichier_texte(relue, chemin, console)

    assert relue.nom == originale.nom
    assert relue.directeur == originale.directeur
    assert relue.nb_classes == originale.nb_classes
    for niveau in range(1, 6):
        for numero in range(3):
            assert relue.classes[niveau][numero].eleves == originale.classes[niveau][numero].eleves
            if originale.classes[niveau][numero].eleves:
                assert relue.classes[niveau][numero].prof == originale.classes[niveau][numero].prof
    assert sortie.getvalue().endswith("\nLecture terminée avec succès.\n")


def test_lecture_donne_les_noms_de_niveau(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, _ = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    relue = Ecole()
    lire_fichier_texte(relue, chemin, console)
    assert relue.classes[1][1].nom == "CP"
    assert relue.classes[5][0].nom == "CM2"
    assert relue.classes[2][0].nb_filles == 1


def test_lecture_remplace_les_classes(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, _ = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    cible = Ecole()
    cible.classes[4][0].eleves.append(Eleve("Ancien", "Élève", True, date(2014, 1, 1), 4))
    lire_fichier_texte(cible, chemin, console)
    assert cible.rechercher_eleve("Ancien", "Élève") is None
    assert cible.rechercher_eleve("Faure", "Zoé") == (1, 1, 2)


def test_fichier_absent(tmp_path):
    console, _ = _console()
    with pytest.raises(FileNotFoundError):
        lire_fichier_texte(Ecole(), tmp_path / "absent.txt", console)


def test_fichier_mal_forme(tmp_path):
    chemin = tmp_path / "faux.txt"
    chemin.write_text("ceci n'est pas une école\n", encoding="utf-8")
    console, _ = _console()
    with pytest.raises(ValueError):
        lire_fichier_texte(Ecole(), chemin, console)


def test_fichier_tronque(tmp_path):
    chemin = tmp_path / "ecole.txt"
    console, _ = _console()
    ecrire_fichier_texte(_ecole(), chemin, console)
    lignes = chemin.read_text(encoding="utf-8").splitlines(keepends=True)
    chemin.write_text("".join(lignes[:-10]), encoding="utf-8")
    with pytest.raises(ValueError):
        lire_fichier_texte(Ecole(), chemin, console)