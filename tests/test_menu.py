import io
from datetime import date

import pytest

from gestion_ecole.console import Console
from gestion_ecole.ecole import Ecole
from gestion_ecole.menu import (
    ecole_exemple,
    main,
    menu_accueil,
    menu_afficher_eleve,
    menu_classe,
    menu_ecole,
    menu_eleve,
    menu_general,
)


def _console(texte):
    sortie = io.StringIO()
    return Console(io.StringIO(texte), sortie), sortie


def test_ecole_exemple_contenu():
    ecole = ecole_exemple()
    assert ecole.nom == "École des Petits Génies"
    assert (ecole.directeur.nom, ecole.directeur.prenom) == ("Lemoine", "Valérie")
    assert ecole.nb_classes == [0, 2, 1, 0, 0, 0]
    assert [e.nom for e in ecole.classes[1][0].eleves] == ["Taylor", "Crahan", "Thomson"]
    assert ecole.classes[1][0].eleves[0].naissance == date(2016, 12, 8)
    assert ecole.classes[2][0].prof.nom == "Marchand"
    assert ecole.classes[1][1].nb_garcons == 3


def test_ecole_exemple_independante():
    premiere = ecole_exemple()
    premiere.classes[1][0].eleves.clear()
    assert ecole_exemple().classes[1][0].nb_eleves == 3


def test_menu_general_quitter():
    console, sortie = _console("0\n")
    menu_general(ecole_exemple(), console)
    assert "Au revoir !" in sortie.getvalue()


def test_menu_general_choix_invalide():
    console, sortie = _console("9\nabc\n0\n")
    menu_general(ecole_exemple(), console)
    assert sortie.getvalue().count("Choix invalide.") == 2


def test_menu_general_ecrire_puis_lire(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ecole = ecole_exemple()
    console, _ = _console("5 ecole.txt 0\n")
    menu_general(ecole, console)
    assert (tmp_path / "ecole.txt").exists()

    relue = Ecole()
    console, sortie = _console("4 ecole.txt 0\n")
    menu_general(relue, console)
    assert "Lecture terminée avec succès." in sortie.getvalue()
    assert relue.nom == ecole.nom
    assert relue.directeur == ecole.directeur
    assert relue.classes[1][0].eleves == ecole.classes[1][0].eleves
    assert relue.classes[2][0].eleves == ecole.classes[2][0].eleves
    assert relue.nb_classes == ecole.nb_classes


def test_menu_general_fichier_absent(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    console, _ = _console("4 absent.txt\n")
    with pytest.raises(OSError):
        menu_general(Ecole(), console)


def test_menu_eleve_recherche():
    console, sortie = _console("4 Inconnu Personne 4 Taylor Corey 6\n")
    menu_eleve(ecole_exemple(), console)
    assert sortie.getvalue().count("Il n'est pas présent") == 1


def test_menu_eleve_modifier_nom():
    ecole = ecole_exemple()
    console, _ = _console("3 Taylor Corey 0 0 0 2 Tailleur 6\n")
    menu_eleve(ecole, console)
    assert ecole.classes[1][0].eleves[0].nom == "Tailleur"
    assert ecole.rechercher_eleve("Taylor", "Corey") is None


def test_menu_eleve_modifier_place_vide():
    ecole = ecole_exemple()
    console, sortie = _console("3 Inconnu Personne 5 2 9 6\n")
    menu_eleve(ecole, console)
    assert "Aucun élève à cette place" in sortie.getvalue()


def test_menu_eleve_saisir_stocke_en_attente():
    ecole = ecole_exemple()
    console, sortie = _console("1 Lina Leroy F 03/12/2016 6\n")
    menu_eleve(ecole, console)
    attente = ecole.classes[0][0].eleves
    assert [(e.prenom, e.nom) for e in attente] == [("Lina", "Leroy")]
    assert "Vous avez bien saisi l'élève" in sortie.getvalue()


def test_menu_afficher_eleve_par_nom():
    console, sortie = _console("2 Gray Paul 2 Absent Nul 6\n")
    menu_afficher_eleve(ecole_exemple(), console)
    texte = sortie.getvalue()
    assert "Nom : Gray" in texte
    assert "Il n'est pas là" in texte


def test_menu_afficher_eleve_par_classe():
    console, sortie = _console("1 1 1 6\n")
    menu_afficher_eleve(ecole_exemple(), console)
    texte = sortie.getvalue()
    assert "Nom : Root" in texte
    assert "Nom : Fehn" in texte
    assert "Nom : Taylor" not in texte


def test_menu_classe_afficher():
    console, sortie = _console("1 1 0 1 8 8 5\n")
    menu_classe(ecole_exemple(), console)
    texte = sortie.getvalue()
    assert "Pour la classe CP-1, nous avons 3 élève(s)" in texte
    assert "Classe inexistante" in texte


def test_menu_ecole_recherche_et_directeur():
    console, sortie = _console("3 Wilson Sid 0 0 0 3 Rien Nul 0 0 0 5 7\n")
    menu_ecole(ecole_exemple(), console)
    texte = sortie.getvalue()
    assert "Résultat : Trouvé" in texte
    assert "Résultat : Non trouvé" in texte
    assert "dirigée par Lemoine Valérie" in texte


def test_menu_ecole_saisir_directeur():
    ecole = ecole_exemple()
    console, _ = _console("4 Jeanne Martin 7\n")
    menu_ecole(ecole, console)
    assert (ecole.directeur.prenom, ecole.directeur.nom) == ("Jeanne", "Martin")


def test_menu_ecole_est_inscrit_refus_ouvre_menu_eleve():
    console, sortie = _console("6 Absent Nul n 6 7\n")
    menu_ecole(ecole_exemple(), console)
    texte = sortie.getvalue()
    assert "Cet élève n'est pas inscrit" in texte
    assert "--- Menu Élève ---" in texte


def test_menu_accueil_lecture():
    console, sortie = _console("9 2\n")
    menu_accueil(Ecole(), console)
    texte = sortie.getvalue()
    assert texte.count("Bienvenue") == 2
    assert "Fonction de lecture de fichier à compléter." in texte


def test_main_quitter(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Au revoir !" in capsys.readouterr().out


def test_main_fin_entree(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0


def test_main_fichier_absent(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("4 absent.txt\n"))
    assert main([]) == 1
    assert "Erreur" in capsys.readouterr().err