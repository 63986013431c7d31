# gestion-ecole

Gestion en mode console d'une école primaire : saisie des élèves, affectation
dans les niveaux du CP au CM2, répartition en classes de 25 élèves au plus,
professeurs, directeur, et enregistrement ou relecture de l'école dans un
fichier texte.

Aucune dépendance en dehors de la bibliothèque standard (Python 3.10 ou plus).

## Installation

```
pip install .
```

## Utilisation

Lancer le menu interactif :

```
gestion-ecole
```

Le programme démarre avec une école d'exemple déjà remplie
(`gestion_ecole.menu.ecole_exemple()`) et affiche le menu général :

```
--- Menu Général ---
1 - Menu Élève
2 - Menu Classe
3 - Menu École
4 - Lire Fichier
5 - Écrire Fichier
0 - Quitter
```

- **Menu Élève** : saisir un élève, afficher un élève (toute une classe ou un
  élève retrouvé par son nom et prénom), modifier un champ d'un élève
  (prénom, nom, sexe ou date de naissance), rechercher un élève.
- **Menu Classe** : afficher une classe, son professeur, ses effectifs et ses
  élèves, à partir du niveau (1 à 5) et du numéro de classe (0 à 2).
- **Menu École** : afficher l'école, saisir une nouvelle école complète,
  rechercher un élève, saisir ou afficher le directeur, savoir si un élève est
  inscrit (et proposer de le saisir sinon).
- **Écrire Fichier** : enregistre l'école dans un fichier texte (le fichier est
  remplacé).
- **Lire Fichier** : recharge une école depuis un fichier écrit par
  « Écrire Fichier ».

Les réponses sont lues mot par mot : un nom ou un prénom ne peut pas contenir
d'espace. Les dates se saisissent au format `jj/mm/aaaa`.

La commande se termine avec le code 0 à la fin de l'entrée standard, et avec le
code 1 en affichant `Erreur : ...` si un fichier ne peut pas être lu ou écrit
ou si son contenu n'est pas reconnu.

## Règles appliquées

- Le niveau d'un élève dépend de la différence entre l'année en cours et son
  année de naissance : 7 pour le CP, 8 pour le CE1, 9 pour le CE2, 10 pour le
  CM1, 11 pour le CM2 (`gestion_ecole.eleve.classe_selon_age`). En dessous, le
  programme affiche « Trop jeune », au-dessus « Trop vieux ».
- Une classe accueille au plus 25 élèves et chaque niveau compte au plus trois
  classes. `Ecole.repartir_classes` répartit équitablement les élèves d'un
  niveau sur le nombre de classes nécessaire ; au-delà de 75 élèves dans un
  niveau, elle lève `ValueError`.

## Utilisation depuis Python

```python
from gestion_ecole.console import Console
from gestion_ecole.fichier import ecrire_fichier_texte, lire_fichier_texte
from gestion_ecole.ecole import Ecole
from gestion_ecole.menu import ecole_exemple

console = Console()
ecole = ecole_exemple()
ecole.afficher(console)
ecrire_fichier_texte(ecole, "ecole.txt", console)

copie = Ecole()
lire_fichier_texte(copie, "ecole.txt", console)
print(copie.rechercher_eleve("Taylor", "Corey"))  # (1, 0, 0)
```

Modules :

- `gestion_ecole.console` : `Console`, lecture de mots, d'entiers et de
  caractères, écriture de texte.
- `gestion_ecole.eleve` : `Eleve`, `saisir_eleve`, `modifier_eleve`,
  `classe_selon_age`, `nom_niveau`.
- `gestion_ecole.classe` : `Classe`, `Professeur`.
- `gestion_ecole.ecole` : `Ecole`, `Directeur`, `saisir_ecole`, `est_inscrit`,
  `saisir_directeur`, `modifier_directeur`.
- `gestion_ecole.fichier` : `ecrire_fichier_texte`, `lire_fichier_texte`.
- `gestion_ecole.menu` : les menus interactifs et `main`.

## Ce que le package ne fait pas

- Un élève saisi depuis le Menu Élève, ou inscrit depuis « Savoir si un élève
  est inscrit », est gardé dans une place d'attente unique (niveau 0) : il
  n'est pas placé dans une classe, et une nouvelle saisie le remplace.
- Le menu d'accueil (`menu_accueil`) ne sait pas lire un fichier (il affiche
  « Fonction de lecture de fichier à compléter. ») et son choix 3 ne fait rien.
- L'école n'est pas enregistrée automatiquement en quittant : seul « Écrire
  Fichier » la sauvegarde.

## Tests

```
pip install .[test]
pytest
```