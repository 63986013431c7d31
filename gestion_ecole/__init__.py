"""Gestion en mode console d'une école primaire : élèves, classes, directeur, menus et fichiers texte."""

__version__ = "0.1.0"
__all__ = ["console", "eleve", "classe", "ecole", "fichier", "menu"]