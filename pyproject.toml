[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "gestion-ecole"
version = "0.1.0"
description = "Gestion en mode console d'une école primaire : élèves, classes, directeur et fichiers texte"
requires-python = ">=3.10"
dependencies = []
keywords = ["école", "élèves", "classes", "console", "gestion scolaire"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gestion-ecole = "gestion_ecole.menu:main"

[tool.setuptools.packages.find]
include = ["gestion_ecole*"]

[tool.pytest.ini_options]
addopts = "-ra"
