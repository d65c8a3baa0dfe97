"""
Couche domaine (core).

Contient les entités metier, ports (interfaces abstraites), objets valeur
et exceptions du domaine.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites metier (Dvd, DvdPatch, User)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (DvdFilter, FilterState, YearRange)
"""
