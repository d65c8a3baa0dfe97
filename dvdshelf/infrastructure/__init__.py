"""
Couche infrastructure : persistance des données (SQLModel, mémoire).
"""
