"""Routeurs de l'API REST."""
