"""Commandes CLI de DVDShelf (typer + rich)."""
