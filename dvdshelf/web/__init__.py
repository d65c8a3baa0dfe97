"""Interface web (API REST FastAPI) de DVDShelf."""
