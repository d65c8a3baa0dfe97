"""
Mock OMDB API responses for testing.

Contains realistic responses from the OMDB API for title, search and IMDb ID
lookups. These fixtures are used with respx to mock httpx calls in tests.
"""

# GET /?t=Inception
OMDB_INCEPTION_RESPONSE = {
    "Title": "Inception",
    "Year": "2010",
    "Rated": "PG-13",
    "Released": "16 Jul 2010",
    "Runtime": "148 min",
    "Genre": "Action, Adventure, Sci-Fi",
    "Director": "Christopher Nolan",
    "Writer": "Christopher Nolan",
    "Actors": "Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
    "Plot": "A thief who steals corporate secrets through the use of dream-sharing technology...",
    "Language": "English, Japanese, French",
    "Country": "United States, United Kingdom",
    "Poster": "https://m.media-amazon.com/images/M/inception.jpg",
    "imdbRating": "8.8",
    "imdbID": "tt1375666",
    "Type": "movie",
    "Response": "True",
}

# GET /?t=Obscure (fiche sans affiche ni realisateur)
OMDB_NO_POSTER_RESPONSE = {
    "Title": "Obscure Short",
    "Year": "1999",
    "Genre": "Short",
    "Director": "N/A",
    "Poster": "N/A",
    "imdbID": "tt0000001",
    "Type": "movie",
    "Response": "True",
}

# GET /?t=Sherlock (serie, annee sous forme d'intervalle)
OMDB_SERIES_RESPONSE = {
    "Title": "Sherlock",
    "Year": "2010–2017",
    "Genre": "Crime, Drama, Mystery",
    "Director": "N/A",
    "Poster": "https://m.media-amazon.com/images/M/sherlock.jpg",
    "imdbID": "tt1475582",
    "Type": "series",
    "Response": "True",
}

# GET /?s=5051889004455
OMDB_SEARCH_RESPONSE = {
    "Search": [
        {
            "Title": "The Matrix",
            "Year": "1999",
            "imdbID": "tt0133093",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/matrix.jpg",
        },
        {
            "Title": "The Matrix Reloaded",
            "Year": "2003",
            "imdbID": "tt0234215",
            "Type": "movie",
            "Poster": "N/A",
        },
    ],
    "totalResults": "2",
    "Response": "True",
}

# GET /?i=tt0133093
OMDB_MATRIX_DETAILS_RESPONSE = {
    "Title": "The Matrix",
    "Year": "1999",
    "Genre": "Action, Sci-Fi",
    "Director": "Lana Wachowski, Lilly Wachowski",
    "Poster": "https://m.media-amazon.com/images/M/matrix.jpg",
    "imdbID": "tt0133093",
    "Type": "movie",
    "Response": "True",
}

OMDB_NOT_FOUND_RESPONSE = {"Response": "False", "Error": "Movie not found!"}

OMDB_INVALID_KEY_RESPONSE = {"Response": "False", "Error": "Invalid API key!"}

OMDB_TOO_MANY_RESULTS_RESPONSE = {"Response": "False", "Error": "Too many results."}

OMDB_SERVER_ERROR_RESPONSE = {"Response": "False", "Error": "Something went wrong."}
