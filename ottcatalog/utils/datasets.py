"""
Jeux de donnees embarques.

- CURATED_TITLES : selection curatee (titre, annee, IMDb, genres)
- TRENDING_FALLBACK : titres "actuellement tendance" servis quand FlixPatrol
  est injoignable
- MOCK_TITLES : items factices garantissant un catalogue jamais vide
"""

from ottcatalog.core.value_objects.content_type import ContentType

MOVIE = ContentType.MOVIE
SERIES = ContentType.SERIES

# (imdb_id, titre, annee, type, genres)
CURATED_TITLES = (
    ("tt8178634", "RRR", 2022, MOVIE, ("Action", "Drama")),
    ("tt2631186", "Baahubali: The Beginning", 2015, MOVIE, ("Action", "Drama", "Fantasy")),
    ("tt4849438", "Baahubali 2: The Conclusion", 2017, MOVIE, ("Action", "Drama", "Fantasy")),
    ("tt7838252", "K.G.F: Chapter 1", 2018, MOVIE, ("Action", "Crime", "Drama")),
    ("tt10698680", "K.G.F: Chapter 2", 2022, MOVIE, ("Action", "Crime", "Drama")),
    ("tt9389998", "Pushpa: The Rise", 2021, MOVIE, ("Action", "Crime", "Drama")),
    ("tt9179430", "Vikram", 2022, MOVIE, ("Action", "Crime", "Thriller")),
    ("tt15097216", "Jai Bhim", 2021, MOVIE, ("Crime", "Drama", "Mystery")),
    ("tt3417422", "Drishyam", 2013, MOVIE, ("Crime", "Drama", "Thriller")),
    ("tt15327088", "Kantara", 2022, MOVIE, ("Action", "Adventure", "Drama")),
    ("tt4679210", "Premam", 2015, MOVIE, ("Comedy", "Drama", "Romance")),
    ("tt8413338", "Kumbalangi Nights", 2019, MOVIE, ("Comedy", "Drama", "Romance")),
    ("tt7019942", "Super Deluxe", 2019, MOVIE, ("Comedy", "Crime", "Drama")),
    ("tt7019842", "96", 2018, MOVIE, ("Drama", "Romance")),
    ("tt9477520", "Asuran", 2019, MOVIE, ("Action", "Drama")),
    ("tt10189514", "Soorarai Pottru", 2020, MOVIE, ("Drama",)),
    ("tt10579952", "Master", 2021, MOVIE, ("Action", "Thriller")),
    ("tt15354916", "Jailer", 2023, MOVIE, ("Action", "Comedy", "Crime")),
    ("tt15654328", "Leo", 2023, MOVIE, ("Action", "Crime", "Thriller")),
    ("tt13927994", "Salaar: Part 1 - Ceasefire", 2023, MOVIE, ("Action", "Crime", "Thriller")),
    ("tt7294534", "Arjun Reddy", 2017, MOVIE, ("Drama", "Romance")),
    ("tt2258337", "Eega", 2012, MOVIE, ("Action", "Comedy", "Fantasy")),
    ("tt7465992", "Mahanati", 2018, MOVIE, ("Biography", "Drama")),
    ("tt8948790", "Jersey", 2019, MOVIE, ("Drama", "Sport")),
    ("tt10438928", "Ala Vaikunthapurramuloo", 2020, MOVIE, ("Action", "Comedy", "Drama")),
    ("tt9544034", "The Family Man", 2019, SERIES, ("Action", "Comedy", "Drama", "Thriller")),
    ("tt12392504", "Scam 1992: The Harshad Mehta Story", 2020, SERIES, ("Biography", "Crime", "Drama")),
    ("tt6077448", "Sacred Games", 2018, SERIES, ("Action", "Crime", "Drama", "Thriller")),
    ("tt6473300", "Mirzapur", 2018, SERIES, ("Action", "Crime", "Thriller")),
    ("tt12004706", "Panchayat", 2020, SERIES, ("Comedy", "Drama")),
    ("tt9680440", "Paatal Lok", 2020, SERIES, ("Action", "Crime", "Thriller")),
    ("tt15516546", "Suzhal: The Vortex", 2022, SERIES, ("Crime", "Drama", "Mystery", "Thriller")),
    ("tt9432978", "Kota Factory", 2019, SERIES, ("Comedy", "Drama")),
    ("tt14392248", "Aspirants", 2021, SERIES, ("Drama",)),
)

# (titre, annee) par type, ordre du classement
TRENDING_FALLBACK = {
    MOVIE: (
        ("Kalki 2898 AD", 2024),
        ("Maharaja", 2024),
        ("Manjummel Boys", 2024),
        ("Laapataa Ladies", 2024),
        ("Fighter", 2024),
        ("Animal", 2023),
        ("Jawan", 2023),
        ("Leo", 2023),
        ("12th Fail", 2023),
        ("Aavesham", 2024),
    ),
    SERIES: (
        ("Heeramandi: The Diamond Bazaar", 2024),
        ("Kota Factory", 2019),
        ("Panchayat", 2020),
        ("Mirzapur", 2018),
        ("The Family Man", 2019),
        ("Scam 2003: The Telgi Story", 2023),
        ("Kaala Paani", 2023),
        ("The Railway Men", 2023),
        ("Made in Heaven", 2019),
        ("Farzi", 2023),
    ),
}

# (suffixe, nom, description, genres)
MOCK_TITLES = (
    ("1", "Test {label} 1", "This is a test item. The actual scraper failed to fetch data.", ("Test",)),
    ("2", "Test {label} 2", "Another test item to verify catalog display.", ("Test", "Demo")),
)
MOCK_RELEASE_INFO = "2023"
MOCK_LINK_URL = "https://example.com"
