from typing import Final, List, Tuple

CSV_HEADER: Final[List[str]] = [
    "id","entry_id","name","set_name","number","condition",
    "market_price","offer_price","confidence","source_text"
]

# Price multiplier per condition label
CONDITION_MULTIPLIERS: Final = {
    "Mint": 1.1,
    "Near Mint": 1.0,
    "Lightly Played": 0.8,
    "Moderately Played": 0.6,
    "Heavily Played": 0.4,
}

# Buy-back offer as a share of market value at condition
OFFER_RATIO: Final[float] = 0.7

# Minimum catalog score for a fragment to count as matched
MATCH_MIN_SCORE: Final[int] = 2

# Catalog match points
SCORE_NAME: Final[int] = 3
SCORE_SET: Final[int] = 2
SCORE_NUMBER: Final[int] = 2
SCORE_NAME_WORD: Final[int] = 1

# Score at which a text match reports full confidence
SCORE_FULL_CONFIDENCE: Final[int] = 5

# OCR confidence weights
CONFIDENCE_BASE: Final[float] = 0.1
CONFIDENCE_NAME: Final[float] = 0.4
CONFIDENCE_KNOWN_NAME: Final[float] = 0.2
CONFIDENCE_SET: Final[float] = 0.3
CONFIDENCE_NUMBER: Final[float] = 0.2
CONFIDENCE_FRACTION_NUMBER: Final[float] = 0.1
CONFIDENCE_MAX: Final[float] = 1.0

KNOWN_CARD_NAMES: Final[Tuple[str, ...]] = (
    "charizard", "pikachu", "blastoise", "venusaur", "alakazam",
    "mewtwo", "mew", "dragonite", "gyarados", "machamp", "gengar",
    "articuno", "zapdos", "moltres",
)

NAME_SUFFIXES: Final[Tuple[str, ...]] = (
    "v", "vmax", "gx", "ex", "prime", "star", "delta", "crystal",
)

KNOWN_SET_NAMES: Final[Tuple[str, ...]] = (
    "base set", "jungle", "fossil", "team rocket", "gym", "neo", "e-card",
    "ex", "diamond", "pearl", "platinum", "black", "white", "xy", "sun",
    "moon", "sword", "shield", "brilliant", "astral", "lost", "silver",
    "paldea", "obsidian", "crown", "chilling", "battle", "vivid", "darkness",
    "rebel", "pokemon go", "champion's path",
)

RARITIES: Final[Tuple[str, ...]] = (
    "common", "uncommon", "rare", "ultra rare", "secret rare",
    "rainbow rare", "gold rare", "promo",
)
