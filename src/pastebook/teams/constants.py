"""Fixed vocabularies shared by the paste parser and formatter."""
from types import MappingProxyType

NATURES = (
    "Adamant", "Bashful", "Bold", "Brave", "Calm", "Careful", "Docile", "Gentle",
    "Hardy", "Hasty", "Impish", "Jolly", "Lax", "Lonely", "Mild", "Modest",
    "Naive", "Naughty", "Quiet", "Quirky", "Rash", "Relaxed", "Sassy", "Serious",
    "Timid",
)

GENDERS = ("M", "F")

FORMAT_OPTIONS = (
    "OU (Overused)",
    "Ubers",
    "UU (Underused)",
    "RU (Rarelyused)",
    "NU (Neverused)",
    "PU",
    "LC (Little Cup)",
    "Doubles OU",
    "VGC",
    "Monotype",
    "Random Battle",
    "Other",
)

GENERATION_OPTIONS = tuple(f"Gen {n}" for n in range(1, 10))

# Scanned in insertion order; the first label with any matching keyword wins.
FORMAT_KEYWORDS = MappingProxyType({
    "OU (Overused)": ("ou", "overused"),
    "Ubers": ("uber", "ubers"),
    "UU (Underused)": ("uu", "underused"),
    "RU (Rarelyused)": ("ru", "rarelyused"),
    "NU (Neverused)": ("nu", "neverused"),
    "PU": ("pu",),
    "LC (Little Cup)": ("lc", "little cup"),
    "Doubles OU": ("doubles", "doubles ou", "d ou"),
    "VGC": ("vgc",),
    "Monotype": ("monotype", "mono"),
    "Random Battle": ("random", "randbats"),
})

GENERATION_KEYWORDS = MappingProxyType({
    "Gen 1": ("gen 1", "gen i", "generation 1", "rby", "red", "blue", "yellow"),
    "Gen 2": ("gen 2", "gen ii", "generation 2", "gsc", "gold", "silver", "crystal"),
    "Gen 3": ("gen 3", "gen iii", "generation 3", "rse", "ruby", "sapphire", "emerald"),
    "Gen 4": ("gen 4", "gen iv", "generation 4", "dpp", "diamond", "pearl", "platinum"),
    "Gen 5": ("gen 5", "gen v", "generation 5", "bw", "bw2", "black", "white"),
    "Gen 6": ("gen 6", "gen vi", "generation 6", "xy", "oras"),
    "Gen 7": ("gen 7", "gen vii", "generation 7", "sm", "usum", "sun", "moon"),
    "Gen 8": ("gen 8", "gen viii", "generation 8", "swsh", "sword", "shield"),
    "Gen 9": ("gen 9", "gen ix", "generation 9", "sv", "scarlet", "violet"),
})

# Line prefixes that always belong to the open entry
ATTRIBUTE_PREFIXES = (
    "Ability:",
    "Level:",
    "EVs:",
    "IVs:",
    "Tera Type:",
    "Nature:",
)
