"""English inflection rule data.

Pattern rules are listed in registration order. Registration puts each rule
in front of the ones before it, so the LAST entry of each list is the first
one tried. Patterns are compiled case-insensitively.
"""

# (pattern, substitution) in registration order
PLURAL_RULES: list[tuple[str, str]] = [
    (r"$", "s"),
    (r"(s|ss|sh|ch|x|o)$", r"\1es"),
    (r"y$", "ies"),
    (r"(o|e)y$", r"\1ys"),
    (r"(octop|vir)us$", r"\1i"),
    (r"(alias|status)$", r"\1es"),
    (r"(bu)s$", r"\1ses"),
    (r"([ti])um$", r"\1a"),
    (r"sis$", "ses"),
    (r"(?:([^f])fe|([lr]|ea|oa)f)$", r"\1\2ves"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"([ml])ouse$", r"\1ice"),
    (r"^(ox)$", r"\1en"),
    (r"(quiz)$", r"\1zes"),
]

SINGULAR_RULES: list[tuple[str, str]] = [
    (r"s$", ""),
    (r"(bu|mis|kis)s$", r"\1s"),
    (r"([ti])a$", r"\1um"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses$", r"\1sis"),
    (r"(^analy)ses$", r"\1sis"),
    (r"([^f])ves$", r"\1fe"),
    (r"([lr]|ea|oa)ves$", r"\1f"),
    (r"ies$", "ie"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"(series)$", r"\1"),
    (r"(mov)ies$", r"\1ie"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"([ml])ice$", r"\1ouse"),
    (r"(bus)es$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(shoe)s$", r"\1"),
    (r"(cris|ax|test)es$", r"\1is"),
    (r"(octop|vir)i$", r"\1us"),
    (r"(alias|status)es$", r"\1"),
    (r"^(ox)en", r"\1"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"(matr)ices$", r"\1ix"),
    (r"(quiz)zes$", r"\1"),
]

# (singular, plural); later pairs overwrite earlier ones sharing a form
IRREGULARS: list[tuple[str, str]] = [
    ("i", "we"),
    ("person", "people"),
    ("man", "men"),
    ("child", "children"),
    ("move", "moves"),
    ("she", "they"),
    ("he", "they"),
    ("myself", "ourselves"),
    ("yourself", "yourselves"),
    ("himself", "themselves"),
    ("herself", "themselves"),
    ("themself", "themselves"),
    ("mine", "ours"),
    ("hers", "theirs"),
    ("his", "theirs"),
    ("its", "theirs"),
    ("theirs", "theirs"),
    ("sex", "sexes"),
    ("photo", "photos"),
    ("video", "videos"),
    ("rodeo", "rodeos"),
]

UNCOUNTABLES: list[str] = [
    "advice",
    "energy",
    "excretion",
    "digestion",
    "cooperation",
    "health",
    "justice",
    "jeans",
    "labour",
    "machinery",
    "equipment",
    "information",
    "pollution",
    "sewage",
    "paper",
    "money",
    "species",
    "series",
    "rain",
    "rice",
    "fish",
    "sheep",
    "moose",
    "deer",
    "bison",
    "proceedings",
    "shears",
    "pincers",
    "breeches",
    "hijinks",
    "clippers",
    "chassis",
    "innings",
    "elk",
    "rhinoceros",
    "swine",
    "you",
    "news",
]
