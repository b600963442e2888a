"""
Literal rule data for English inflection.

Rules are (pattern, replacement) pairs. A plain string pattern must match the
whole word; a compiled pattern may match anywhere (usually a suffix).
Replacements use $0 for the whole match and $1..$9 for capture groups.

Order matters: rules are tried from the LAST entry back to the first, so the
more specific rules sit at the bottom of each list.
"""

import re

_I = re.IGNORECASE

# (singular, plural) pairs that no general rule can derive
IRREGULAR_PAIRS = (
    # Pronouns
    ("I", "we"),
    ("me", "us"),
    ("he", "they"),
    ("she", "they"),
    ("them", "them"),
    ("myself", "ourselves"),
    ("yourself", "yourselves"),
    ("itself", "themselves"),
    ("herself", "themselves"),
    ("himself", "themselves"),
    ("themself", "themselves"),
    # Verbs and determiners
    ("is", "are"),
    ("was", "were"),
    ("has", "have"),
    ("this", "these"),
    ("that", "those"),
    ("my", "our"),
    ("its", "their"),
    ("his", "their"),
    ("her", "their"),
    # Words ending with a consonant and `o`
    ("echo", "echoes"),
    ("dingo", "dingoes"),
    ("volcano", "volcanoes"),
    ("tornado", "tornadoes"),
    ("torpedo", "torpedoes"),
    # Ends with `us`
    ("genus", "genera"),
    ("viscus", "viscera"),
    # Ends with `ma`
    ("stigma", "stigmata"),
    ("stoma", "stomata"),
    ("dogma", "dogmata"),
    ("lemma", "lemmata"),
    ("schema", "schemata"),
    ("anathema", "anathemata"),
    # Other
    ("ox", "oxen"),
    ("axe", "axes"),
    ("die", "dice"),
    ("yes", "yeses"),
    ("foot", "feet"),
    ("eave", "eaves"),
    ("goose", "geese"),
    ("tooth", "teeth"),
    ("quiz", "quizzes"),
    ("human", "humans"),
    ("proof", "proofs"),
    ("carve", "carves"),
    ("valve", "valves"),
    ("looey", "looies"),
    ("thief", "thieves"),
    ("groove", "grooves"),
    ("pickaxe", "pickaxes"),
    ("passerby", "passersby"),
    ("canvas", "canvases"),
)

PLURAL_RULES = (
    (re.compile(r"s?$", _I), "s"),
    (re.compile(r"[^\x00-\x7f]$", _I), "$0"),
    (re.compile(r"([^aeiou]ese)$", _I), "$1"),
    (re.compile(r"(ax|test)is$", _I), "$1es"),
    (re.compile(r"(alias|[^aou]us|t[lm]as|gas|ris)$", _I), "$1es"),
    (re.compile(r"(e[mn]u)s?$", _I), "$1s"),
    (re.compile(r"([^l]ias|[aeiou]las|[ejzr]as|[iu]am)$", _I), "$1"),
    (
        re.compile(
            r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$",
            _I,
        ),
        "$1i",
    ),
    (re.compile(r"(alumn|alg|vertebr)(?:a|ae)$", _I), "$1ae"),
    (re.compile(r"(seraph|cherub)(?:im)?$", _I), "$1im"),
    (re.compile(r"(her|at|gr)o$", _I), "$1oes"),
    (
        re.compile(
            r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr|errat|ov|symposi|curricul|automat|quor)(?:a|um)$",
            _I,
        ),
        "$1a",
    ),
    (
        re.compile(
            r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ|prolegomen|hedr|automat)(?:a|on)$",
            _I,
        ),
        "$1a",
    ),
    (re.compile(r"sis$", _I), "ses"),
    (re.compile(r"(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$", _I), "$1$2ves"),
    (re.compile(r"([^aeiouy]|qu)y$", _I), "$1ies"),
    (re.compile(r"([^ch][ieo][ln])ey$", _I), "$1ies"),
    (re.compile(r"(x|ch|ss|sh|zz)$", _I), "$1es"),
    (re.compile(r"(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$", _I), "$1ices"),
    (re.compile(r"\b((?:tit)?m|l)(?:ice|ouse)$", _I), "$1ice"),
    (re.compile(r"(pe)(?:rson|ople)$", _I), "$1ople"),
    (re.compile(r"(child)(?:ren)?$", _I), "$1ren"),
    (re.compile(r"eaux$", _I), "$0"),
    (re.compile(r"m[ae]n$", _I), "men"),
    ("thou", "you"),
)

SINGULAR_RULES = (
    (re.compile(r"s$", _I), ""),
    (re.compile(r"(ss)$", _I), "$1"),
    (
        re.compile(r"(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$", _I),
        "$1fe",
    ),
    (re.compile(r"(ar|(?:wo|[ae])l|[eo][ao])ves$", _I), "$1f"),
    (re.compile(r"ies$", _I), "y"),
    (
        re.compile(r"(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$", _I),
        "$1ie",
    ),
    (
        re.compile(
            r"\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp|junk|vegg|(?:pork)?p|charl|calor|cut)ies$",
            _I,
        ),
        "$1ie",
    ),
    (re.compile(r"\b(mon|smil)ies$", _I), "$1ey"),
    (re.compile(r"\b((?:tit)?m|l)ice$", _I), "$1ouse"),
    (re.compile(r"(seraph|cherub)im$", _I), "$1"),
    (
        re.compile(
            r"(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o|[aeiou]ris)(?:es)?$",
            _I,
        ),
        "$1",
    ),
    (
        re.compile(r"(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)(?:sis|ses)$", _I),
        "$1sis",
    ),
    (re.compile(r"(movie|twelve|abuse|e[mn]u)s$", _I), "$1"),
    (re.compile(r"(test)(?:is|es)$", _I), "$1is"),
    (
        re.compile(
            r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$",
            _I,
        ),
        "$1us",
    ),
    (
        re.compile(
            r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr|errat|ov|symposi|curricul|quor)a$",
            _I,
        ),
        "$1um",
    ),
    (
        re.compile(
            r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ|prolegomen|hedr|automat)a$",
            _I,
        ),
        "$1on",
    ),
    (re.compile(r"(alumn|alg|vertebr)ae$", _I), "$1a"),
    (re.compile(r"(cod|mur|sil|vert|ind)ices$", _I), "$1ex"),
    (re.compile(r"(matr|append)ices$", _I), "$1ix"),
    (re.compile(r"(pe)(rson|ople)$", _I), "$1rson"),
    (re.compile(r"(child)ren$", _I), "$1"),
    (re.compile(r"(eau)x?$", _I), "$1"),
    (re.compile(r"men$", _I), "man"),
)

# Words with no distinct plural. Compiled entries become identity rules.
UNCOUNTABLE_WORDS = (
    "adulthood",
    "advice",
    "agenda",
    "aid",
    "aircraft",
    "alcohol",
    "ammo",
    "analytics",
    "anime",
    "athletics",
    "audio",
    "bison",
    "blood",
    "bream",
    "buffalo",
    "butter",
    "carp",
    "cash",
    "chassis",
    "chess",
    "clothing",
    "cod",
    "commerce",
    "cooperation",
    "corps",
    "debris",
    "diabetes",
    "digestion",
    "elk",
    "energy",
    "equipment",
    "excretion",
    "expertise",
    "firmware",
    "flounder",
    "fun",
    "gallows",
    "garbage",
    "graffiti",
    "hardware",
    "headquarters",
    "health",
    "herpes",
    "highjinks",
    "homework",
    "housework",
    "information",
    "jeans",
    "justice",
    "kudos",
    "labour",
    "literature",
    "machinery",
    "mackerel",
    "mail",
    "media",
    "mews",
    "moose",
    "music",
    "mud",
    "manga",
    "news",
    "only",
    "personnel",
    "pike",
    "plankton",
    "pliers",
    "police",
    "pollution",
    "premises",
    "rain",
    "research",
    "rice",
    "salmon",
    "scissors",
    "series",
    "sewage",
    "shambles",
    "shrimp",
    "software",
    "staff",
    "swine",
    "tennis",
    "traffic",
    "transportation",
    "trout",
    "tuna",
    "wealth",
    "welfare",
    "whiting",
    "wildebeest",
    "wildlife",
    "you",
    re.compile(r"pok[eé]mon$", _I),
    re.compile(r"[^aeiou]ese$", _I),  # "chinese", "japanese"
    re.compile(r"deer$", _I),  # "deer", "reindeer"
    re.compile(r"fish$", _I),  # "fish", "blowfish", "angelfish"
    re.compile(r"measles$", _I),
    re.compile(r"o[iu]s$", _I),  # "carnivorous"
    re.compile(r"pox$", _I),  # "chickpox", "smallpox"
    re.compile(r"sheep$", _I),
)
