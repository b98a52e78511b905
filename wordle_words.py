"""
Word lists for Terminal Wordle.

ANSWERS holds the words a session may pick as its target. EXTRA_GUESSES holds
further words the player may type as a guess but which are never chosen as
the answer. Both lists are plain data; WordSource wraps them for the game.
"""

import logging
import random

logger = logging.getLogger(__name__)

WORD_LENGTH = 5

# ---------------------------------------------------------------------------
# Answer list — possible target words (all lowercase)
# ---------------------------------------------------------------------------
ANSWERS = [
    "about", "above", "abuse", "actor", "acute", "admit", "adopt", "adult",
    "after", "again", "agent", "agree", "ahead", "alarm", "album", "alert",
    "alike", "alive", "allow", "alone", "along", "alter", "among", "angel",
    "anger", "angle", "angry", "anime", "ankle", "apart", "apple", "apply",
    "arena", "argue", "arise", "armor", "array", "aside", "asset", "audio",
    "avoid", "award", "aware", "badly", "baker", "bases", "basic", "basis",
    "beach", "began", "begin", "being", "below", "bench", "berry", "birth",
    "black", "blade", "blame", "bland", "blank", "blast", "blaze", "bleed",
    "blend", "bless", "blind", "block", "blood", "bloom", "blown", "board",
    "bonus", "boost", "bound", "brain", "brand", "brave", "bread", "break",
    "breed", "brick", "bride", "brief", "bring", "broad", "broke", "brown",
    "brush", "build", "bunch", "burst", "buyer", "cabin", "candy", "carry",
    "catch", "cause", "chain", "chair", "chaos", "charm", "chart", "chase",
    "cheap", "check", "cheek", "chess", "chest", "chief", "child", "china",
    "chunk", "claim", "clash", "class", "clean", "clear", "click", "cliff",
    "climb", "cling", "clock", "clone", "close", "cloth", "cloud", "coach",
    "coast", "color", "comet", "comic", "coral", "couch", "could", "count",
    "court", "cover", "crack", "craft", "crane", "crash", "crazy", "cream",
    "crime", "cross", "crowd", "crown", "cruel", "crush", "curve", "cycle",
    "daily", "dance", "dealt", "debug", "decay", "delay", "delta", "dense",
    "depth", "derby", "devil", "dirty", "donor", "doubt", "draft", "drain",
    "drama", "drank", "drawn", "dream", "dress", "dried", "drift", "drink",
    "drive", "drove", "drunk", "dying", "eager", "early", "earth", "eight",
    "elect", "elite", "email", "empty", "enemy", "enjoy", "enter", "equal",
    "error", "essay", "event", "every", "exact", "exile", "exist", "extra",
    "faint", "fairy", "faith", "false", "fancy", "fatal", "fault", "feast",
    "fiber", "field", "fifth", "fifty", "fight", "final", "first", "fixed",
    "flame", "flash", "flask", "flesh", "float", "flood", "floor", "flour",
    "fluid", "flush", "flute", "focus", "force", "forge", "forth", "forum",
    "found", "frame", "frank", "fraud", "fresh", "front", "frost", "fruit",
    "fully", "funny", "ghost", "giant", "given", "gland", "glass", "globe",
    "gloom", "glory", "glove", "going", "grace", "grade", "grain", "grand",
    "grant", "grape", "graph", "grasp", "grass", "grave", "great", "green",
    "greet", "grief", "grill", "grind", "groan", "gross", "group", "grove",
    "grown", "guard", "guess", "guest", "guide", "guild", "guilt", "habit",
    "happy", "harsh", "haste", "haven", "heart", "heavy", "hence", "herbs",
    "honey", "honor", "horse", "hotel", "house", "human", "humor", "hurry",
    "ideal", "image", "imply", "index", "inner", "input", "irony", "issue",
    "ivory", "joint", "joker", "judge", "juice", "knack", "kneel", "knife",
    "knock", "known", "label", "large", "laser", "later", "laugh", "layer",
    "learn", "lease", "least", "leave", "legal", "lemon", "level", "light",
    "limit", "linen", "liver", "local", "lodge", "logic", "login", "loose",
    "lover", "lower", "loyal", "lunar", "lunch", "lying", "magic", "major",
    "maker", "manor", "maple", "march", "match", "maybe", "mayor", "meant",
    "media", "mercy", "merit", "metal", "meter", "midst", "might", "minor",
    "minus", "mixed", "model", "money", "month", "moral", "motor", "mount",
    "mouse", "mouth", "moved", "movie", "muddy", "music", "naval", "nerve",
    "never", "newly", "night", "noble", "noise", "north", "noted", "novel",
    "nurse", "nylon", "occur", "ocean", "offer", "often", "olive", "onset",
    "opera", "orbit", "order", "organ", "other", "ought", "outer", "owner",
    "oxide", "ozone", "paint", "panel", "panic", "paper", "patch", "pause",
    "peace", "pearl", "penny", "phase", "phone", "photo", "piano", "piece",
    "pilot", "pinch", "pitch", "pixel", "place", "plain", "plane", "plant",
    "plate", "plaza", "plead", "pluck", "plumb", "plume", "point", "porch",
    "poser", "posit", "pound", "power", "press", "price", "pride", "prime",
    "print", "prior", "prize", "prone", "proof", "prose", "proud", "prove",
    "psalm", "pulse", "punch", "pupil", "purse", "queen", "query", "quest",
    "queue", "quick", "quiet", "quote", "radar", "radio", "raise", "rally",
    "range", "rapid", "ratio", "reach", "react", "ready", "realm", "rebel",
    "reign", "relax", "reply", "rider", "ridge", "rifle", "right", "rigid",
    "rival", "river", "robin", "robot", "rocky", "roger", "roman", "rouge",
    "rough", "round", "route", "royal", "rural", "sadly", "saint", "salad",
    "scale", "scene", "scope", "score", "sense", "serve", "setup", "seven",
    "shade", "shaft", "shake", "shall", "shame", "shape", "share", "sharp",
    "shear", "sheep", "sheer", "sheet", "shelf", "shell", "shift", "shine",
    "shirt", "shock", "shore", "short", "shout", "sight", "sigma", "since",
    "sixth", "sixty", "sized", "skill", "skull", "slave", "sleep", "slide",
    "slope", "small", "smart", "smell", "smile", "smoke", "snake", "solar",
    "solid", "solve", "sorry", "sound", "south", "space", "spare", "spark",
    "speak", "speed", "spend", "spent", "spice", "spine", "spite", "split",
    "spoke", "spoon", "sport", "spray", "squad", "stack", "staff", "stage",
    "stain", "stake", "stale", "stall", "stamp", "stand", "stare", "stark",
    "start", "state", "stays", "steam", "steel", "steep", "steer", "stern",
    "stick", "stiff", "still", "stock", "stone", "stood", "store", "storm",
    "story", "stout", "stove", "strap", "straw", "strip", "stuck", "study",
    "stuff", "style", "sugar", "suite", "sunny", "super", "surge", "swamp",
    "swear", "sweet", "swept", "swift", "swing", "sword", "swore", "sworn",
    "syrup", "table", "taste", "teach", "tease", "tempo", "tenor", "tense",
    "terms", "theft", "theme", "there", "thick", "thing", "think", "third",
    "those", "three", "threw", "throw", "thumb", "tiger", "tight", "timer",
    "tired", "title", "today", "token", "topic", "total", "touch", "tough",
    "towel", "tower", "toxic", "trace", "track", "trade", "trail", "train",
    "trait", "trash", "treat", "trend", "trial", "tribe", "trick", "tried",
    "troop", "truck", "truly", "trump", "trunk", "trust", "truth", "tulip",
    "tumor", "tweed", "twice", "twist", "tying", "ultra", "uncle", "under",
    "union", "unity", "until", "upper", "upset", "urban", "usage", "usual",
    "utter", "valid", "value", "vapor", "vault", "verse", "video", "vigor",
    "vinyl", "viral", "virus", "visit", "vista", "vital", "vivid", "vocal",
    "vodka", "voice", "voter", "wagon", "waste", "watch", "water", "weary",
    "weave", "wedge", "weird", "wheat", "wheel", "where", "which", "while",
    "white", "whole", "whose", "width", "witch", "woman", "women", "world",
    "worry", "worse", "worst", "worth", "would", "wound", "wrath", "write",
    "wrong", "wrote", "yacht", "yield", "young", "youth", "zebra",
]

# ---------------------------------------------------------------------------
# Extra legal guesses — accepted as guesses, never picked as the answer
# ---------------------------------------------------------------------------
EXTRA_GUESSES = [
    "abbey", "abhor", "abide", "abode", "abort", "abyss", "acorn", "acrid",
    "adage", "adept", "adieu", "admin", "adore", "adorn", "aegis", "affix",
    "afire", "afoot", "afoul", "agile", "aging", "aglow", "agony", "aisle",
    "algae", "alias", "alibi", "alien", "align", "allay", "alley", "allot",
    "alloy", "aloft", "aloof", "aloud", "alpha", "altar", "amass", "amaze",
    "amber", "amble", "amend", "amiss", "ample", "amuse", "annex", "annoy",
    "antic", "anvil", "aorta", "apron", "aptly", "arbor", "ardor", "argon",
    "aroma", "arrow", "arson", "artsy", "ascot", "ashen", "askew", "atoll",
    "atone", "attic", "audit", "augur", "aunty", "avail", "avert", "awake",
    "awful", "axiom", "azure", "bacon", "badge", "bagel", "baggy", "balmy",
    "banal", "banjo", "barge", "baron", "basil", "baste", "batch", "bathe",
    "baton", "bawdy", "bayou", "beady", "beard", "beast", "beefy", "beget",
    "beige", "belch", "belly", "beret", "bicep", "bilge", "binge", "bingo",
    "birch", "bison", "bitty", "blare", "bleak", "bleat", "blimp", "bliss",
    "bloat", "blond", "bluff", "blunt", "blurb", "blurt", "blush", "boast",
    "bongo", "booth", "booty", "booze", "bossy", "botch", "bough", "boxer",
    "brace", "braid", "brash", "brass", "brawl", "brawn", "briar", "brine",
    "brink", "brisk", "broil", "brook", "broom", "broth", "brute", "budge",
    "buggy", "bugle", "bulge", "bulky", "bully", "bunny", "burly", "burnt",
    "bushy", "butte", "cacao", "cache", "cadet", "camel", "cameo", "canal",
    "canny", "canoe", "caper", "carat", "cargo", "carol", "carve", "caste",
    "cater", "cease", "cedar", "chafe", "chalk", "champ", "chant", "chard",
    "cheer", "chick", "chide", "chili", "chill", "chime", "chirp", "choir",
    "choke", "chord", "chore", "chose", "chuck", "churn", "cider", "cigar",
    "cinch", "circa", "civic", "civil", "clamp", "clang", "clank", "clasp",
    "clerk", "cloak", "clout", "clove", "clown", "cluck", "clump", "clung",
    "cobra", "cocoa", "colon", "comfy", "comma", "condo", "conic", "copse",
    "corny", "cough", "coupe", "coven", "covet", "cower", "crass", "crate",
    "crave", "crawl", "creak", "creed", "creek", "creep", "crept", "cress",
    "crest", "crick", "cried", "crimp", "crisp", "croak", "crock", "crone",
    "crony", "crook", "croon", "crude", "crumb", "crust", "crypt", "cubic",
    "cumin", "curio", "curly", "curry", "curse", "cynic", "daddy", "dairy",
    "daisy", "dandy", "datum", "daunt", "decal", "decor", "decoy", "decry",
    "defer", "deign", "deity", "delve", "demon", "denim", "depot", "deter",
    "detox", "deuce", "diary", "dicey", "digit", "diner", "dingo", "dingy",
    "dirge", "disco", "ditch", "ditto", "ditty", "diver", "dizzy", "dodge",
    "dogma", "dolly", "dowdy", "dowel", "dowry", "dozen", "drake", "drape",
    "drawl", "dread", "droit", "droll", "drool", "droop", "dross", "drown",
    "druid", "dryer", "dully", "dummy", "dumpy", "dunce", "dusky", "dusty",
    "dwarf", "dwell", "eagle", "easel", "eaten", "eater", "ebony", "eclat",
    "edict", "eerie", "egret", "eject", "elbow", "elder", "elegy", "elfin",
    "elide", "elude", "embed", "ember", "emcee", "endow", "ensue", "envoy",
    "epoch", "epoxy", "equip", "erase", "erode", "erupt", "ester", "ethic",
    "evade", "evoke", "exalt", "excel", "exert", "expel", "extol", "exult",
    "fable", "facet", "famed", "farce", "fatty", "feign", "feint", "fella",
    "felon", "femur", "fence", "feral", "ferry", "fetch", "fetid", "fetus",
    "fever", "fewer", "fiend", "fiery", "filly", "filth", "finch", "finer",
    "fishy", "flack", "flail", "flair", "flake", "flank", "flare", "flick",
    "flier", "fling", "flint", "flirt", "flock", "flora", "floss", "flout",
    "flown", "flunk", "foamy", "foggy", "folly", "foray", "forgo", "forte",
    "forty", "foyer", "frail", "freak", "friar", "frill", "frisk", "fritz",
    "frock", "froth", "frown", "froze", "fudge", "fugue", "fungi", "furor",
    "fussy", "fuzzy", "gaffe", "gaily", "gamer", "gamma", "gamut", "gaudy",
    "gauge", "gaunt", "gauze", "gavel", "gawky", "gecko", "geeky", "genie",
    "genre", "girth", "gizmo", "glare", "glaze", "gleam", "glean", "glide",
    "glint", "gloat", "glyph", "gnash", "gnome", "godly", "golem", "golly",
    "goner", "goody", "gooey", "goofy", "goose", "gorge", "gouge", "gourd",
    "gowns", "grate", "gravy", "graze", "greed", "grimy", "gripe", "grope",
    "grout", "growl", "gruel", "gruff", "grunt", "guano", "guava", "gully",
    "gumbo", "gummy", "guppy", "gusto", "gusty", "hairy", "halve", "handy",
    "hardy", "harem", "harpy", "hasty", "hatch", "hater", "haunt", "hazel",
    "heady", "heath", "heave", "hedge", "hefty", "heist", "helix", "hello",
    "heron", "hilly", "hinge", "hippo", "hitch", "hoard", "hobby", "hoist",
    "holly", "homer", "horde", "hound", "howdy", "humid", "humph", "humus",
    "hunch", "husky", "hutch", "hydro", "hyena", "hyper", "icily", "icing",
    "idiom", "idler", "idyll", "igloo", "iliac", "imbue", "impel", "inane",
    "inbox", "incur", "inept", "inert", "infer", "ingot", "inlay", "inlet",
    "inter", "intro", "ionic", "irate", "islet", "itchy", "jaunt", "jazzy",
    "jelly", "jerky", "jetty", "jewel", "jiffy", "jolly", "joust", "jumbo",
    "jumpy", "junta", "juror", "kappa", "karma", "kayak", "kebab", "khaki",
    "kiosk", "kitty", "knave", "knead", "knelt", "knoll", "koala", "kudos",
    "lager", "lance", "lanky", "lapel", "lapse", "larva", "lasso", "latch",
    "lathe", "latte", "leafy", "leaky", "leant", "leapt", "ledge", "leech",
    "leery", "lefty", "leggy", "lemur", "leper", "libel", "lilac", "limbo",
    "liner", "lingo", "lipid", "lithe", "livid", "llama", "loamy", "loath",
    "lobby", "lofty", "loopy", "lorry", "louse", "lousy", "lowly", "lucid",
    "lucky", "lumen", "lumpy", "lupus", "lurch", "lusty", "lyric", "macaw",
    "macho", "macro", "madam", "mafia", "magma", "mange", "mango", "mania",
    "manic", "manly", "marry", "marsh", "mason", "masse", "matey", "mauve",
    "maxim", "mealy", "meaty", "medal", "melee", "melon", "messy", "midge",
    "mimic", "mince", "miner", "minty", "mirth", "miser", "mocha", "modal",
    "modem", "mogul", "moist", "molar", "moldy", "moody", "moose", "morph",
    "mossy", "motel", "motif", "motto", "moult", "mound", "mourn", "mousy",
    "mower", "mucky", "mucus", "mulch", "mummy", "munch", "mural", "murky",
    "mushy", "musky", "musty", "myrrh", "nadir", "naive", "nanny", "nasal",
    "nasty", "natal", "navel", "needy", "neigh", "nerdy", "newer", "nicer",
    "niche", "niece", "ninja", "ninth", "nobly", "nomad", "notch", "nudge",
    "nutty", "nymph", "oaken", "obese", "octal", "octet", "odder", "offal",
    "ombre", "omega", "onion", "opine", "opium", "optic", "orate", "otter",
    "ounce", "outdo", "outgo", "ovary", "ovate", "overt", "ovine", "owing",
    "paddy", "pagan", "palsy", "pansy", "papal", "parer", "parka", "parry",
    "parse", "pasta", "paste", "pasty", "patio", "patsy", "patty", "payee",
    "payer", "pecan", "pedal", "penal", "pence", "peony", "perch", "peril",
    "perky", "pesky", "pesto", "petal", "petty", "phony", "picky", "piety",
    "piggy", "pinky", "pinto", "piper", "pique", "pithy", "pivot", "pizza",
    "plaid", "plank", "plier", "plunk", "poach", "poise", "poker", "polar",
    "polka", "polyp", "pooch", "poppy", "posse", "potty", "pouch", "poult",
    "pouty", "prank", "prawn", "preen", "prick", "primo", "primp", "privy",
    "probe", "prong", "prowl", "proxy", "prude", "prune", "pudgy", "puffy",
    "pulpy", "puppy", "puree", "purge", "pushy", "putty", "quack", "quail",
    "qualm", "quart", "quash", "quasi", "quell", "quill", "quilt", "quirk",
    "quota", "rabbi", "rabid", "racer", "radii", "rainy", "ramen", "ranch",
    "randy", "rarer", "raspy", "ratty", "raven", "rayon", "razor", "rebar",
    "rebus", "rebut", "recap", "recur", "refer", "regal", "rehab", "relay",
    "relic", "remit", "renew", "repay", "repel", "rerun", "resin", "retch",
    "retro", "retry", "revel", "revue", "rhino", "rhyme", "rinse", "ripen",
    "riper", "risen", "riser", "risky", "rivet", "roach", "roast", "rogue",
    "roomy", "roost", "rotor", "rowdy", "rower", "ruddy", "ruder", "rugby",
    "ruler", "rumba", "rumor", "rupee", "rusty", "sable", "saggy", "salon",
    "salsa", "salty", "salve", "salvo", "sandy", "saner", "sappy", "sassy",
    "satin", "satyr", "sauce", "saucy", "sauna", "saute", "savor", "savvy",
    "scald", "scalp", "scaly", "scamp", "scant", "scare", "scarf", "scary",
    "scoff", "scold", "scone", "scoop", "scorn", "scour", "scout", "scowl",
    "scram", "scrap", "scree", "screw", "scrub", "scrum", "sedan", "seedy",
    "segue", "seize", "sepia", "serif", "serum", "sever", "sewer", "shack",
    "shady", "shaky", "shale", "shalt", "shank", "shard", "shawl", "sheik",
    "shied", "shill", "shiny", "shire", "shirk", "shone", "shook", "shorn",
    "showy", "shrew", "shrub", "shrug", "shuck", "shunt", "shush", "shyly",
    "siege", "sieve", "silky", "silly", "sinew", "singe", "siren", "skate",
    "skier", "skiff", "skimp", "skirt", "skulk", "slack", "slain", "slang",
    "slant", "slash", "sleek", "sleet", "slept", "slice", "slick", "slime",
    "slimy", "sling", "slink", "slosh", "sloth", "slump", "slung", "slunk",
    "slurp", "slush", "slyly", "smack", "smash", "smear", "smelt", "smirk",
    "smite", "smith", "smock", "smoky", "snack", "snail", "snare", "snarl",
    "sneak", "sneer", "snide", "sniff", "snipe", "snoop", "snore", "snort",
    "snout", "snowy", "snuck", "snuff", "soapy", "sober", "soggy", "sonar",
    "sonic", "sooth", "sooty", "soupy", "spade", "spank", "spasm", "spawn",
    "spear", "speck", "spelt", "spied", "spiel", "spike", "spiky", "spill",
    "spilt", "spiny", "spire", "splat", "spoil", "spoof", "spook", "spool",
    "spore", "spout", "spree", "sprig", "spunk", "spurn", "spurt", "squat",
    "squib", "stair", "stalk", "stank", "stash", "stead", "steak", "steed",
    "stein", "sting", "stink", "stint", "stoic", "stoke", "stole", "stomp",
    "stony", "stool", "stoop", "stork", "strut", "stump", "stung", "stunk",
    "stunt", "suave", "sulky", "sully", "sumac", "surer", "surly", "sushi",
    "swami", "swarm", "swash", "swath", "swell", "swill", "swine", "swirl",
    "swoon", "swoop", "synod", "tabby", "taboo", "tacit", "tacky", "taffy",
    "taint", "taken", "talon", "tamer", "tango", "tangy", "taper", "tapir",
    "tardy", "tarot", "taunt", "tawny", "teary", "teddy", "teeth", "tempt",
    "tenet", "tenth", "tepid", "terse", "testy", "thank", "thong", "thorn",
    "throb", "thyme", "tiara", "tibia", "tidal", "tilde", "timid", "tipsy",
    "titan", "toast", "toddy", "tonal", "tonic", "tooth", "topaz", "torch",
    "torso", "totem", "toxin", "tract", "trawl", "tread", "triad", "tripe",
    "trite", "troll", "trope", "trout", "trove", "truce", "tubal", "tuber",
    "tulle", "tummy", "tunic", "turbo", "tutor", "twang", "tweak", "twerp",
    "twine", "twirl", "udder", "ulcer", "umbra", "unbox", "uncut", "undid",
    "undue", "unfed", "unfit", "unify", "unlit", "unmet", "unset", "untie",
    "unwed", "unzip", "usher", "usurp", "vague", "valet", "valor", "valve",
    "vapid", "vaunt", "vegan", "venom", "venue", "verge", "verve", "vicar",
    "vigil", "villa", "viola", "viper", "visor", "vixen", "vogue", "voila",
    "vomit", "vouch", "vowel", "vying", "wacky", "wafer", "waltz", "warty",
    "washy", "waspy", "waver", "waxen", "weedy", "whack", "whale", "wharf",
    "whelp", "whiff", "whine", "whiny", "whirl", "whisk", "widen", "widow",
    "wield", "wimpy", "wince", "winch", "windy", "wiser", "wispy", "witty",
    "woken", "woody", "wooer", "woozy", "wordy", "wormy", "wrack", "wreak",
    "wreck", "wrest", "wring", "wrist", "wryly", "yearn", "yeast", "yummy",
    "zesty", "zonal",
]


class WordListError(ValueError):
    """Raised when a word list is missing, unreadable or malformed."""


def is_well_formed(word):
    """Return True if word is exactly WORD_LENGTH lowercase ASCII letters."""
    return (len(word) == WORD_LENGTH and word.isascii()
            and word.isalpha() and word.islower())


def validate_words(words, name):
    """Check every entry of a word list and return it as a tuple.

    Raises WordListError naming the first offending entry.
    """
    for index, word in enumerate(words):
        if not isinstance(word, str) or not is_well_formed(word):
            raise WordListError(
                f"{name}: entry {index} {word!r} is not a "
                f"{WORD_LENGTH}-letter lowercase word")
    return tuple(words)


def load_word_file(path):
    """Read a newline-separated word file.

    Blank lines and lines starting with '#' are skipped and entries are
    lowercased. Every remaining entry must be a well-formed word.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"cannot read word file {path}: {e}") from e

    words = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.append(line.lower())
    logger.info("loaded %d words from %s", len(words), path)
    return validate_words(words, str(path))


class WordSource:
    """Immutable pair of word lists: possible targets and legal guesses.

    Every target is also a legal guess. Pass a seed (or a random.Random)
    to make target draws reproducible.
    """

    def __init__(self, targets, guesses=None, rng=None):
        self._targets = validate_words(list(targets), "targets")
        if not self._targets:
            raise WordListError("targets: word list is empty")
        extra = validate_words(list(guesses or ()), "guesses")
        self._legal = frozenset(self._targets) | frozenset(extra)
        if rng is None or isinstance(rng, int):
            rng = random.Random(rng)
        self._rng = rng

    @classmethod
    def from_files(cls, targets_path, guesses_path=None, rng=None):
        """Build a source from word files instead of the built-in lists."""
        targets = load_word_file(targets_path)
        guesses = load_word_file(guesses_path) if guesses_path else ()
        return cls(targets, guesses, rng=rng)

    @property
    def targets(self):
        return self._targets

    def __len__(self):
        return len(self._legal)

    def random_target(self):
        """Pick a target uniformly at random."""
        return self._rng.choice(self._targets)

    def is_legal_guess(self, word):
        """Return True if word may be submitted as a guess."""
        return word in self._legal


def default_word_source(rng=None):
    """Word source built from ANSWERS and EXTRA_GUESSES."""
    return WordSource(ANSWERS, EXTRA_GUESSES, rng=rng)
