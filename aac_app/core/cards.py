# aac_app/core/cards.py

# -------------------------------
# Default vocabulary
# -------------------------------

# Navigation column
COLUMN1 = [
    ("Back", "default-nav-images/back.png"),
    ("Core", "default-nav-images/core.png"),
    ("Social", "default-nav-images/social.png"),
    ("Vocabulary", "default-nav-images/vocabulary.png"),
    ("Keyboard", "default-nav-images/keyboard.png"),
    ("Personal", "default-nav-images/personal.png"),
]

# Gestalt column
COLUMN2 = [
    ("Let's", "default-gestalt-images/lets.png"),
    ("It's a", "default-gestalt-images/its_a.png"),
    ("Get the", "default-gestalt-images/get_the.png"),
    ("Don't", "default-gestalt-images/dont.png"),
    ("How about", "default-gestalt-images/how_about.png"),
    ("Help me", "default-gestalt-images/help_me.png"),
    ("", "default-core-images/plus.png"),
]

# Core words, 6 columns x 7 rows. Empty text marks an open slot.
GRID_WORDS = [
    "I", "want", "can", "do", "that", "no",
    "you", "go", "stop", "take", "this", "yes",
    "he", "open", "get", "help", "some", "more",
    "she", "give", "make", "put", "here", "in",
    "they", "tell", "is", "listen", "there", "out",
    "it", "find", "come", "drink", "up", "down",
    "", "", "eat", "sleep", "", "",
]

_GRID_IMAGE_NAMES = {"I": "i_1", "do": "do_1", "this": "this_1", "in": "in_1", "": "plus"}

GRID = [
    (word, f"default-core-images/{_GRID_IMAGE_NAMES.get(word, word)}.png")
    for word in GRID_WORDS
]

GRID_COLUMNS = 6
