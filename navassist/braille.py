"""Grade 1 braille transliteration of status messages.

Letters map to single cells, digits to the number sign followed by the
letters a-j. Words in the table are looked up whole before falling back to
cell-by-cell lookup. Characters with no cell pass through unchanged.
"""

BLANK_CELL = "⠀"

BRAILLE_CELLS: dict[str, str] = {
    "a": "⠁", "b": "⠃", "c": "⠉", "d": "⠙", "e": "⠑", "f": "⠋", "g": "⠛", "h": "⠓",
    "i": "⠊", "j": "⠚", "k": "⠅", "l": "⠇", "m": "⠍", "n": "⠝", "o": "⠕", "p": "⠏",
    "q": "⠟", "r": "⠗", "s": "⠎", "t": "⠞", "u": "⠥", "v": "⠧", "w": "⠺", "x": "⠭",
    "y": "⠽", "z": "⠵",
    "1": "⠼⠁", "2": "⠼⠃", "3": "⠼⠉", "4": "⠼⠙", "5": "⠼⠑",
    "6": "⠼⠋", "7": "⠼⠛", "8": "⠼⠓", "9": "⠼⠊", "0": "⠼⠚",
    " ": BLANK_CELL, ".": "⠲", ",": "⠂", "!": "⠖", "?": "⠦", "-": "⠤",
}

BRAILLE_WORDS: dict[str, str] = {
    "obstacle": "⠕⠃⠎⠞⠁⠉⠇⠑",
    "clear": "⠉⠇⠑⠁⠗",
    "path": "⠏⠁⠞⠓",
    "warning": "⠺⠁⠗⠝⠊⠝⠛",
    "ahead": "⠁⠓⠑⠁⠙",
    "left": "⠇⠑⠋⠞",
    "right": "⠗⠊⠛⠓⠞",
    "front": "⠋⠗⠕⠝⠞",
}


def encode_word(word: str) -> str:
    """Transliterate a single lowercase word."""
    if word in BRAILLE_WORDS:
        return BRAILLE_WORDS[word]
    return "".join(BRAILLE_CELLS.get(char, char) for char in word)


def encode(text: str) -> str:
    """Transliterate text to braille cells.

    Args:
        text: Any string. Case is ignored.

    Returns:
        The braille rendering, with words separated by blank cells.
    """
    return BLANK_CELL.join(encode_word(word) for word in text.lower().split(" "))
