"""Static book table: the 66-book Protestant canon in canonical order."""

from models.book import Book
from models.enums import Category, Theme

_P, _H, _W, _PR = Category.PENTATEUCH, Category.HISTORY, Category.POETRY, Category.PROPHETS
_G, _E, _A = Category.GOSPELS, Category.EPISTLES, Category.APOCALYPSE

# (name, chapters, category, theme)
_TABLE = [
    # ── Old Testament ────────────────────────────────────────────────
    ("Genesis",          50, _P,  Theme.CREATION),
    ("Exodus",           40, _P,  Theme.WILDERNESS),
    ("Leviticus",        27, _P,  Theme.WILDERNESS),
    ("Numbers",          36, _P,  Theme.WILDERNESS),
    ("Deuteronomy",      34, _P,  Theme.WILDERNESS),
    ("Joshua",           24, _H,  Theme.KINGDOM),
    ("Judges",           21, _H,  Theme.KINGDOM),
    ("Ruth",              4, _H,  Theme.KINGDOM),
    ("1 Samuel",         31, _H,  Theme.KINGDOM),
    ("2 Samuel",         24, _H,  Theme.KINGDOM),
    ("1 Kings",          22, _H,  Theme.KINGDOM),
    ("2 Kings",          25, _H,  Theme.KINGDOM),
    ("1 Chronicles",     29, _H,  Theme.KINGDOM),
    ("2 Chronicles",     36, _H,  Theme.KINGDOM),
    ("Ezra",             10, _H,  Theme.KINGDOM),
    ("Nehemiah",         13, _H,  Theme.KINGDOM),
    ("Esther",           10, _H,  Theme.KINGDOM),
    ("Job",              42, _W,  Theme.WISDOM),
    ("Psalms",          150, _W,  Theme.WISDOM),
    ("Proverbs",         31, _W,  Theme.WISDOM),
    ("Ecclesiastes",     12, _W,  Theme.WISDOM),
    ("Song of Solomon",   8, _W,  Theme.WISDOM),
    ("Isaiah",           66, _PR, Theme.PROPHECY),
    ("Jeremiah",         52, _PR, Theme.PROPHECY),
    ("Lamentations",      5, _PR, Theme.PROPHECY),
    ("Ezekiel",          48, _PR, Theme.PROPHECY),
    ("Daniel",           12, _PR, Theme.PROPHECY),
    ("Hosea",            14, _PR, Theme.PROPHECY),
    ("Joel",              3, _PR, Theme.PROPHECY),
    ("Amos",              9, _PR, Theme.PROPHECY),
    ("Obadiah",           1, _PR, Theme.PROPHECY),
    ("Jonah",             4, _PR, Theme.PROPHECY),
    ("Micah",             7, _PR, Theme.PROPHECY),
    ("Nahum",             3, _PR, Theme.PROPHECY),
    ("Habakkuk",          3, _PR, Theme.PROPHECY),
    ("Zephaniah",         3, _PR, Theme.PROPHECY),
    ("Haggai",            2, _PR, Theme.PROPHECY),
    ("Zechariah",        14, _PR, Theme.PROPHECY),
    ("Malachi",           4, _PR, Theme.PROPHECY),
    # ── New Testament ────────────────────────────────────────────────
    ("Matthew",          28, _G,  Theme.GOSPEL),
    ("Mark",             16, _G,  Theme.GOSPEL),
    ("Luke",             24, _G,  Theme.GOSPEL),
    ("John",             21, _G,  Theme.GOSPEL),
    ("Acts",             28, _H,  Theme.CHURCH),
    ("Romans",           16, _E,  Theme.CHURCH),
    ("1 Corinthians",    16, _E,  Theme.CHURCH),
    ("2 Corinthians",    13, _E,  Theme.CHURCH),
    ("Galatians",         6, _E,  Theme.CHURCH),
    ("Ephesians",         6, _E,  Theme.CHURCH),
    ("Philippians",       4, _E,  Theme.CHURCH),
    ("Colossians",        4, _E,  Theme.CHURCH),
    ("1 Thessalonians",   5, _E,  Theme.CHURCH),
    ("2 Thessalonians",   3, _E,  Theme.CHURCH),
    ("1 Timothy",         6, _E,  Theme.CHURCH),
    ("2 Timothy",         4, _E,  Theme.CHURCH),
    ("Titus",             3, _E,  Theme.CHURCH),
    ("Philemon",          1, _E,  Theme.CHURCH),
    ("Hebrews",          13, _E,  Theme.CHURCH),
    ("James",             5, _E,  Theme.CHURCH),
    ("1 Peter",           5, _E,  Theme.CHURCH),
    ("2 Peter",           3, _E,  Theme.CHURCH),
    ("1 John",            5, _E,  Theme.CHURCH),
    ("2 John",            1, _E,  Theme.CHURCH),
    ("3 John",            1, _E,  Theme.CHURCH),
    ("Jude",              1, _E,  Theme.CHURCH),
    ("Revelation",       22, _A,  Theme.REVELATION),
]

DEFAULT_BOOKS: tuple[Book, ...] = tuple(
    Book(name=name, chapters=chapters, category=category, theme=theme)
    for name, chapters, category, theme in _TABLE
)
