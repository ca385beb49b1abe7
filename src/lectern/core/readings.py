"""Static reading tables for the lectionary.

Each lesson table has one citation per day of a 360 day cycle. The tables
are expanded once at import from a course of books read a chapter a day;
a course shorter than the cycle starts again from its first book.
"""

from itertools import cycle, islice

CYCLE_LENGTH = 360

# (book, number of chapters)
Course = tuple[tuple[str, int], ...]

MORNING_FIRST_COURSE: Course = (
    ("Genesis", 50),
    ("Exodus", 40),
    ("Leviticus", 27),
    ("Numbers", 36),
    ("Deuteronomy", 34),
    ("Joshua", 24),
    ("Judges", 21),
    ("Ruth", 4),
    ("1 Samuel", 31),
    ("2 Samuel", 24),
    ("1 Kings", 22),
    ("2 Kings", 25),
    ("1 Chronicles", 29),
)

MORNING_SECOND_COURSE: Course = (
    ("Matthew", 28),
    ("Mark", 16),
    ("Luke", 24),
    ("John", 21),
    ("Acts", 28),
)

EVENING_FIRST_COURSE: Course = (
    ("Job", 42),
    ("Proverbs", 31),
    ("Ecclesiastes", 12),
    ("Song of Songs", 8),
    ("Isaiah", 66),
    ("Jeremiah", 52),
    ("Lamentations", 5),
    ("Ezekiel", 48),
    ("Daniel", 12),
    ("Hosea", 14),
    ("Joel", 3),
    ("Amos", 9),
    ("Obadiah", 1),
    ("Jonah", 4),
    ("Micah", 7),
    ("Nahum", 3),
    ("Habakkuk", 3),
    ("Zephaniah", 3),
    ("Haggai", 2),
    ("Zechariah", 14),
    ("Malachi", 4),
)

EVENING_SECOND_COURSE: Course = (
    ("Romans", 16),
    ("1 Corinthians", 16),
    ("2 Corinthians", 13),
    ("Galatians", 6),
    ("Ephesians", 6),
    ("Philippians", 4),
    ("Colossians", 4),
    ("1 Thessalonians", 5),
    ("2 Thessalonians", 3),
    ("1 Timothy", 6),
    ("2 Timothy", 4),
    ("Titus", 3),
    ("Philemon", 1),
    ("Hebrews", 13),
    ("James", 5),
    ("1 Peter", 5),
    ("2 Peter", 3),
    ("1 John", 5),
    ("2 John", 1),
    ("3 John", 1),
    ("Jude", 1),
    ("Revelation", 22),
)


def expand_course(course: Course, length: int = CYCLE_LENGTH) -> tuple[str, ...]:
    """One ``Book N`` citation per day, restarting the course when it runs out."""
    chapters = [f"{book} {n}" for book, count in course for n in range(1, count + 1)]
    return tuple(islice(cycle(chapters), length))


# (morning psalms, evening psalms) for each day of the month
PSALTER: tuple[tuple[str, str], ...] = (
    ("Psalms 1-5", "Psalms 6-8"),
    ("Psalms 9-11", "Psalms 12-14"),
    ("Psalms 15-17", "Psalm 18"),
    ("Psalms 19-21", "Psalms 22-23"),
    ("Psalms 24-26", "Psalms 27-29"),
    ("Psalms 30-31", "Psalms 32-34"),
    ("Psalms 35-36", "Psalm 37"),
    ("Psalms 38-40", "Psalms 41-43"),
    ("Psalms 44-46", "Psalms 47-49"),
    ("Psalms 50-52", "Psalms 53-55"),
    ("Psalms 56-58", "Psalms 59-61"),
    ("Psalms 62-64", "Psalms 65-67"),
    ("Psalm 68", "Psalms 69-70"),
    ("Psalms 71-72", "Psalms 73-74"),
    ("Psalms 75-77", "Psalm 78"),
    ("Psalms 79-81", "Psalms 82-85"),
    ("Psalms 86-88", "Psalm 89"),
    ("Psalms 90-92", "Psalms 93-94"),
    ("Psalms 95-97", "Psalms 98-101"),
    ("Psalms 102-103", "Psalm 104"),
    ("Psalm 105", "Psalm 106"),
    ("Psalm 107", "Psalms 108-109"),
    ("Psalms 110-113", "Psalms 114-115"),
    ("Psalms 116-118", "Psalm 119:1-32"),
    ("Psalm 119:33-72", "Psalm 119:73-104"),
    ("Psalm 119:105-144", "Psalm 119:145-176"),
    ("Psalms 120-125", "Psalms 126-131"),
    ("Psalms 132-135", "Psalms 136-138"),
    ("Psalms 139-141", "Psalms 142-143"),
    ("Psalms 144-146", "Psalms 147-150"),
)

MORNING_FIRST = expand_course(MORNING_FIRST_COURSE)
MORNING_SECOND = expand_course(MORNING_SECOND_COURSE)
EVENING_FIRST = expand_course(EVENING_FIRST_COURSE)
EVENING_SECOND = expand_course(EVENING_SECOND_COURSE)

MORNING_READINGS: tuple[tuple[str, str], ...] = tuple(zip(MORNING_FIRST, MORNING_SECOND))
EVENING_READINGS: tuple[tuple[str, str], ...] = tuple(zip(EVENING_FIRST, EVENING_SECOND))

# (offset from Easter in days, description, morning, evening), ascending offsets
MOVABLE_FEASTS: tuple[tuple[int, str, tuple[str, str, str], tuple[str, str, str]], ...] = (
    (
        -46,
        "Ash Wednesday",
        ("Psalms 6, 32", "Isaiah 58:1-12", "Matthew 6:1-18"),
        ("Psalms 38, 51", "Jonah 3", "Hebrews 12:1-14"),
    ),
    (
        -3,
        "Maundy Thursday",
        ("Psalm 102", "Exodus 12:1-14", "John 13:1-17"),
        ("Psalms 142-143", "Lamentations 1:1-12", "1 Corinthians 11:17-32"),
    ),
    (
        -2,
        "Good Friday",
        ("Psalm 22", "Genesis 22:1-18", "John 18"),
        ("Psalms 40, 54", "Isaiah 52:13-53:12", "John 19"),
    ),
    (
        -1,
        "Holy Saturday",
        ("Psalm 88", "Job 14:1-14", "Romans 6:3-11"),
        ("Psalm 27", "Lamentations 3:1-9", "1 Peter 3:17-22"),
    ),
    (
        0,
        "Easter Sunday",
        ("Psalms 2, 57, 111", "Exodus 14:10-31", "John 20:1-18"),
        ("Psalms 113-114, 118", "Isaiah 51:9-11", "Luke 24:13-35"),
    ),
    (
        39,
        "Ascension Day",
        ("Psalms 8, 47", "Daniel 7:9-14", "Mark 16:9-20"),
        ("Psalms 24, 96", "2 Kings 2:1-15", "Hebrews 4:14-5:10"),
    ),
)
