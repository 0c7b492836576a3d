"""
WordFlip – Bundled default word list (English → Hebrew)
"""

DEFAULT_WORDS = (
    ("apple", "תפוח"),
    ("book", "ספר"),
    ("house", "בית"),
    ("water", "מים"),
    ("friend", "חבר"),
    ("window", "חלון"),
    ("table", "שולחן"),
    ("chair", "כיסא"),
    ("street", "רחוב"),
    ("city", "עיר"),
    ("morning", "בוקר"),
    ("night", "לילה"),
    ("bread", "לחם"),
    ("dog", "כלב"),
    ("cat", "חתול"),
    ("sun", "שמש"),
    ("moon", "ירח"),
    ("school", "בית ספר"),
    ("teacher", "מורה"),
    ("family", "משפחה"),
    ("work", "עבודה"),
    ("time", "זמן"),
    ("question", "שאלה"),
    ("answer", "תשובה"),
    ("beautiful", "יפה"),
    ("big", "גדול"),
    ("small", "קטן"),
    ("to learn", "ללמוד"),
    ("to write", "לכתוב"),
    ("to read", "לקרוא"),
)
