"""Library-wide limits and console layout widths."""

MAX_LOAN_DAYS = 15
"""Days a publication may be borrowed without a penalty."""

TITLE_WIDTH = 30
"""Width of the title column on the console."""

AUTHOR_WIDTH = 15
"""Width of the author column on the console."""

SHELF_ID_LEN = 4
"""Exact length of a shelf id, and its column width on the console."""

LIBRARY_CAPACITY = 333
"""Maximum number of publications the library can hold."""