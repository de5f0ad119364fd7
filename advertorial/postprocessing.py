"""House-style clean-up applied to generated articles."""

import re

# "X, Y, and Z" -> "X, Y and Z". Applied to every match, not just the first.
OXFORD_COMMA_PATTERN = re.compile(r"(\b[^,]+), ([^,]+), and ([^,\n]+)")


def remove_oxford_comma(text: str) -> str:
    """Drop the serial comma before the final "and" of a list.

    Text already written without the serial comma is returned unchanged.
    """
    return OXFORD_COMMA_PATTERN.sub(r"\1, \2 and \3", text)
