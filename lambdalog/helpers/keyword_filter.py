"""Keyword matching used by every filterable list"""


def tokenize(query: str) -> list[str]:
    """Split a filter query into lower-cased keywords"""
    return query.lower().split()


def matches(query: str, candidate: str) -> bool:
    """Check if every keyword of the query appears in the candidate, ignoring case"""
    candidate_lower = candidate.lower()
    return all(token in candidate_lower for token in tokenize(query))


def find_matches(query: str, text: str) -> list[tuple[int, int]]:
    """Get the (start, end) spans of every keyword occurrence in the text

    Overlapping and adjacent spans are merged so they can be highlighted in a
    single pass from left to right.
    """
    text_lower = text.lower()
    spans: list[tuple[int, int]] = []
    for token in set(tokenize(query)):
        start = text_lower.find(token)
        while start != -1:
            spans.append((start, start + len(token)))
            start = text_lower.find(token, start + 1)

    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged
