"""Half of a string whose letters can be paired up around the letter 'i'."""

from collections import Counter


def half_arrangement(text: str) -> str | None:
    """Return the leading half of ``text`` built from half of each letter's count.

    Every letter other than ``'i'`` must occur an even number of times;
    otherwise ``None`` is returned. Letters ``'i'`` are always kept; other
    letters are kept while their halved budget lasts, and the scan stops at
    the first letter whose budget is spent.
    """
    counts = Counter(text)
    if any(count % 2 for letter, count in counts.items() if letter != "i"):
        return None
    budget = {letter: count // 2 for letter, count in counts.items() if letter != "i"}

    kept: list[str] = []
    for letter in text:
        if letter == "i":
            kept.append(letter)
        elif budget[letter] > 0:
            kept.append(letter)
            budget[letter] -= 1
        else:
            break
    return "".join(kept)