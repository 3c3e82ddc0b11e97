from typing import Sequence

# a "word" is five characters, spaces included
CHARS_PER_WORD = 5.0


def wpm(typed_length: int, elapsed_seconds: int) -> float:
    """
    Gross words-per-minute for a run.
    WPM = (typed chars / 5) / (elapsed minutes); 0.0 before the first second.
    """
    if elapsed_seconds <= 0:
        return 0.0
    return (typed_length / CHARS_PER_WORD) / (elapsed_seconds / 60.0)


def accuracy(typed: Sequence[str], reference: Sequence[str]) -> float:
    """
    Percentage of typed characters that match the reference at the same index.
    Characters typed past the end of the reference count as misses.
    """
    if not typed:
        return 100.0
    hits = sum(
        1 for i, ch in enumerate(typed) if i < len(reference) and ch == reference[i]
    )
    return 100.0 * hits / len(typed)


def progress(typed_length: int, reference_length: int) -> float:
    if reference_length <= 0:
        return 100.0
    return 100.0 * typed_length / reference_length


def final_progress(typed_length: int, reference_length: int) -> float:
    """
    Progress reported when a session completes.
    Counts one character more than was typed, so a finished run reports over 100.
    """
    if reference_length <= 0:
        return 100.0
    return 100.0 * (typed_length + 1) / reference_length
