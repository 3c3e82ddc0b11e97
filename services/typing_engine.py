# services/typing_engine.py
from app.state import InputState


def apply_input(previous: InputState, raw: str, reference: str) -> InputState:
    """
    Fold one input change (the full current string, not a delta) into the input state.

    - shorter: mistakes at or past the new end are dropped (backspace clears
      forward mistakes only)
    - longer: only the last character is checked against the reference, so a
      multi-character paste validates just its final character
    - same length: text is taken as-is, mistakes are left untouched
    """
    raw = raw or ""
    n = len(raw)

    if n < previous.length:
        kept = frozenset(i for i in previous.mistakes if i < n)
        return InputState(raw, kept)

    if n > previous.length:
        last = n - 1
        if last >= len(reference) or raw[last] != reference[last]:
            return InputState(raw, previous.mistakes | {last})
        return InputState(raw, previous.mistakes)

    return InputState(raw, previous.mistakes)
