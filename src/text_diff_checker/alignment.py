from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Sequence, Tuple

from diff_match_patch import diff_match_patch

from .models import EditKind, EditOp

LOGGER = logging.getLogger(__name__)

Diff = Tuple[int, str]

# diff_cleanupSemantic normally settles after one or two passes.
_MAX_CLEANUP_PASSES = 16

# Word keys are encoded as single code points starting past Latin-1.
_FIRST_KEY_CODEPOINT = 0x100
_SURROGATE_START = 0xD800
_SURROGATE_END = 0xDFFF


class AlignmentContractError(AssertionError):
    """Raised when an edit script and the texts it describes disagree."""


def _new_matcher() -> diff_match_patch:
    dmp = diff_match_patch()
    # No deadline: identical inputs must always produce the same script.
    dmp.Diff_Timeout = 0
    return dmp


def diff_texts(old: str, new: str) -> List[Diff]:
    """Return the semantically cleaned (op, text) diff of two strings."""
    if not old and not new:
        return []
    dmp = _new_matcher()
    diffs = dmp.diff_main(old, new, False)
    return semantic_cleanup(diffs, dmp)


def semantic_cleanup(
    diffs: Sequence[Diff], dmp: diff_match_patch | None = None
) -> List[Diff]:
    """
    Fold alignment noise into larger edits.

    diff-match-patch's semantic cleanup is applied until the script stops
    changing, so running this on its own output is a no-op.
    """
    dmp = dmp or _new_matcher()
    cleaned = [(op, text) for op, text in diffs]
    for _ in range(_MAX_CLEANUP_PASSES):
        previous = list(cleaned)
        dmp.diff_cleanupSemantic(cleaned)
        cleaned = [(op, text) for op, text in cleaned if text]
        if cleaned == previous:
            break
    return cleaned


def to_edit_script(diffs: Sequence[Diff]) -> List[EditOp]:
    """Drop the text of a diff, keeping only kinds and run lengths."""
    return [EditOp(kind=EditKind(op), length=len(text)) for op, text in diffs if text]


def align(old: str, new: str) -> List[EditOp]:
    """Compute a cleaned edit script between two comparison strings."""
    script = to_edit_script(diff_texts(old, new))
    validate_script(script, len(old), len(new))
    LOGGER.debug(
        "Aligned %d/%d chars into %d runs", len(old), len(new), len(script)
    )
    return script


def encode_keys(
    keys_old: Sequence[Hashable], keys_new: Sequence[Hashable]
) -> Tuple[str, str]:
    """Map each distinct key to one code point so sequences diff as strings."""
    codes: Dict[Hashable, str] = {}
    next_code = _FIRST_KEY_CODEPOINT

    def encode(keys: Sequence[Hashable]) -> str:
        nonlocal next_code
        chars: List[str] = []
        for key in keys:
            if key not in codes:
                if next_code == _SURROGATE_START:
                    next_code = _SURROGATE_END + 1
                codes[key] = chr(next_code)
                next_code += 1
            chars.append(codes[key])
        return "".join(chars)

    return encode(keys_old), encode(keys_new)


def align_sequences(
    keys_old: Sequence[Hashable], keys_new: Sequence[Hashable]
) -> List[EditOp]:
    """Align two key sequences (e.g. normalized words) element by element."""
    encoded_old, encoded_new = encode_keys(keys_old, keys_new)
    return align(encoded_old, encoded_new)


def validate_script(script: Sequence[EditOp], old_length: int, new_length: int) -> None:
    """Fail fast unless the script consumes exactly both texts."""
    consumed_old = 0
    consumed_new = 0
    for op in script:
        if op.length < 0:
            raise AlignmentContractError(f"Negative run length in {op!r}.")
        if op.kind != EditKind.INSERT:
            consumed_old += op.length
        if op.kind != EditKind.DELETE:
            consumed_new += op.length
    if consumed_old != old_length or consumed_new != new_length:
        raise AlignmentContractError(
            f"Edit script consumes {consumed_old}/{consumed_new} characters, "
            f"expected {old_length}/{new_length}."
        )
