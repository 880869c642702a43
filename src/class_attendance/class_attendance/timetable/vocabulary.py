from __future__ import annotations

from typing import Iterable, Sequence

from ..core.constants import DEFAULT_SUBJECT_TOKENS, LAB_MARKER, SUBJECT_QUALIFIERS
from ..core.enums import Category
from ..core.exceptions import ValidationError
from .model import SubjectToken


def canonicalize(token: str) -> SubjectToken:
    """Build the vocabulary entry for a raw subject token.

    A token ending in the lab marker is a Lab of the subject named before the
    marker; anything else is Theory. Known trailing qualifiers are stripped
    from the canonical name but the token itself is matched verbatim.

    >>> canonicalize("DA Lab")
    SubjectToken(token='DA Lab', canonical_name='DA', category=<Category.LAB: 'Lab'>)
    >>> canonicalize("Discrete m").canonical_name
    'Discrete'
    """

    if not token or not token.strip():
        raise ValidationError("Subject token must not be empty")

    name = token
    for qualifier in SUBJECT_QUALIFIERS:
        if name.endswith(qualifier):
            name = name[: -len(qualifier)]
            break

    category = Category.THEORY
    if name.endswith(LAB_MARKER):
        category = Category.LAB
        name = name[: -len(LAB_MARKER)]

    name = name.strip()
    if not name:
        raise ValidationError(f"Subject token has no subject name: {token!r}")

    return SubjectToken(token=token, canonical_name=name, category=category)


def build_vocabulary(tokens: Iterable[str]) -> tuple[SubjectToken, ...]:
    return tuple(canonicalize(t) for t in tokens)


DEFAULT_VOCABULARY: Sequence[SubjectToken] = build_vocabulary(DEFAULT_SUBJECT_TOKENS)
