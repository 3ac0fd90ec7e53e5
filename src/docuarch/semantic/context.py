"""
JSON-LD context resolution.

Builds a per-document prefix table from `@context` and provides the two IRI
helpers every later stage depends on:
- expand_iri: compact IRI ("ex:Widget") -> full IRI
- get_local_name: IRI or compact IRI -> short human-readable name

Resolution is best-effort: malformed contexts and unknown prefixes never
raise, they simply leave terms unexpanded.
"""

import logging
from typing import Any, Dict, List, Tuple

from docuarch.constants import CONTEXT_KEYWORDS

logger = logging.getLogger(__name__)


def get_local_name(iri: Any) -> Any:
    """
    Return the short name of an IRI or compact IRI.

    Args:
        iri: IRI string. Falsy and non-string values are returned unchanged.

    Returns:
        Local name (text after the last ':' for compact IRIs, otherwise the
        last path segment with any '#' fragment prefix stripped).

    Example:
        >>> get_local_name("archimate:BusinessRole")
        'BusinessRole'
        >>> get_local_name("http://example.org/ns#Widget")
        'Widget'
    """
    if not iri or not isinstance(iri, str):
        return iri

    if ":" in iri and "http" not in iri:
        return iri.rsplit(":", 1)[-1]

    return iri.rsplit("/", 1)[-1].rsplit("#", 1)[-1]


class ContextResolver:
    """
    Prefix table and term definitions for a single document.

    One resolver is created per pipeline invocation; nothing is shared
    between documents.
    """

    def __init__(self):
        self.prefixes: Dict[str, str] = {}
        self.terms: Dict[str, Dict[str, Any]] = {}

    def process_context(self, context: Any) -> None:
        """
        Populate the prefix and term tables from an `@context` value.

        String-valued entries become prefixes, dict-valued entries become term
        definitions. `@vocab`/`@base` are ignored. A list context is processed
        member by member; anything else is a no-op.
        """
        if isinstance(context, list):
            for member in context:
                self.process_context(member)
            return

        if not isinstance(context, dict):
            if context:
                logger.debug(f"Ignoring non-object @context: {type(context).__name__}")
            return

        for key, value in context.items():
            if key in CONTEXT_KEYWORDS:
                continue
            if isinstance(value, str):
                self.prefixes[key] = value
            elif isinstance(value, dict):
                self.terms[key] = value

        logger.debug(
            f"Context processed: {len(self.prefixes)} prefixes, {len(self.terms)} terms"
        )

    def expand_iri(self, term: Any) -> Any:
        """
        Expand a compact IRI using the prefix table.

        Example:
            With prefix ex -> "http://example.org/ns",
            "ex:Widget" -> "http://example.org/ns/Widget".
        """
        if not term or not isinstance(term, str):
            return term

        if "http://" in term or "https://" in term:
            return term

        prefix, sep, local = term.partition(":")
        if sep and local and prefix in self.prefixes:
            if not local.startswith("/"):
                local = "/" + local
            return self.prefixes[prefix] + local

        return term

    def get_local_name(self, iri: Any) -> Any:
        return get_local_name(iri)

    def prefix_pairs(self) -> List[Tuple[str, str]]:
        """Prefix table as ordered (prefix, iri) pairs."""
        return list(self.prefixes.items())
