"""Document dialect detection for graph metadata."""

from typing import Any

from docuarch.constants import (
    FORMAT_ARCHIMATE,
    FORMAT_CUSTOM,
    FORMAT_GENERIC,
    FORMAT_RDF_OWL,
    FORMAT_SCHEMA_ORG,
)


def _context_format(context: Any):
    """Format implied by one context value, or None if nothing matches."""
    if isinstance(context, str):
        return FORMAT_SCHEMA_ORG if "schema.org" in context else None

    if not isinstance(context, dict):
        return None

    keys = [str(key).lower() for key in context]
    values = [value.lower() for value in context.values() if isinstance(value, str)]

    if any("archimate" in key for key in keys) or any("archimate" in v for v in values):
        return FORMAT_ARCHIMATE
    if any("schema" in key for key in keys) or any("schema.org" in v for v in values):
        return FORMAT_SCHEMA_ORG
    if "owl" in keys or "rdf" in keys:
        return FORMAT_RDF_OWL
    return None


def detect_format(document: Any) -> str:
    """
    Classify the JSON-LD dialect of a document from its `@context`.

    Precedence: ArchiMate, Schema.org, RDF/OWL. List contexts are scanned
    rule by rule across all members, so an ArchiMate member wins over a
    Schema.org member regardless of position.
    """
    context = document.get("@context") if isinstance(document, dict) else None
    if not context:
        return FORMAT_GENERIC

    members = context if isinstance(context, list) else [context]
    detected = {_context_format(member) for member in members}
    for fmt in (FORMAT_ARCHIMATE, FORMAT_SCHEMA_ORG, FORMAT_RDF_OWL):
        if fmt in detected:
            return fmt

    return FORMAT_CUSTOM
