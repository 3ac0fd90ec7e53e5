"""
Shared constants across docuarch modules.

This module is the single source of truth for:
- Reserved JSON-LD / graph item keys
- Visual group names (closed set)
- Relationship object detection keywords and member aliases
- Format labels reported in graph metadata
"""

# =============================================================================
# RESERVED KEYS
# =============================================================================
# Keys consumed by node construction; never copied as pass-through attributes

NODE_RESERVED_KEYS = ("@id", "@type", "id", "type", "name", "label", "title")

# Keys never considered as relationship candidates
RELATIONSHIP_RESERVED_KEYS = NODE_RESERVED_KEYS + ("description",)

# Property local names holding narrative text, never references
NARRATIVE_PROPERTIES = {"description", "comment", "documentation"}

# Label candidates, in priority order
LABEL_KEYS = ("name", "label", "title")


# =============================================================================
# VISUAL GROUPS
# =============================================================================

GROUP_BUSINESS = "Business"
GROUP_APPLICATION = "Application"
GROUP_TECHNOLOGY = "Technology"
GROUP_DATA = "Data"
GROUP_MOTIVATION = "Motivation"
GROUP_COMPLIANCE = "Compliance"
GROUP_ACTORS = "Actors"
GROUP_PROCESSES = "Processes"
GROUP_COMPONENTS = "Components"
GROUP_OTHER = "Other"

NODE_GROUPS = (
    GROUP_BUSINESS,
    GROUP_APPLICATION,
    GROUP_TECHNOLOGY,
    GROUP_DATA,
    GROUP_MOTIVATION,
    GROUP_COMPLIANCE,
    GROUP_ACTORS,
    GROUP_PROCESSES,
    GROUP_COMPONENTS,
    GROUP_OTHER,
)

UNDEFINED_TYPE = "undefined"


# =============================================================================
# RELATIONSHIP OBJECTS
# =============================================================================

RELATIONSHIP_TYPE_KEYWORDS = ("association", "relationship", "compliance")

# Member list field, followed by its accepted aliases
RELATES_TO_KEYS = ("relatesTo", "relates", "connects", "links")

EDGE_TYPE_RELATIONSHIP = "relationship"


# =============================================================================
# FORMATS
# =============================================================================

SOURCE_JSONLD = "JSON-LD"

FORMAT_GENERIC = "Generic JSON-LD"
FORMAT_ARCHIMATE = "ArchiMate JSON-LD"
FORMAT_SCHEMA_ORG = "Schema.org JSON-LD"
FORMAT_RDF_OWL = "RDF/OWL JSON-LD"
FORMAT_CUSTOM = "Custom JSON-LD"

# Context keys ignored when building the prefix table
CONTEXT_KEYWORDS = {"@vocab", "@base"}
