# -*- coding: utf-8 -*-
"""
Vocabulary - Controlled vocabulary for DublinCore catalogs.

Read-only registry of the namespaces, property names, encoding schemes
and flavors used by Opencast DublinCore catalogs. Tables are built once
at import time and exposed through read-only mappings.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
from types import MappingProxyType
from typing import Mapping

# OCDC internal
from ocdc.core.names import EName


# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------

ELEMENTS_1_1_NS_URI = "http://purl.org/dc/elements/1.1/"
ELEMENTS_1_1_NS_PREFIX = "dc"

TERMS_NS_URI = "http://purl.org/dc/terms/"
TERMS_NS_PREFIX = "dcterms"

XSI_NS_URI = "http://www.w3.org/2001/XMLSchema-instance"
XSI_NS_PREFIX = "xsi"

XML_NS_URI = "http://www.w3.org/XML/1998/namespace"

# Default namespace of XML documents generated for Opencast catalogs
OC_DC_CATALOG_NS_URI = "http://www.opencastproject.org/xsd/1.0/dublincore/"

OC_PROPERTY_NS_URI = "http://www.opencastproject.org/matterhorn/"
OC_PROPERTY_NS_PREFIX = "oc"

PREFERRED_PREFIXES: Mapping[str, str] = MappingProxyType({
    ELEMENTS_1_1_NS_URI: ELEMENTS_1_1_NS_PREFIX,
    TERMS_NS_URI: TERMS_NS_PREFIX,
    XSI_NS_URI: XSI_NS_PREFIX,
    OC_PROPERTY_NS_URI: OC_PROPERTY_NS_PREFIX,
})
"""Prefix to use when a namespace has to be bound implicitly."""


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------

LANGUAGE_UNDEFINED = "__"
"""Language of values that carry no language tag."""

LANGUAGE_ANY = "*"
"""Query wildcard matching values of every language. Never stored."""


# ---------------------------------------------------------------------------
# Root element
# ---------------------------------------------------------------------------

OC_DC_CATALOG_ROOT_ELEMENT = EName(OC_DC_CATALOG_NS_URI, "dublincore")


# ---------------------------------------------------------------------------
# DCMI terms
# ---------------------------------------------------------------------------

_TERM_NAMES = (
    "abstract", "accessRights", "accrualMethod", "accrualPeriodicity",
    "accrualPolicy", "alternative", "audience", "available",
    "bibliographicCitation", "conformsTo", "contributor", "coverage",
    "created", "creator", "date", "dateAccepted", "dateCopyrighted",
    "dateSubmitted", "description", "educationLevel", "extent", "format",
    "hasFormat", "hasPart", "hasVersion", "identifier",
    "instructionalMethod", "isFormatOf", "isPartOf", "isReferencedBy",
    "isReplacedBy", "isRequiredBy", "issued", "isVersionOf", "language",
    "license", "mediator", "medium", "modified", "provenance", "publisher",
    "references", "relation", "replaces", "requires", "rights",
    "rightsHolder", "source", "spatial", "subject", "tableOfContents",
    "temporal", "title", "type", "valid",
)

TERMS: Mapping[str, EName] = MappingProxyType({
    name: EName(TERMS_NS_URI, name) for name in _TERM_NAMES
})
"""All DCMI terms by local name."""

PROPERTY_ABSTRACT = TERMS["abstract"]
PROPERTY_ACCESS_RIGHTS = TERMS["accessRights"]
PROPERTY_ALTERNATIVE = TERMS["alternative"]
PROPERTY_AUDIENCE = TERMS["audience"]
PROPERTY_AVAILABLE = TERMS["available"]
PROPERTY_CONTRIBUTOR = TERMS["contributor"]
PROPERTY_COVERAGE = TERMS["coverage"]
PROPERTY_CREATED = TERMS["created"]
PROPERTY_CREATOR = TERMS["creator"]
PROPERTY_DATE = TERMS["date"]
PROPERTY_DESCRIPTION = TERMS["description"]
PROPERTY_EXTENT = TERMS["extent"]
PROPERTY_FORMAT = TERMS["format"]
PROPERTY_IDENTIFIER = TERMS["identifier"]
PROPERTY_IS_PART_OF = TERMS["isPartOf"]
PROPERTY_ISSUED = TERMS["issued"]
PROPERTY_LANGUAGE = TERMS["language"]
PROPERTY_LICENSE = TERMS["license"]
PROPERTY_MODIFIED = TERMS["modified"]
PROPERTY_PUBLISHER = TERMS["publisher"]
PROPERTY_RELATION = TERMS["relation"]
PROPERTY_REPLACES = TERMS["replaces"]
PROPERTY_RIGHTS = TERMS["rights"]
PROPERTY_RIGHTS_HOLDER = TERMS["rightsHolder"]
PROPERTY_SOURCE = TERMS["source"]
PROPERTY_SPATIAL = TERMS["spatial"]
PROPERTY_SUBJECT = TERMS["subject"]
PROPERTY_TEMPORAL = TERMS["temporal"]
PROPERTY_TITLE = TERMS["title"]
PROPERTY_TYPE = TERMS["type"]


# ---------------------------------------------------------------------------
# Encoding schemes
# ---------------------------------------------------------------------------

ENC_SCHEME_BOX = EName(TERMS_NS_URI, "Box")
ENC_SCHEME_ISO3166 = EName(TERMS_NS_URI, "ISO3166")
ENC_SCHEME_ISO639_2 = EName(TERMS_NS_URI, "ISO639-2")
ENC_SCHEME_ISO639_3 = EName(TERMS_NS_URI, "ISO639-3")
ENC_SCHEME_PERIOD = EName(TERMS_NS_URI, "Period")
ENC_SCHEME_POINT = EName(TERMS_NS_URI, "Point")
ENC_SCHEME_RFC4646 = EName(TERMS_NS_URI, "RFC4646")
ENC_SCHEME_URI = EName(TERMS_NS_URI, "URI")
ENC_SCHEME_W3CDTF = EName(TERMS_NS_URI, "W3CDTF")
ENC_SCHEME_ISO8601 = EName(OC_PROPERTY_NS_URI, "ISO8601")


# ---------------------------------------------------------------------------
# Opencast properties
# ---------------------------------------------------------------------------

OC_PROPERTY_AGENT_TIMEZONE = EName(OC_PROPERTY_NS_URI, "agentTimezone")
"""Timezone of the capture agent scheduled with an event, e.g. "America/Chicago"."""

OC_PROPERTY_RECURRENCE = EName(OC_PROPERTY_NS_URI, "recurrence")
"""Recurrence pattern as specified in RFC 2445, section 4.8.5.4."""

OC_PROPERTY_ANNOTATION = EName(OC_PROPERTY_NS_URI, "annotation")
OC_PROPERTY_ADVERTISED = EName(OC_PROPERTY_NS_URI, "advertised")
OC_PROPERTY_PROMOTED = EName(OC_PROPERTY_NS_URI, "promoted")
OC_PROPERTY_DURATION = EName(OC_PROPERTY_NS_URI, "duration")


# ---------------------------------------------------------------------------
# Flavors
# ---------------------------------------------------------------------------

FLAVOR_TYPE = "dublincore"
EPISODE_SUBTYPE = "episode"
SERIES_SUBTYPE = "series"
