# -*- coding: utf-8 -*-
"""
XML Format - Read and write DublinCore catalogs as XML.

Documents have one root element (the catalog's root tag) declaring every
namespace binding of the catalog, and one child element per property
value::

    <?xml version="1.0" encoding="utf-8"?>
    <dublincore xmlns="http://www.opencastproject.org/xsd/1.0/dublincore/"
                xmlns:dcterms="http://purl.org/dc/terms/"
                flavor="dublincore/episode">
      <dcterms:title xml:lang="en">Lecture 1</dcterms:title>
      <dcterms:created xsi:type="dcterms:W3CDTF">2024-01-01T10:00:00Z</dcterms:created>
    </dublincore>

A catalog without root tag is written under an unqualified
``<dublincore>`` element, which reads back as "no root tag". When the
catalog binds a default namespace that element carries
``anonymous="true"``, since the declaration would otherwise qualify it.

Property elements with no namespace undeclare the default namespace
with ``xmlns=""``. Encoding schemes with no namespace are written as
``{}local`` in that case. Carriage returns are written as ``&#13;`` so
they survive line-end normalization, and characters XML 1.0 cannot
represent are rejected.

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
import io
import logging
import re
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple
from xml.sax.saxutils import XMLGenerator, escape
from xml.sax.xmlreader import AttributesNSImpl

logger = logging.getLogger(__name__)

# OCDC internal
from ocdc.catalog.models import DublinCoreCatalog, DublinCoreValue, Flavor, as_catalog
from ocdc.core.config import OcdcConfig
from ocdc.core.names import DEFAULT_NS_PREFIX, EName, NamespaceBinding, NamespaceContext
from ocdc.core.vocabulary import LANGUAGE_UNDEFINED, XML_NS_URI, XSI_NS_URI
from ocdc.exceptions import CatalogFormatError


ANONYMOUS_ROOT = "dublincore"
FLAVOR_ATTRIBUTE = "flavor"
ANONYMOUS_ATTRIBUTE = "anonymous"

_XML_LANG = (XML_NS_URI, "lang")
_XSI_TYPE = (XSI_NS_URI, "type")

_TEXT_ENTITIES = {"\r": "&#13;"}
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)

SaxName = Tuple[Optional[str], str]


def _sax_name(name: EName) -> SaxName:
    return (name.namespace_uri or None, name.local_name)


def _qname(name: EName, bindings: NamespaceContext) -> str:
    if not name.namespace_uri:
        if DEFAULT_NS_PREFIX in bindings:
            return "{}" + name.local_name
        return name.local_name
    prefix = bindings.prefix_for(name.namespace_uri)
    return f"{prefix}:{name.local_name}" if prefix else name.local_name


def _check_text(text: str, prop: EName) -> str:
    match = _INVALID_XML_CHARS.search(text)
    if match:
        raise CatalogFormatError(
            f"Value of {prop} contains character U+{ord(match.group()):04X} "
            f"which XML 1.0 cannot represent"
        )
    return text


def _value_attributes(
    value: DublinCoreValue,
    bindings: NamespaceContext,
) -> AttributesNSImpl:
    attrs: Dict[SaxName, str] = {}
    if value.has_language:
        attrs[_XML_LANG] = value.language
    if value.encoding_scheme is not None:
        attrs[_XSI_TYPE] = _qname(value.encoding_scheme, bindings)
    return AttributesNSImpl(attrs, {})


def write(catalog: DublinCoreCatalog, indent: Optional[int] = None) -> str:
    """Serialize a catalog to an XML document.

    Parameters
    ----------
    catalog : DublinCoreCatalog
        Catalog, or an accessor wrapping one.
    indent : Optional[int]
        Spaces of indentation per property element. Defaults to
        ``OcdcConfig.xml_indent``; 0 writes a single line.

    Returns
    -------
    str

    Raises
    ------
    CatalogFormatError
        If a value contains a character XML 1.0 cannot represent, such
        as a control character other than tab, newline or carriage return.
    """
    catalog = as_catalog(catalog)
    if indent is None:
        indent = OcdcConfig().xml_indent
    bindings = catalog.bindings
    has_default = DEFAULT_NS_PREFIX in bindings

    out = io.StringIO()
    gen = XMLGenerator(out, encoding='utf-8')
    gen.startDocument()
    for binding in bindings:
        gen.startPrefixMapping(binding.prefix or None, binding.uri)

    root_attrs: Dict[SaxName, str] = {}
    if catalog.root_tag is not None:
        root = _sax_name(catalog.root_tag)
    else:
        root = (None, ANONYMOUS_ROOT)
        if has_default:
            root_attrs[(None, ANONYMOUS_ATTRIBUTE)] = "true"
    if catalog.flavor is not None:
        root_attrs[(None, FLAVOR_ATTRIBUTE)] = str(catalog.flavor)
    gen.startElementNS(root, None, AttributesNSImpl(root_attrs, {}))

    for prop, values in catalog.values.items():
        name = _sax_name(prop)
        undeclare = has_default and not prop.namespace_uri
        for value in values:
            text = escape(_check_text(value.value, prop), _TEXT_ENTITIES)
            if indent:
                gen.ignorableWhitespace("\n" + " " * indent)
            if undeclare:
                gen.startPrefixMapping(None, "")
            gen.startElementNS(name, None, _value_attributes(value, bindings))
            # pre-escaped
            gen.ignorableWhitespace(text)
            gen.endElementNS(name, None)
            if undeclare:
                gen.endPrefixMapping(None)
    if indent and len(catalog):
        gen.ignorableWhitespace("\n")

    gen.endElementNS(root, None)
    for binding in reversed(bindings.bindings):
        gen.endPrefixMapping(binding.prefix or None)
    gen.endDocument()
    logger.debug("Wrote XML catalog with %d properties", len(catalog))
    return out.getvalue()


def _resolve_type(text: str, bindings: Dict[str, str]) -> EName:
    text = text.strip()
    if text.startswith("{"):
        return EName.from_clark(text)
    prefix, sep, local = text.rpartition(":")
    if not sep:
        prefix = DEFAULT_NS_PREFIX
    uri = bindings.get(prefix)
    if uri is None:
        if prefix == DEFAULT_NS_PREFIX:
            return EName("", local)
        raise CatalogFormatError(f"Unbound prefix in xsi:type {text!r}")
    return EName(uri, local)


def read(text: str) -> DublinCoreCatalog:
    """Parse an XML document into a catalog.

    Every namespace declared in the document becomes a catalog binding.

    Parameters
    ----------
    text : str
        XML document.

    Returns
    -------
    DublinCoreCatalog

    Raises
    ------
    xml.etree.ElementTree.ParseError
        If the document is not well-formed.
    CatalogFormatError
        If a property element has child elements, the flavor attribute
        is malformed or an ``xsi:type`` uses an unbound prefix.
    """
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    parser.feed(text)
    parser.close()

    declared: List[NamespaceBinding] = []
    root: Optional[ET.Element] = None
    for event, payload in parser.read_events():
        if root is not None:
            continue
        if event == "start-ns":
            prefix, uri = payload
            declared.append(NamespaceBinding(prefix or DEFAULT_NS_PREFIX, uri))
        else:
            root = payload
    if root is None:
        raise CatalogFormatError("Document has no root element")

    catalog = DublinCoreCatalog(bindings=declared)
    prefixes = {b.prefix: b.uri for b in declared}

    root_tag = EName.from_clark(root.tag)
    anonymous = root.get(ANONYMOUS_ATTRIBUTE) == "true"
    if not anonymous and root_tag != EName("", ANONYMOUS_ROOT):
        catalog.root_tag = root_tag

    flavor = root.get(FLAVOR_ATTRIBUTE)
    if flavor is not None:
        try:
            catalog.flavor = Flavor.parse(flavor)
        except ValueError as e:
            raise CatalogFormatError(str(e)) from e

    for element in root:
        prop = EName.from_clark(element.tag)
        if len(element):
            raise CatalogFormatError(
                f"Property {prop} must not contain child elements"
            )
        scheme = element.get("{%s}%s" % _XSI_TYPE)
        catalog.add(
            prop,
            element.text or "",
            language=element.get("{%s}%s" % _XML_LANG) or LANGUAGE_UNDEFINED,
            encoding_scheme=_resolve_type(scheme, prefixes) if scheme else None,
        )
    logger.debug("Read XML catalog with %d properties", len(catalog))
    return catalog
