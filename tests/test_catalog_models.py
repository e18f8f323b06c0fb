# -*- coding: utf-8 -*-
"""
Tests for ocdc.catalog.models - Flavor, DublinCoreValue, DublinCoreCatalog.

Created
-------
2026-10-18
"""

import pytest

from ocdc.catalog.accessors import Episode
from ocdc.catalog.models import (
    EPISODE,
    SERIES,
    DublinCoreCatalog,
    DublinCoreValue,
    Flavor,
    as_catalog,
)
from ocdc.core import vocabulary as voc
from ocdc.core.names import EName, NamespaceBinding


TITLE = voc.PROPERTY_TITLE
CREATOR = voc.PROPERTY_CREATOR
CUSTOM = EName("http://example.org/custom/", "field")


class TestFlavor:

    def test_parse_and_str(self):
        flavor = Flavor.parse("dublincore/episode")
        assert flavor == EPISODE
        assert str(flavor) == "dublincore/episode"

    def test_well_known(self):
        assert SERIES == Flavor("dublincore", "series")
        assert EPISODE != SERIES

    @pytest.mark.parametrize("text", ["dublincore", "a/b/c", "/episode", "a/"])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            Flavor.parse(text)


class TestDublinCoreValue:

    def test_defaults(self):
        value = DublinCoreValue("x")
        assert value.language == voc.LANGUAGE_UNDEFINED
        assert value.encoding_scheme is None
        assert not value.has_language

    def test_any_language_rejected(self):
        with pytest.raises(ValueError):
            DublinCoreValue("x", voc.LANGUAGE_ANY)

    def test_empty_language_is_undefined(self):
        assert DublinCoreValue("x", "").language == voc.LANGUAGE_UNDEFINED


class TestCatalogMutation:

    def test_empty(self):
        catalog = DublinCoreCatalog()
        assert len(catalog) == 0
        assert catalog.root_tag is None
        assert catalog.flavor is None
        assert len(catalog.bindings) == 0

    def test_add_keeps_order(self):
        catalog = DublinCoreCatalog()
        catalog.add(CREATOR, "Alice")
        catalog.add(CREATOR, "Bob")
        catalog.add(CREATOR, "Alice")
        assert catalog.get(CREATOR) == ["Alice", "Bob", "Alice"]
        assert catalog.has_multiple_values(CREATOR)

    def test_set_replaces_same_language_only(self):
        catalog = DublinCoreCatalog()
        catalog.add(TITLE, "Hallo", language="de")
        catalog.add(TITLE, "Hello", language="en")
        catalog.set(TITLE, "Hi", language="en")
        assert catalog.get(TITLE, "en") == ["Hi"]
        assert catalog.get(TITLE, "de") == ["Hallo"]

    def test_set_list_replaces_all(self):
        catalog = DublinCoreCatalog()
        catalog.add(TITLE, "Hallo", language="de")
        catalog.set(TITLE, [DublinCoreValue("One"), "Two"])
        assert catalog.get(TITLE) == ["One", "Two"]

    def test_set_none_removes_language(self):
        catalog = DublinCoreCatalog()
        catalog.add(TITLE, "Hello", language="en")
        catalog.add(TITLE, "Untagged")
        catalog.set(TITLE, None)
        assert catalog.get(TITLE) == ["Hello"]

    def test_remove(self):
        catalog = DublinCoreCatalog()
        catalog.add(TITLE, "Hello", language="en")
        catalog.add(TITLE, "Hallo", language="de")
        catalog.remove(TITLE, "de")
        assert catalog.get(TITLE) == ["Hello"]
        catalog.remove(TITLE)
        assert TITLE not in catalog
        catalog.remove(TITLE)  # Should not raise

    def test_clear_keeps_metadata(self):
        catalog = DublinCoreCatalog(root_tag=voc.OC_DC_CATALOG_ROOT_ELEMENT, flavor=EPISODE)
        catalog.add(TITLE, "x")
        catalog.clear()
        assert len(catalog) == 0
        assert catalog.flavor == EPISODE
        assert catalog.root_tag == voc.OC_DC_CATALOG_ROOT_ELEMENT


class TestCatalogAccess:

    @pytest.fixture
    def catalog(self):
        catalog = DublinCoreCatalog()
        catalog.add(TITLE, "Hello", language="en")
        catalog.add(TITLE, "Plain")
        catalog.add(TITLE, "Hallo", language="de")
        return catalog

    def test_get_first_prefers_undefined_language(self, catalog):
        assert catalog.get_first(TITLE) == "Plain"
        assert catalog.get_first(TITLE, "de") == "Hallo"
        assert catalog.get_first(CREATOR) is None

    def test_get_first_value(self, catalog):
        value = catalog.get_first_value(TITLE, "en")
        assert value == DublinCoreValue("Hello", "en")

    def test_get_as_text(self, catalog):
        assert catalog.get_as_text(TITLE) == "Hello, Plain, Hallo"
        assert catalog.get_as_text(TITLE, delimiter="|") == "Hello|Plain|Hallo"
        assert catalog.get_as_text(CREATOR) is None

    def test_languages(self, catalog):
        assert catalog.languages(TITLE) == {"en", "de", voc.LANGUAGE_UNDEFINED}

    def test_has_value(self, catalog):
        assert catalog.has_value(TITLE)
        assert catalog.has_value(TITLE, "en")
        assert not catalog.has_value(TITLE, "fr")
        assert not catalog.has_multiple_values(TITLE, "en")

    def test_properties_in_insertion_order(self):
        catalog = DublinCoreCatalog()
        catalog.add(CREATOR, "a")
        catalog.add(TITLE, "b")
        catalog.add(CREATOR, "c")
        assert catalog.properties == [CREATOR, TITLE]

    def test_values_is_a_copy(self, catalog):
        values = catalog.values
        values[TITLE].append(DublinCoreValue("x"))
        assert len(catalog.get(TITLE)) == 3


class TestImplicitBindings:

    def test_property_namespace_bound_with_preferred_prefix(self):
        catalog = DublinCoreCatalog()
        catalog.add(TITLE, "x")
        assert catalog.bindings.uri_for("dcterms") == voc.TERMS_NS_URI

    def test_unknown_namespace_gets_generated_prefix(self):
        catalog = DublinCoreCatalog()
        catalog.add(CUSTOM, "x")
        assert catalog.bindings.prefix_for(CUSTOM.namespace_uri) == "ns1"

    def test_preferred_prefix_taken(self):
        catalog = DublinCoreCatalog(bindings=[
            NamespaceBinding("dcterms", "http://example.org/not-dcterms/"),
        ])
        catalog.add(TITLE, "x")
        assert catalog.bindings.prefix_for(voc.TERMS_NS_URI) == "ns1"

    def test_encoding_scheme_binds_xsi(self):
        catalog = DublinCoreCatalog()
        catalog.add(voc.PROPERTY_CREATED, "2024", encoding_scheme=voc.ENC_SCHEME_W3CDTF)
        assert catalog.bindings.uri_for("xsi") == voc.XSI_NS_URI

    def test_root_tag_bound(self):
        catalog = DublinCoreCatalog(root_tag=EName("http://example.org/root/", "doc"))
        assert catalog.bindings.is_bound("http://example.org/root/")

    def test_add_bindings_is_union(self):
        catalog = DublinCoreCatalog()
        catalog.add_bindings([NamespaceBinding("a", "http://a/")])
        catalog.add_bindings([NamespaceBinding("b", "http://b/")])
        assert catalog.bindings.to_dict() == {"a": "http://a/", "b": "http://b/"}

    def test_bindings_property_is_a_copy(self):
        catalog = DublinCoreCatalog()
        catalog.bindings.add(NamespaceBinding("a", "http://a/"))
        assert len(catalog.bindings) == 0


class TestCatalogEquality:

    def test_equal_catalogs(self):
        a = DublinCoreCatalog(flavor=EPISODE)
        b = DublinCoreCatalog(flavor=EPISODE)
        a.add(TITLE, "x")
        b.add(TITLE, "x")
        assert a == b

    def test_value_order_matters(self):
        a = DublinCoreCatalog()
        b = DublinCoreCatalog()
        a.add(CREATOR, "1")
        a.add(CREATOR, "2")
        b.add(CREATOR, "2")
        b.add(CREATOR, "1")
        assert a != b

    def test_flavor_matters(self):
        assert DublinCoreCatalog(flavor=EPISODE) != DublinCoreCatalog(flavor=SERIES)

    def test_copy_is_independent(self):
        catalog = DublinCoreCatalog(flavor=EPISODE, root_tag=voc.OC_DC_CATALOG_ROOT_ELEMENT)
        catalog.add(TITLE, "x")
        clone = catalog.copy()
        assert clone == catalog
        clone.add(TITLE, "y")
        assert clone != catalog
        assert catalog.get(TITLE) == ["x"]


class TestAsCatalog:

    def test_catalog_passthrough(self):
        catalog = DublinCoreCatalog()
        assert as_catalog(catalog) is catalog

    def test_accessor_unwrapped(self):
        catalog = DublinCoreCatalog()
        assert as_catalog(Episode(catalog)) is catalog

    def test_other_raises(self):
        with pytest.raises(TypeError):
            as_catalog("not a catalog")
