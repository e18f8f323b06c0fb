# -*- coding: utf-8 -*-
"""
Catalog Models - DublinCore catalog data model.

Defines the Flavor type tag, the DublinCoreValue value object and the
DublinCoreCatalog, a mutable ordered multi-map of namespace-qualified
properties together with an optional root tag, an optional flavor and
the namespace bindings used to serialize it.

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
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set, Union

logger = logging.getLogger(__name__)

# OCDC internal
from ocdc.core.names import BindingSource, EName, NamespaceBinding, NamespaceContext
from ocdc.core.vocabulary import (
    EPISODE_SUBTYPE,
    FLAVOR_TYPE,
    LANGUAGE_ANY,
    LANGUAGE_UNDEFINED,
    PREFERRED_PREFIXES,
    SERIES_SUBTYPE,
    XSI_NS_PREFIX,
    XSI_NS_URI,
)


@dataclass(frozen=True)
class Flavor:
    """Two-part type tag classifying a catalog, e.g. ``dublincore/episode``."""

    type: str
    subtype: str

    @classmethod
    def parse(cls, text: str) -> 'Flavor':
        """Parse ``type/subtype``.

        Raises
        ------
        ValueError
            If ``text`` does not consist of two non-empty parts.
        """
        parts = text.split("/")
        if len(parts) != 2 or not all(p.strip() for p in parts):
            raise ValueError(f"Malformed flavor: {text!r}")
        return cls(parts[0].strip(), parts[1].strip())

    def __str__(self) -> str:
        return f"{self.type}/{self.subtype}"


EPISODE = Flavor(FLAVOR_TYPE, EPISODE_SUBTYPE)
SERIES = Flavor(FLAVOR_TYPE, SERIES_SUBTYPE)


@dataclass(frozen=True)
class DublinCoreValue:
    """A single property value.

    Parameters
    ----------
    value : str
        The value text.
    language : str
        Language tag, or LANGUAGE_UNDEFINED.
    encoding_scheme : Optional[EName]
        Encoding scheme of ``value``, e.g. dcterms:W3CDTF.
    """

    value: str
    language: str = LANGUAGE_UNDEFINED
    encoding_scheme: Optional[EName] = None

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("value must not be None")
        if self.language == LANGUAGE_ANY:
            raise ValueError(
                f"{LANGUAGE_ANY!r} is a query wildcard, not a storable language"
            )
        if not self.language:
            object.__setattr__(self, 'language', LANGUAGE_UNDEFINED)

    @property
    def has_language(self) -> bool:
        return self.language != LANGUAGE_UNDEFINED


ValueLike = Union[str, DublinCoreValue]


def _matches(value: DublinCoreValue, language: str) -> bool:
    return language == LANGUAGE_ANY or value.language == language


class DublinCoreCatalog:
    """Metadata catalog: an ordered multi-map of qualified properties.

    Every namespace URI that appears in a property name, the root tag or
    an encoding scheme is bound in :attr:`bindings`. Missing bindings
    are registered implicitly, using the vocabulary's preferred prefix
    when it is free.

    Parameters
    ----------
    root_tag : Optional[EName]
        Root element name used by markup serializations.
    flavor : Optional[Flavor]
        Catalog flavor.
    bindings : Optional[BindingSource]
        Initial namespace bindings.
    """

    def __init__(
        self,
        root_tag: Optional[EName] = None,
        flavor: Optional[Flavor] = None,
        bindings: Optional[BindingSource] = None,
    ) -> None:
        self._properties: Dict[EName, List[DublinCoreValue]] = {}
        self._bindings = NamespaceContext()
        self._root_tag: Optional[EName] = None
        self.flavor = flavor
        if bindings is not None:
            self.add_bindings(bindings)
        self.root_tag = root_tag

    # -- Catalog metadata ---------------------------------------------------

    @property
    def bindings(self) -> NamespaceContext:
        """A copy of the namespace bindings. Use add_bindings to extend."""
        return self._bindings.copy()

    def add_bindings(self, bindings: BindingSource) -> None:
        """Union ``bindings`` into the catalog's namespace context."""
        self._bindings.merge(bindings)

    @property
    def root_tag(self) -> Optional[EName]:
        return self._root_tag

    @root_tag.setter
    def root_tag(self, tag: Optional[EName]) -> None:
        if tag is not None:
            self._ensure_bound(tag.namespace_uri)
        self._root_tag = tag

    def _ensure_bound(self, uri: str) -> None:
        if not uri or self._bindings.is_bound(uri):
            return
        prefix = PREFERRED_PREFIXES.get(uri)
        if prefix is None or prefix in self._bindings:
            prefix = self._bindings.free_prefix("ns")
        logger.debug("Implicitly binding namespace %s as '%s'", uri, prefix)
        self._bindings.add(NamespaceBinding(prefix, uri))

    # -- Mutation -----------------------------------------------------------

    def _store(self, prop: EName, value: DublinCoreValue) -> None:
        self._ensure_bound(prop.namespace_uri)
        if value.encoding_scheme is not None:
            self._ensure_bound(value.encoding_scheme.namespace_uri)
            if not self._bindings.is_bound(XSI_NS_URI):
                self._bindings.add(NamespaceBinding(XSI_NS_PREFIX, XSI_NS_URI))
        self._properties.setdefault(prop, []).append(value)

    def add(
        self,
        prop: EName,
        value: ValueLike,
        language: str = LANGUAGE_UNDEFINED,
        encoding_scheme: Optional[EName] = None,
    ) -> None:
        """Append a value to a property, keeping existing values.

        Parameters
        ----------
        prop : EName
            Property name.
        value : ValueLike
            Value text, or a complete DublinCoreValue (in which case
            ``language`` and ``encoding_scheme`` are ignored).
        language : str
            Language of a text value.
        encoding_scheme : Optional[EName]
            Encoding scheme of a text value.
        """
        if not isinstance(value, DublinCoreValue):
            value = DublinCoreValue(value, language, encoding_scheme)
        self._store(prop, value)

    def set(
        self,
        prop: EName,
        value: Union[None, ValueLike, Iterable[DublinCoreValue]],
        language: str = LANGUAGE_UNDEFINED,
    ) -> None:
        """Replace property values.

        A text value or a DublinCoreValue replaces the values of the same
        language only. A list of values replaces all values; plain texts
        in the list take ``language``. None removes the values of
        ``language``.
        """
        if value is None:
            self.remove(prop, language)
            return
        if isinstance(value, (str, DublinCoreValue)):
            if isinstance(value, str):
                value = DublinCoreValue(value, language)
            self.remove(prop, value.language)
            self._store(prop, value)
            return
        values = [
            v if isinstance(v, DublinCoreValue) else DublinCoreValue(v, language)
            for v in value
        ]
        self.remove(prop)
        for v in values:
            self._store(prop, v)

    def remove(self, prop: EName, language: str = LANGUAGE_ANY) -> None:
        """Remove the values of ``prop`` in ``language`` (all by default)."""
        values = self._properties.get(prop)
        if values is None:
            return
        kept = [v for v in values if not _matches(v, language)]
        if kept:
            self._properties[prop] = kept
        else:
            del self._properties[prop]

    def clear(self) -> None:
        """Remove all properties. Bindings, root tag and flavor are kept."""
        self._properties.clear()

    # -- Access -------------------------------------------------------------

    def get_values(
        self,
        prop: EName,
        language: str = LANGUAGE_ANY,
    ) -> List[DublinCoreValue]:
        return [
            v for v in self._properties.get(prop, []) if _matches(v, language)
        ]

    def get(self, prop: EName, language: str = LANGUAGE_ANY) -> List[str]:
        """Return the value texts of ``prop`` in ``language``."""
        return [v.value for v in self.get_values(prop, language)]

    def get_first_value(
        self,
        prop: EName,
        language: str = LANGUAGE_ANY,
    ) -> Optional[DublinCoreValue]:
        """Return the first value of ``prop`` in ``language``.

        For LANGUAGE_ANY a value without language is preferred over the
        first value of any language.
        """
        values = self.get_values(prop, language)
        if not values:
            return None
        if language == LANGUAGE_ANY:
            for v in values:
                if not v.has_language:
                    return v
        return values[0]

    def get_first(
        self,
        prop: EName,
        language: str = LANGUAGE_ANY,
    ) -> Optional[str]:
        value = self.get_first_value(prop, language)
        return value.value if value is not None else None

    def get_as_text(
        self,
        prop: EName,
        language: str = LANGUAGE_ANY,
        delimiter: str = ", ",
    ) -> Optional[str]:
        """Join all value texts of ``prop``, or None if there are none."""
        values = self.get(prop, language)
        return delimiter.join(values) if values else None

    def has_value(self, prop: EName, language: str = LANGUAGE_ANY) -> bool:
        return bool(self.get_values(prop, language))

    def has_multiple_values(
        self,
        prop: EName,
        language: str = LANGUAGE_ANY,
    ) -> bool:
        return len(self.get_values(prop, language)) > 1

    def languages(self, prop: EName) -> Set[str]:
        return {v.language for v in self._properties.get(prop, [])}

    @property
    def properties(self) -> List[EName]:
        """Property names in insertion order."""
        return list(self._properties)

    @property
    def values(self) -> Dict[EName, List[DublinCoreValue]]:
        """A copy of the property multi-map."""
        return {k: list(v) for k, v in self._properties.items()}

    def copy(self) -> 'DublinCoreCatalog':
        """Return an independent copy of this catalog."""
        clone = DublinCoreCatalog(flavor=self.flavor, bindings=self._bindings)
        clone._root_tag = self._root_tag
        clone._properties = self.values
        return clone

    def __contains__(self, prop: object) -> bool:
        return prop in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DublinCoreCatalog):
            return NotImplemented
        return (
            self.flavor == other.flavor
            and self._root_tag == other._root_tag
            and self._bindings == other._bindings
            and self._properties == other._properties
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"DublinCoreCatalog(flavor={str(self.flavor) if self.flavor else None!r}, "
            f"root_tag={self._root_tag!r}, properties={len(self._properties)})"
        )


def as_catalog(obj: Any) -> DublinCoreCatalog:
    """Return the catalog behind ``obj``, which may be a catalog or an accessor."""
    if isinstance(obj, DublinCoreCatalog):
        return obj
    catalog = getattr(obj, 'catalog', None)
    if isinstance(catalog, DublinCoreCatalog):
        return catalog
    raise TypeError(f"Expected a DublinCoreCatalog, got {type(obj).__name__}")
