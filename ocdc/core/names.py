# -*- coding: utf-8 -*-
"""
Qualified Names - Namespace-qualified property names and bindings.

Defines EName (namespace URI + local name), NamespaceBinding (prefix +
URI) and NamespaceContext, the ordered accumulation of bindings that a
catalog carries over its lifetime.

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
from typing import Dict, Iterable, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_NS_PREFIX = ""


@dataclass(frozen=True)
class EName:
    """An expanded (namespace-qualified) name.

    Parameters
    ----------
    namespace_uri : str
        Namespace URI. Empty string means "no namespace".
    local_name : str
        Local part of the name.
    """

    namespace_uri: str
    local_name: str

    def __post_init__(self) -> None:
        if not self.local_name:
            raise ValueError("local_name must not be empty")
        if self.namespace_uri is None:
            object.__setattr__(self, 'namespace_uri', "")

    @property
    def has_namespace(self) -> bool:
        return self.namespace_uri != ""

    def to_clark(self) -> str:
        """Return the name in Clark notation, ``{uri}local``."""
        if self.namespace_uri:
            return f"{{{self.namespace_uri}}}{self.local_name}"
        return self.local_name

    @classmethod
    def from_clark(cls, text: str) -> 'EName':
        """Parse a name in Clark notation.

        Parameters
        ----------
        text : str
            ``{uri}local`` or a bare ``local`` name.

        Returns
        -------
        EName

        Raises
        ------
        ValueError
            If the braces are unbalanced or the local name is empty.
        """
        if text.startswith("{"):
            end = text.find("}")
            if end < 0:
                raise ValueError(f"Malformed Clark name: {text!r}")
            return cls(text[1:end], text[end + 1:])
        return cls("", text)

    def __str__(self) -> str:
        return self.to_clark()


@dataclass(frozen=True)
class NamespaceBinding:
    """An immutable (prefix, URI) pair.

    The empty prefix binds the default namespace.
    """

    prefix: str
    uri: str


BindingSource = Union['NamespaceContext', Iterable[NamespaceBinding]]


class NamespaceContext:
    """Ordered accumulation of namespace bindings (prefix -> URI).

    Bindings are only ever added. Registering a prefix that is already
    bound to another URI keeps the existing binding and binds the new
    URI under a derived prefix, so neither URI is lost.

    Parameters
    ----------
    bindings : Optional[Iterable[NamespaceBinding]]
        Initial bindings, registered in order.
    """

    def __init__(
        self,
        bindings: Optional[Iterable[NamespaceBinding]] = None,
    ) -> None:
        self._by_prefix: Dict[str, str] = {}
        if bindings is not None:
            self.merge(bindings)

    @classmethod
    def of(cls, *bindings: NamespaceBinding) -> 'NamespaceContext':
        """Create a context from bindings given as arguments."""
        return cls(bindings)

    def add(self, binding: NamespaceBinding) -> NamespaceBinding:
        """Register a single binding.

        Parameters
        ----------
        binding : NamespaceBinding

        Returns
        -------
        NamespaceBinding
            The binding actually registered. Differs from ``binding``
            only when its prefix was taken by another URI.
        """
        existing = self._by_prefix.get(binding.prefix)
        if existing is None:
            self._by_prefix[binding.prefix] = binding.uri
            return binding
        if existing == binding.uri:
            return binding

        prefix = self.free_prefix(binding.prefix or "ns")
        logger.warning(
            "Namespace prefix '%s' already bound to %s; binding %s as '%s'",
            binding.prefix, existing, binding.uri, prefix,
        )
        rebound = NamespaceBinding(prefix, binding.uri)
        self._by_prefix[prefix] = binding.uri
        return rebound

    def merge(self, bindings: BindingSource) -> None:
        """Union another set of bindings into this context."""
        for binding in bindings:
            self.add(binding)

    def free_prefix(self, base: str) -> str:
        """Return the first unused prefix of the form ``base1``, ``base2``..."""
        n = 1
        while f"{base}{n}" in self._by_prefix:
            n += 1
        return f"{base}{n}"

    def uri_for(self, prefix: str) -> Optional[str]:
        return self._by_prefix.get(prefix)

    def prefix_for(self, uri: str) -> Optional[str]:
        """Return the first prefix registered for ``uri``, or None."""
        for prefix, bound in self._by_prefix.items():
            if bound == uri:
                return prefix
        return None

    def is_bound(self, uri: str) -> bool:
        return uri in self._by_prefix.values()

    @property
    def bindings(self) -> List[NamespaceBinding]:
        return [NamespaceBinding(p, u) for p, u in self._by_prefix.items()]

    def to_dict(self) -> Dict[str, str]:
        return dict(self._by_prefix)

    def copy(self) -> 'NamespaceContext':
        return NamespaceContext(self.bindings)

    def __iter__(self) -> Iterator[NamespaceBinding]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self._by_prefix)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._by_prefix

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamespaceContext):
            return NotImplemented
        return self._by_prefix == other._by_prefix

    def __repr__(self) -> str:
        return f"NamespaceContext({self._by_prefix!r})"
