# -*- coding: utf-8 -*-
"""
Catalog Accessors - Typed Opencast views over a DublinCore catalog.

An accessor holds a reference to a DublinCoreCatalog and reads and
writes well-known DCMI terms and Opencast properties on it directly.
No copy is made: changes through the accessor are changes to the
wrapped catalog, and vice versa.

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
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

# OCDC internal
from ocdc.catalog.models import DublinCoreCatalog, DublinCoreValue
from ocdc.core import vocabulary as voc
from ocdc.core.encodings import (
    decode_date,
    decode_duration,
    decode_period,
    encode_date,
    encode_duration,
    encode_period,
)
from ocdc.core.names import EName


class OpencastDctermsDublinCore:
    """Accessor for properties shared by Opencast episodes and series.

    Parameters
    ----------
    catalog : DublinCoreCatalog
        The catalog to read and modify.
    """

    def __init__(self, catalog: DublinCoreCatalog) -> None:
        self.catalog = catalog

    # -- Helpers ------------------------------------------------------------

    def _get(self, prop: EName) -> Optional[str]:
        return self.catalog.get_first(prop)

    def _set(self, prop: EName, value: Optional[str]) -> None:
        if value is None:
            self.catalog.remove(prop)
        else:
            self.catalog.set(prop, [DublinCoreValue(value)])

    def _get_list(self, prop: EName) -> List[str]:
        return self.catalog.get(prop)

    def _set_list(self, prop: EName, values: Iterable[str]) -> None:
        self.catalog.set(prop, [DublinCoreValue(v) for v in values])

    def _get_date(self, prop: EName) -> Optional[datetime]:
        text = self._get(prop)
        return decode_date(text) if text is not None else None

    def _set_date(self, prop: EName, value: Optional[datetime]) -> None:
        if value is None:
            self.catalog.remove(prop)
        else:
            self.catalog.set(prop, [DublinCoreValue(
                encode_date(value), encoding_scheme=voc.ENC_SCHEME_W3CDTF,
            )])

    def _get_flag(self, prop: EName) -> Optional[bool]:
        text = self._get(prop)
        return text.strip().lower() == "true" if text is not None else None

    def _set_flag(self, prop: EName, value: Optional[bool]) -> None:
        self._set(prop, None if value is None else str(bool(value)).lower())

    # -- Common properties --------------------------------------------------

    @property
    def dc_identifier(self) -> Optional[str]:
        """The ``dcterms:identifier`` property."""
        return self._get(voc.PROPERTY_IDENTIFIER)

    @dc_identifier.setter
    def dc_identifier(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_IDENTIFIER, value)

    @property
    def title(self) -> Optional[str]:
        return self._get(voc.PROPERTY_TITLE)

    @title.setter
    def title(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_TITLE, value)

    @property
    def description(self) -> Optional[str]:
        return self._get(voc.PROPERTY_DESCRIPTION)

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_DESCRIPTION, value)

    @property
    def creators(self) -> List[str]:
        return self._get_list(voc.PROPERTY_CREATOR)

    @creators.setter
    def creators(self, values: Iterable[str]) -> None:
        self._set_list(voc.PROPERTY_CREATOR, values)

    @property
    def contributors(self) -> List[str]:
        return self._get_list(voc.PROPERTY_CONTRIBUTOR)

    @contributors.setter
    def contributors(self, values: Iterable[str]) -> None:
        self._set_list(voc.PROPERTY_CONTRIBUTOR, values)

    @property
    def publishers(self) -> List[str]:
        return self._get_list(voc.PROPERTY_PUBLISHER)

    @publishers.setter
    def publishers(self, values: Iterable[str]) -> None:
        self._set_list(voc.PROPERTY_PUBLISHER, values)

    @property
    def subjects(self) -> List[str]:
        return self._get_list(voc.PROPERTY_SUBJECT)

    @subjects.setter
    def subjects(self, values: Iterable[str]) -> None:
        self._set_list(voc.PROPERTY_SUBJECT, values)

    @property
    def language(self) -> Optional[str]:
        return self._get(voc.PROPERTY_LANGUAGE)

    @language.setter
    def language(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_LANGUAGE, value)

    @property
    def license(self) -> Optional[str]:
        return self._get(voc.PROPERTY_LICENSE)

    @license.setter
    def license(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_LICENSE, value)

    @property
    def rights_holder(self) -> Optional[str]:
        return self._get(voc.PROPERTY_RIGHTS_HOLDER)

    @rights_holder.setter
    def rights_holder(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_RIGHTS_HOLDER, value)

    @property
    def created(self) -> Optional[datetime]:
        """``dcterms:created``, W3C-DTF encoded. None if absent or unparsable."""
        return self._get_date(voc.PROPERTY_CREATED)

    @created.setter
    def created(self, value: Optional[datetime]) -> None:
        self._set_date(voc.PROPERTY_CREATED, value)

    @property
    def available(self) -> Optional[datetime]:
        return self._get_date(voc.PROPERTY_AVAILABLE)

    @available.setter
    def available(self, value: Optional[datetime]) -> None:
        self._set_date(voc.PROPERTY_AVAILABLE, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.catalog!r})"


class Episode(OpencastDctermsDublinCore):
    """Accessor for Opencast episode catalogs."""

    @property
    def is_part_of(self) -> Optional[str]:
        """Identifier of the series this episode belongs to."""
        return self._get(voc.PROPERTY_IS_PART_OF)

    @is_part_of.setter
    def is_part_of(self, series_id: Optional[str]) -> None:
        self._set(voc.PROPERTY_IS_PART_OF, series_id)

    @property
    def spatial(self) -> Optional[str]:
        """Location of the recording, usually the capture agent name."""
        return self._get(voc.PROPERTY_SPATIAL)

    @spatial.setter
    def spatial(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_SPATIAL, value)

    @property
    def source(self) -> Optional[str]:
        return self._get(voc.PROPERTY_SOURCE)

    @source.setter
    def source(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_SOURCE, value)

    @property
    def audience(self) -> Optional[str]:
        return self._get(voc.PROPERTY_AUDIENCE)

    @audience.setter
    def audience(self, value: Optional[str]) -> None:
        self._set(voc.PROPERTY_AUDIENCE, value)

    @property
    def temporal(self) -> Optional[Tuple[Optional[datetime], Optional[datetime]]]:
        """``(start, end)`` of the recording period, or None."""
        text = self._get(voc.PROPERTY_TEMPORAL)
        period = decode_period(text) if text is not None else None
        return (period[0], period[1]) if period is not None else None

    def set_temporal(
        self,
        start: Optional[datetime],
        end: Optional[datetime],
        name: Optional[str] = None,
    ) -> None:
        """Set ``dcterms:temporal`` as a DCMI Period.

        Both bounds None removes the property.
        """
        if start is None and end is None:
            self.catalog.remove(voc.PROPERTY_TEMPORAL)
            return
        self.catalog.set(voc.PROPERTY_TEMPORAL, [DublinCoreValue(
            encode_period(start, end, name),
            encoding_scheme=voc.ENC_SCHEME_PERIOD,
        )])

    @property
    def extent(self) -> Optional[int]:
        """Duration in milliseconds (``dcterms:extent``)."""
        text = self._get(voc.PROPERTY_EXTENT)
        return decode_duration(text) if text is not None else None

    @extent.setter
    def extent(self, millis: Optional[int]) -> None:
        if millis is None:
            self.catalog.remove(voc.PROPERTY_EXTENT)
            return
        self.catalog.set(voc.PROPERTY_EXTENT, [DublinCoreValue(
            encode_duration(millis), encoding_scheme=voc.ENC_SCHEME_ISO8601,
        )])

    @property
    def duration(self) -> Optional[int]:
        """Recording duration in milliseconds (``oc:duration``).

        Stored as a plain millisecond count. ISO 8601 text written by
        other tools is also accepted.
        """
        text = self._get(voc.OC_PROPERTY_DURATION)
        return decode_duration(text) if text is not None else None

    @duration.setter
    def duration(self, millis: Optional[int]) -> None:
        if millis is not None and millis < 0:
            raise ValueError(f"Duration must not be negative: {millis}")
        self._set(voc.OC_PROPERTY_DURATION,
                  str(int(millis)) if millis is not None else None)

    @property
    def agent_timezone(self) -> Optional[str]:
        return self._get(voc.OC_PROPERTY_AGENT_TIMEZONE)

    @agent_timezone.setter
    def agent_timezone(self, value: Optional[str]) -> None:
        self._set(voc.OC_PROPERTY_AGENT_TIMEZONE, value)

    @property
    def recurrence(self) -> Optional[str]:
        """RFC 2445 recurrence rule of a scheduled event."""
        return self._get(voc.OC_PROPERTY_RECURRENCE)

    @recurrence.setter
    def recurrence(self, value: Optional[str]) -> None:
        self._set(voc.OC_PROPERTY_RECURRENCE, value)


class Series(OpencastDctermsDublinCore):
    """Accessor for Opencast series catalogs."""

    @property
    def annotation(self) -> Optional[bool]:
        return self._get_flag(voc.OC_PROPERTY_ANNOTATION)

    @annotation.setter
    def annotation(self, value: Optional[bool]) -> None:
        self._set_flag(voc.OC_PROPERTY_ANNOTATION, value)

    @property
    def advertised(self) -> Optional[bool]:
        return self._get_flag(voc.OC_PROPERTY_ADVERTISED)

    @advertised.setter
    def advertised(self, value: Optional[bool]) -> None:
        self._set_flag(voc.OC_PROPERTY_ADVERTISED, value)

    @property
    def promoted(self) -> Optional[bool]:
        return self._get_flag(voc.OC_PROPERTY_PROMOTED)

    @promoted.setter
    def promoted(self, value: Optional[bool]) -> None:
        self._set_flag(voc.OC_PROPERTY_PROMOTED, value)
