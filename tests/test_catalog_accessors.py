# -*- coding: utf-8 -*-
"""
Tests for ocdc.catalog.accessors - Episode and Series accessors.

Created
-------
2026-10-18
"""

from datetime import datetime, timezone

import pytest

from ocdc.catalog.accessors import Episode, Series
from ocdc.catalog.models import DublinCoreCatalog
from ocdc.core import vocabulary as voc


UTC = timezone.utc


@pytest.fixture
def catalog():
    return DublinCoreCatalog()


class TestAliasing:

    def test_writes_reach_catalog(self, catalog):
        episode = Episode(catalog)
        episode.title = "Lecture"
        assert catalog.get(voc.PROPERTY_TITLE) == ["Lecture"]

    def test_reads_see_catalog_changes(self, catalog):
        episode = Episode(catalog)
        catalog.add(voc.PROPERTY_TITLE, "Direct")
        assert episode.title == "Direct"

    def test_shares_identity(self, catalog):
        assert Episode(catalog).catalog is catalog


class TestCommonProperties:

    def test_identifier(self, catalog):
        episode = Episode(catalog)
        assert episode.dc_identifier is None
        episode.dc_identifier = "abc"
        assert catalog.get(voc.PROPERTY_IDENTIFIER) == ["abc"]
        episode.dc_identifier = "def"
        assert catalog.get(voc.PROPERTY_IDENTIFIER) == ["def"]
        episode.dc_identifier = None
        assert voc.PROPERTY_IDENTIFIER not in catalog

    def test_setter_replaces_all_languages(self, catalog):
        catalog.add(voc.PROPERTY_TITLE, "Hallo", language="de")
        Episode(catalog).title = "Hello"
        assert catalog.get(voc.PROPERTY_TITLE) == ["Hello"]

    def test_lists(self, catalog):
        series = Series(catalog)
        series.creators = ["Alice", "Bob"]
        series.contributors = ["Carol"]
        series.publishers = ["University"]
        series.subjects = ["Physics", "Optics"]
        assert series.creators == ["Alice", "Bob"]
        assert series.contributors == ["Carol"]
        assert series.publishers == ["University"]
        assert catalog.get(voc.PROPERTY_SUBJECT) == ["Physics", "Optics"]

    def test_text_properties(self, catalog):
        episode = Episode(catalog)
        episode.description = "About optics"
        episode.language = "eng"
        episode.license = "CC-BY"
        episode.rights_holder = "University"
        assert episode.description == "About optics"
        assert episode.language == "eng"
        assert episode.license == "CC-BY"
        assert episode.rights_holder == "University"

    def test_created_is_w3cdtf(self, catalog):
        episode = Episode(catalog)
        episode.created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        value = catalog.get_first_value(voc.PROPERTY_CREATED)
        assert value.value == "2024-01-02T03:04:05Z"
        assert value.encoding_scheme == voc.ENC_SCHEME_W3CDTF
        assert episode.created == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_unparsable_date_reads_none(self, catalog):
        catalog.add(voc.PROPERTY_AVAILABLE, "soon")
        assert Episode(catalog).available is None


class TestEpisode:

    def test_is_part_of(self, catalog):
        episode = Episode(catalog)
        episode.is_part_of = "series-1"
        assert catalog.get_first(voc.PROPERTY_IS_PART_OF) == "series-1"

    def test_temporal(self, catalog):
        episode = Episode(catalog)
        start = datetime(2024, 1, 1, 10, 0, tzinfo=UTC)
        end = datetime(2024, 1, 1, 11, 0, tzinfo=UTC)
        episode.set_temporal(start, end)
        assert episode.temporal == (start, end)
        value = catalog.get_first_value(voc.PROPERTY_TEMPORAL)
        assert value.encoding_scheme == voc.ENC_SCHEME_PERIOD
        episode.set_temporal(None, None)
        assert episode.temporal is None

    def test_extent(self, catalog):
        episode = Episode(catalog)
        episode.extent = 3_600_000
        assert catalog.get_first(voc.PROPERTY_EXTENT) == "PT1H0M0.000S"
        assert episode.extent == 3_600_000
        episode.extent = None
        assert episode.extent is None

    def test_duration(self, catalog):
        episode = Episode(catalog)
        episode.duration = 90_500
        assert catalog.get_first(voc.OC_PROPERTY_DURATION) == "90500"
        assert episode.duration == 90_500
        catalog.set(voc.OC_PROPERTY_DURATION, "PT1M30.5S")
        assert episode.duration == 90_500
        episode.duration = None
        assert voc.OC_PROPERTY_DURATION not in catalog
        with pytest.raises(ValueError):
            episode.duration = -1

    def test_opencast_properties(self, catalog):
        episode = Episode(catalog)
        episode.agent_timezone = "America/Chicago"
        episode.recurrence = "FREQ=WEEKLY;BYDAY=MO"
        episode.spatial = "room-101"
        episode.source = "upload"
        episode.audience = "students"
        assert catalog.get_first(voc.OC_PROPERTY_AGENT_TIMEZONE) == "America/Chicago"
        assert episode.recurrence == "FREQ=WEEKLY;BYDAY=MO"
        assert episode.spatial == "room-101"
        assert episode.source == "upload"
        assert episode.audience == "students"


class TestSeries:

    def test_flags(self, catalog):
        series = Series(catalog)
        assert series.promoted is None
        series.promoted = True
        series.advertised = False
        series.annotation = True
        assert catalog.get_first(voc.OC_PROPERTY_PROMOTED) == "true"
        assert series.promoted is True
        assert series.advertised is False
        assert series.annotation is True
        series.promoted = None
        assert voc.OC_PROPERTY_PROMOTED not in catalog
