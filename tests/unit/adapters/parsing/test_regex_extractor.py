"""
Tests unitaires pour RegexDescriptorExtractor.

Couvre les motifs SxxExx et NxNN, l'extraction des tags et les noms
non reconnus.
"""

import pytest

from episort.adapters.parsing.regex_extractor import RegexDescriptorExtractor, extract_tags
from episort.core.value_objects import Descriptor


@pytest.fixture
def extractor() -> RegexDescriptorExtractor:
    return RegexDescriptorExtractor()


class TestSeasonEpisodePatterns:
    """Tests pour la reconnaissance saison/épisode."""

    @pytest.mark.parametrize(
        "filename,season,episode",
        [
            ("Show.Name.S01E02.mkv", 1, 2),
            ("show.name.s1e2.mkv", 1, 2),
            ("Show Name - S03.E10 - Title.mkv", 3, 10),
            ("Show_Name_S02_E05.avi", 2, 5),
            ("Show Name-S123E04.mkv", 123, 4),
            ("Show.Name.1x02.mkv", 1, 2),
            ("Show Name 12x103.mp4", 12, 103),
        ],
    )
    def test_recognized_patterns(
        self, extractor: RegexDescriptorExtractor, filename: str, season: int, episode: int
    ) -> None:
        descriptor = extractor.extract(filename)

        assert descriptor is not None
        assert (descriptor.season, descriptor.episode) == (season, episode)

    def test_sxxexx_has_priority_over_nxnn(self, extractor: RegexDescriptorExtractor) -> None:
        """Un titre contenant 4x05 ne masque pas le marqueur SxxExx."""
        descriptor = extractor.extract("Show 4x05 Returns S01E02.mkv")

        assert descriptor is not None
        assert (descriptor.season, descriptor.episode) == (1, 2)

    def test_first_sxxexx_wins(self, extractor: RegexDescriptorExtractor) -> None:
        descriptor = extractor.extract("Show.S01E02.S01E03.mkv")

        assert descriptor is not None
        assert descriptor.episode == 2

    @pytest.mark.parametrize(
        "filename",
        [
            "notes.txt",
            "Movie.2010.1080p.BluRay.mkv",
            "Video.1920x1080.mkv",
            "Sample.mkv",
            "Best.Series.mkv",
        ],
    )
    def test_no_match(self, extractor: RegexDescriptorExtractor, filename: str) -> None:
        assert extractor.extract(filename) is None

    def test_generated_name_is_recognized(self, extractor: RegexDescriptorExtractor) -> None:
        """Les noms produits par le planificateur sont reconnus à l'identique."""
        descriptor = extractor.extract("Show Name-S01E02-Pilot (Part 1).[720p].[x264].mkv")

        assert descriptor == Descriptor(season=1, episode=2, tags=("720p", "x264"))


class TestTags:
    """Tests pour l'extraction des tags entre crochets."""

    def test_tags_in_order_of_appearance(self) -> None:
        assert extract_tags("[GRP] Show.S01E02.[1080p][x265].mkv") == ("GRP", "1080p", "x265")

    def test_duplicates_are_kept(self) -> None:
        assert extract_tags("Show.S01E02.[720p].[720p].mkv") == ("720p", "720p")

    def test_tags_are_raw(self) -> None:
        assert extract_tags("Show.S01E02.[ Web DL ].mkv") == (" Web DL ",)

    def test_empty_brackets_are_ignored(self) -> None:
        assert extract_tags("Show.S01E02.[].mkv") == ()

    def test_descriptor_carries_tags(self, extractor: RegexDescriptorExtractor) -> None:
        descriptor = extractor.extract("[GRP] Show.S01E02.[720p].mkv")

        assert descriptor is not None
        assert descriptor.tags == ("GRP", "720p")

    def test_extension_is_not_a_tag(self) -> None:
        assert extract_tags("Show.S01E02.[720p]") == ()

    def test_tag_before_bracketed_extension(self) -> None:
        assert extract_tags("Show.S01E02.[GRP].[720p]") == ("GRP",)

    def test_name_without_extension(self) -> None:
        assert extract_tags("[720p]") == ("720p",)
        assert extract_tags(".[720p]") == ("720p",)
