# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

from charset_sleuth.pipeline.cache import DETECTOR_CACHE

FRENCH_SUBTITLE = """1
00:00:01,000 --> 00:00:04,000
Je ne sais pas où il est allé, mais il était là hier soir.

2
00:00:05,000 --> 00:00:08,500
Mon père dit que la mère de Julien habite près de la gare.

3
00:00:09,000 --> 00:00:12,000
Il faut que tu voies ça avec tes deux yeux, mon frère.

4
00:00:13,000 --> 00:00:16,000
Après le dîner, nous irons voir le vieux château du roi.

5
00:00:17,000 --> 00:00:20,000
Elle a laissé la clé sur la table à droite de la lampe.

6
00:00:21,000 --> 00:00:24,000
Tu crois qu'il reviendra avant la fin de la semaine prochaine ?

7
00:00:25,000 --> 00:00:28,000
Ce matin, le café était très chaud et le pain était frais.

8
00:00:29,000 --> 00:00:32,000
Je préfère rester à la maison, il pleut depuis trois jours.

9
00:00:33,000 --> 00:00:36,000
Quelle belle journée pour une promenade au bord de la rivière !

10
00:00:37,000 --> 00:00:40,000
Il y a des années que je ne l'ai pas vu, il a beaucoup changé.

11
00:00:41,000 --> 00:00:44,000
Là-bas, le père de Xavier répare sa vieille bicyclette.
"""

ENGLISH_TEXT = (
    "The quick brown fox jumps over the lazy dog. "
    "Pack my box with five dozen liquor jugs. "
    "How vexingly quick daft zebras jump! "
    "Sphinx of black quartz, judge my vow. "
    "We promptly judged antique ivory buckles for the next prize."
)

RUSSIAN_TEXT = (
    "Съешь же ещё этих мягких французских булок, да выпей чаю. "
    "В чащах юга жил бы цитрус? Да, но фальшивый экземпляр!"
)


@pytest.fixture
def french_text() -> str:
    return FRENCH_SUBTITLE


@pytest.fixture
def french_cp1252() -> bytes:
    return FRENCH_SUBTITLE.encode("cp1252")


@pytest.fixture
def english_ascii() -> bytes:
    return ENGLISH_TEXT.encode("ascii")


@pytest.fixture
def russian_utf8() -> bytes:
    return RUSSIAN_TEXT.encode("utf-8")


@pytest.fixture
def cold_cache():
    """Start from an empty detector cache and leave one behind."""
    DETECTOR_CACHE.clear()
    yield DETECTOR_CACHE
    DETECTOR_CACHE.clear()


@pytest.fixture
def english_text() -> str:
    return ENGLISH_TEXT
