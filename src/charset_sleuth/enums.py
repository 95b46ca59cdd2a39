"""Enumerations for charset_sleuth."""

import enum


class EncodingEra(enum.IntFlag):
    """Bit flags grouping codecs by the platform generation they come from.

    Used both to restrict the candidate set and as the last deterministic
    tie-break between results that score identically.
    """

    MODERN_WEB = 1
    LEGACY_ISO = 2
    LEGACY_MAC = 4
    LEGACY_REGIONAL = 8
    DOS = 16
    MAINFRAME = 32
    ALL = MODERN_WEB | LEGACY_ISO | LEGACY_MAC | LEGACY_REGIONAL | DOS | MAINFRAME

    @classmethod
    def of(cls, codec_name: str) -> "EncodingEra":
        """Return the single era a Python codec name belongs to."""
        if codec_name in _MODERN_WEB or codec_name.startswith(("utf_", "cp125")):
            return cls.MODERN_WEB
        if codec_name == "latin_1" or codec_name.startswith("iso8859_"):
            return cls.LEGACY_ISO
        if codec_name.startswith("mac_"):
            return cls.LEGACY_MAC
        if codec_name in _MAINFRAME:
            return cls.MAINFRAME
        if codec_name in _DOS:
            return cls.DOS
        return cls.LEGACY_REGIONAL


_MODERN_WEB = frozenset(
    {
        "ascii",
        "big5",
        "cp874",
        "cp932",
        "cp949",
        "euc_jp",
        "euc_kr",
        "gb18030",
        "gb2312",
        "gbk",
        "iso2022_jp",
        "iso2022_kr",
        "koi8_r",
        "koi8_u",
        "shift_jis",
    }
)

_MAINFRAME = frozenset(
    {"cp037", "cp273", "cp424", "cp500", "cp875", "cp1026", "cp1140"}
)

_DOS = frozenset(
    {
        "cp437",
        "cp720",
        "cp737",
        "cp775",
        "cp850",
        "cp852",
        "cp855",
        "cp856",
        "cp857",
        "cp858",
        "cp860",
        "cp861",
        "cp862",
        "cp863",
        "cp864",
        "cp865",
        "cp866",
        "cp869",
        "cp1125",
    }
)

# Priority order for tiebreaking: lower number = higher priority.
ERA_PRIORITY: dict[EncodingEra, int] = {
    EncodingEra.MODERN_WEB: 0,
    EncodingEra.LEGACY_ISO: 1,
    EncodingEra.LEGACY_REGIONAL: 2,
    EncodingEra.DOS: 3,
    EncodingEra.LEGACY_MAC: 4,
    EncodingEra.MAINFRAME: 5,
}
