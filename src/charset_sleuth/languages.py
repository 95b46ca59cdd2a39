"""Reference letter-frequency tables.

Each language is described by its letters ranked from most to least frequent.
Some languages carry more than one table (English has two spelling-neutral
variants, Japanese has one table per script); coherence scoring keeps the best
score per language.
"""

from __future__ import annotations

import functools

from charset_sleuth.unicode_ranges import UNICODE_RANGES, find_range

#: ``(language, ranked letters, has accents, pure latin)``
LANGUAGES: tuple[tuple[str, str, bool, bool], ...] = (
    ("English", "eationsrhldcmufpgwbyvkjxzq", False, True),
    ("English", "eationsrhldcumfpgwybvkxjzq", False, True),
    ("German", "enirstadhulgocmbfkwzpvüäöj", True, True),
    ("French", "easnitrluodcpmévgfbhqàxèyj", True, True),
    ("Dutch", "enairtodslghvmukcpbwjzfyxë", True, True),
    ("Italian", "eiaonltrscdupmgvfbzhqèàkyò", True, True),
    ("Polish", "aioenrzwsctkydpmuljłgbhąęó", True, True),
    ("Spanish", "eaonsrildtcumpbgvfyóhqíjzá", True, True),
    ("Russian", "оаеинстрвлкмдпугяызбйьчхжц", False, False),
    (
        "Japanese",
        "人一大亅丁丨竹笑口日今二彳行十土丶寸寺時乙丿乂气気冂巾亠市目儿見八小凵県月彐門間木東山出"
        "本中刀分耳又取最言田心思刂前京尹事生厶云会未来白冫楽灬馬尸尺駅明耂者了阝都高卜占厂广店"
        "子申奄亻俺上方冖学衣艮食自",
        False,
        False,
    ),
    (
        "Japanese",
        "ーンス・ルトリイアラックドシレジタフロカテマィグバムプオコデニウメサビナブャエュチキズダパミ"
        "ェョハセベガモツネボソノァヴワポペピケゴギザホゲォヤヒユヨヘゼヌゥゾヶヂヲヅヵヱヰヮヽ゠ヾヷヿ"
        "ヸヹヺ",
        False,
        False,
    ),
    (
        "Japanese",
        "のにるたとはしいをでてがなれからさっりすあもこまうくよきんめおけそつだやえどわちみせじばへび"
        "ずろほげむべひょゆぶごゃねふぐぎぼゅづざぞぬぜぱぽぷぴぃぁぇぺゞぢぉぅゐゝゑ゛゜ゎゔ゚ゟ゙ゕゖ",
        False,
        False,
    ),
    ("Portuguese", "aeosirdntmuclpgvbfhãqéçází", True, True),
    ("Swedish", "eanrtsildomkgvhfupäcböåyjx", True, True),
    (
        "Chinese",
        "的一是不了在人有我他这个们中来上大为和国地到以说时要就出会可也你对生能而子那得于着下自之年过"
        "发后作里用道行所然家种事成方多经么去法学如都同现当没动面起看定天分还进好小部其些主样理心她本"
        "前开但因只从想实",
        False,
        False,
    ),
    ("Ukrainian", "оаніирвтесклудмпзяьбгйчхцї", False, False),
    ("Norwegian", "erntasioldgkmvfpubhåyjøcæw", False, True),
    ("Finnish", "aintesloukämrvjhpydögcbfwz", True, True),
    ("Vietnamese", "nhticgaoumlràđsevpbyưdákộế", True, True),
    ("Czech", "oeantsilvrkdumpíchzáyjběéř", True, True),
    ("Hungarian", "eatlsnkriozáégmbyvdhupjöfc", True, True),
    ("Korean", "이다에의는로하을가고지서한은기으년대사시를리도인스일", False, False),
    ("Indonesian", "aneirtusdkmlgpbohyjcwfvzxq", False, True),
    ("Turkish", "aeinrlıkdtsmyuobüşvgzhcpçğ", True, True),
    ("Romanian", "eiarntulocsdpmăfvîgbșțzhâj", True, True),
    ("Farsi", "ایردنهومتبسلکشزفگعخقجآپحطص", False, False),
    ("Arabic", "اليمونرتبةعدسفهكقأحجشطصىخإ", False, False),
    ("Danish", "erntaisdlogmkfvubhpåyøæcjw", False, True),
    ("Serbian", "аиоенрсуткјвдмплгзбaieonцш", False, False),
    ("Lithuanian", "iasoretnukmlpvdjgėbyųšžcąį", False, True),
    ("Slovene", "eaionrsltjvkdpmuzbghčcšžfy", False, True),
    ("Slovak", "oaenirvtslkdmpuchjbzáyýíčé", True, True),
    ("Hebrew", "יוהלרבתמאשנעםדקחפסכגטצןזך", False, False),
    ("Bulgarian", "аиоентрсвлкдпмзгяъубчцйжщх", False, False),
    ("Croatian", "aioenrjstuklvdmpgzbcčhšžćf", True, True),
    ("Hindi", "करसनतमहपयलवजदगबशटअएथभडचधषइ", False, False),
    ("Estonian", "aiestlunokrdmvgpjhäbõüfcöy", True, True),
    ("Thai", "านรอกเงมยลวดทสตะปบคหแจพชขใ", False, False),
    ("Greek", "ατοιενρσκηπςυμλίόάγέδήωχθύ", False, False),
    ("Tamil", "கதபடரமலனவறயளசநஇணஅஆழஙஎஉஒஸ", False, False),
    ("Kazakh", "аыентрлідсмқкобиуғжңзшйпгө", False, False),
)

#: Distinct language names, in table order.
LANGUAGE_NAMES: tuple[str, ...] = tuple(dict.fromkeys(name for name, *_ in LANGUAGES))

#: Pseudo-language used for code pages whose repertoire is only Latin.
LATIN_BASED = "Latin Based"

#: Multi-byte codecs tied to a single language.
ENCODING_TO_LANGUAGE: dict[str, str] = {
    "big5": "Chinese",
    "big5hkscs": "Chinese",
    "cp932": "Japanese",
    "cp949": "Korean",
    "cp950": "Chinese",
    "euc_jis_2004": "Japanese",
    "euc_jisx0213": "Japanese",
    "euc_jp": "Japanese",
    "euc_kr": "Korean",
    "gb18030": "Chinese",
    "gb2312": "Chinese",
    "gbk": "Chinese",
    "hz": "Chinese",
    "iso2022_jp": "Japanese",
    "iso2022_jp_1": "Japanese",
    "iso2022_jp_2": "Japanese",
    "iso2022_jp_2004": "Japanese",
    "iso2022_jp_3": "Japanese",
    "iso2022_jp_ext": "Japanese",
    "iso2022_kr": "Korean",
    "johab": "Korean",
    "shift_jis": "Japanese",
    "shift_jis_2004": "Japanese",
    "shift_jisx0213": "Japanese",
}


def ranked_letters(language: str) -> str:
    """Return the primary ranked letter table of *language*.

    :raises ValueError: If the language has no table.
    """
    for name, letters, _, _ in LANGUAGES:
        if name == language:
            return letters
    msg = f"{language} is not a supported language"
    raise ValueError(msg)


def language_tables(language: str) -> tuple[str, ...]:
    """Return every ranked table recorded for *language*."""
    return tuple(letters for name, letters, _, _ in LANGUAGES if name == language)


@functools.lru_cache(maxsize=len(UNICODE_RANGES))
def languages_for_alphabet(block: str) -> tuple[str, ...]:
    """Return the languages having at least one reference letter in *block*.

    Languages come back in table order and without duplicates.
    """
    return tuple(
        dict.fromkeys(
            name
            for name, letters, _, _ in LANGUAGES
            if any(find_range(ord(letter)) == block for letter in letters)
        )
    )


def multi_byte_languages(encoding: str) -> list[str]:
    """Return the language a multi-byte codec is tied to, if any."""
    language = ENCODING_TO_LANGUAGE.get(encoding)
    return [language] if language is not None else []
