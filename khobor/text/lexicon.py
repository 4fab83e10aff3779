"""Fixed word lists and taxonomies for Bangla news text.

All tables are built once at import time, NFC-normalised and lower-cased so
that they match text prepared by :func:`khobor.text.normalize.normalize_unicode`.
Nothing in this module is mutated at runtime.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType


def _nfc(word: str) -> str:
    return unicodedata.normalize("NFC", word).lower()


def _tuple(words) -> tuple[str, ...]:
    return tuple(_nfc(w) for w in words)


# Letters, vowel signs, hasanta and nukta; digits and currency marks excluded.
BN_LETTER = "\u0981-\u09E3\u09F0\u09F1\u200C\u200D"
# Independent vowels and consonants (a name must start with one of these).
BN_INITIAL = "\u0985-\u09B9"

# --- Normalizer ---------------------------------------------------------------

STOPWORDS = frozenset(_tuple([
    "এবং", "অথবা", "কিন্তু", "তবে", "যদি", "যেহেতু", "কারণ",
    "যে", "সে", "এই", "সেই", "সেটা", "ওটা", "তার", "তাদের", "তারা",
    "আমি", "আমরা", "তুমি", "তোমরা", "আপনি", "আপনারা", "তিনি",
    "হবে", "ছিল", "আছে", "নেই", "হয়", "হয়নি", "করে", "করতে", "করবে",
    "একটি", "একজন", "কিছু", "অনেক", "সব", "সবাই", "আরও", "অন্য",
    "পরে", "আগে", "সাথে", "দিয়ে", "থেকে", "পর্যন্ত", "ভিতরে",
    "বাইরে", "উপরে", "নিচে", "সামনে", "পেছনে", "বিভিন্ন", "অনুযায়ী",
    "জন্য", "সম্পর্কে", "বিষয়ে", "নিয়ে", "সঙ্গে", "বিপক্ষে", "পক্ষে",
    "খুব", "অত্যন্ত", "বেশ", "অনেকাংশে", "প্রায়", "মোটামুটি", "সম্পূর্ণ",
    "বলেন", "বললেন", "জানান", "জানিয়েছেন", "বলা", "হয়েছে", "পাওয়া",
    "শুরু", "শেষ", "প্রথম", "দ্বিতীয়", "তৃতীয়", "পর",
    "এলাকা", "জায়গা", "স্থান",
]))

# Longest first so that e.g. "গুলোর" wins over "র".
SUFFIXES = tuple(sorted(_tuple([
    "গুলো", "গুলি", "গুলোর", "গুলির", "টা", "টি", "টার", "টির",
    "দের", "এর", "এ", "র", "কে", "তে", "য়ে",
]), key=len, reverse=True))

PREFIXES = tuple(sorted(_tuple([
    "অ", "আ", "অন", "অতি", "বদ", "সু", "দু", "তিন", "চার", "পাঁচ",
]), key=len, reverse=True))

# --- Entity gazetteers --------------------------------------------------------

SURNAMES = _tuple([
    "খান", "উদ্দিন", "হোসেন", "আহমেদ", "চৌধুরী", "সরকার", "মিয়া",
    "বেগম", "শেখ", "মণ্ডল",
])

# Wider roster used by the context-aware similarity boost.
SIMILARITY_SURNAMES = _tuple([
    "খান", "উদ্দিন", "হোসেন", "আহমেদ", "চৌধুরী", "সরকার", "মিয়া",
    "বেগম", "হক", "ইসলাম", "রহমান",
])

OCCUPATION_WORDS = _tuple([
    "সাংবাদিক", "চিকিৎসক", "কর্মকর্তা", "আইনজীবী", "শিক্ষক", "ছাত্র",
    "ব্যবসায়ী", "পুলিশ",
])

CRIME_ROLE_WORDS = _tuple([
    "ভুক্তভোগী", "অভিযুক্ত", "সন্দেহভাজন", "আসামি", "গ্রেপ্তারকৃত",
    "হাজতবাস", "কারাবন্দি", "জামিনপ্রাপ্ত",
])

FAMILY_WORDS = _tuple(["পুত্র", "কন্যা", "পিতা", "মাতা", "স্ত্রী", "স্বামী"])

DIVISION_CITIES = _tuple([
    "ঢাকা", "চট্টগ্রাম", "সিলেট", "রাজশাহী", "খুলনা", "বরিশাল", "রংপুর",
    "ময়মনসিংহ",
])

DOMESTIC_LOCATIONS = tuple(dict.fromkeys(_tuple([
    "ঢাকা", "চট্টগ্রাম", "সিলেট", "রাজশাহী", "খুলনা", "বরিশাল", "রংপুর",
    "ময়মনসিংহ", "গাজীপুর", "নারায়ণগঞ্জ", "কুমিল্লা", "যশোর", "বগুড়া",
    "কুষ্টিয়া", "ফরিদপুর", "কক্সবাজার", "চাঁদপুর", "ব্রাহ্মণবাড়িয়া",
    "মৌলভীবাজার", "সুনামগঞ্জ", "হবিগঞ্জ",
])))

INTERNATIONAL_LOCATIONS = _tuple([
    "ইউক্রেন", "রাশিয়া", "থাইল্যান্ড", "কম্বোডিয়া", "ভারত", "পাকিস্তান",
    "নেপাল", "ভুটান", "মার্কিন", "আমেরিকা", "যুক্তরাষ্ট্র", "ব্রিটেন",
    "ইংল্যান্ড", "জার্মানি", "ফ্রান্স", "চীন", "জাপান", "দক্ষিণ কোরিয়া",
    "উত্তর কোরিয়া", "মধ্যপ্রাচ্য", "সৌদি আরব", "ইরাক", "আফগানিস্তান",
])

LOCATION_MARKERS = _tuple([
    "জেলা", "থানা", "সিটি", "শহর", "গ্রাম", "এলাকা", "সড়ক",
])

ORGANIZATION_NAMES = _tuple([
    "পুলিশ", "সেনাবাহিনী", "নৌবাহিনী", "বিমানবাহিনী", "র‍্যাব", "বিজিবি",
    "আনসার", "আওয়ামী লীগ", "বিএনপি", "জাতীয় পার্টি", "জামায়াত", "জাসদ",
    "ওয়ার্কার্স পার্টি", "স্বাস্থ্য অধিদপ্তর", "শিক্ষা অধিদপ্তর",
    "দুর্যোগ ব্যবস্থাপনা", "ফায়ার সার্ভিস", "সোনালি ব্যাংক", "জনতা ব্যাংক",
    "অগ্রণী ব্যাংক", "রূপালী ব্যাংক", "বেসিক ব্যাংক", "বিআরটিএ", "ওয়াসা",
    "বিটিআরসি", "পেট্রোবাংলা", "তেল", "গ্যাস", "বিদ্যুৎ",
])

ORGANIZATION_MARKERS = _tuple([
    "কর্তৃপক্ষ", "বাহিনী", "দপ্তর", "অধিদপ্তর", "সংস্থা", "প্রতিষ্ঠান",
    "কোম্পানি", "ব্যাংক",
])

NON_NAME_WORDS = frozenset(_tuple([
    "এই", "সেই", "যে", "তিনি", "তার", "তারা", "সবাই", "অনেকে", "কেউ", "কেউই",
    "কি", "কেন", "কীভাবে", "কোথায়", "কখন", "কত", "কোন", "কোনো",
    "একজন", "দুইজন", "তিনজন", "বেশ কিছু", "একই", "একই সাথে", "একই সময়",
    "হামলা", "ঘটনা", "পরিস্থিতি", "অবস্থা", "খবর", "তথ্য", "বিষয়", "কারণে",
    "ভোট", "নির্বাচন", "সরকার", "দল", "রাজনীতি", "প্রশাসন", "পুলিশ", "আইন",
    "দেশ", "বিদেশ", "রাজধানী", "এলাকা", "জেলা", "বিভাগ", "থানা", "ইউনিয়ন",
]))

CRIME_ROLE_INDICATORS = _tuple([
    "ভুক্তভোগী", "নিখোঁজ ব্যক্তি", "গুম হওয়া ব্যক্তি", "অভিযুক্ত", "সন্দেহভাজন",
    "আসামি", "গ্রেপ্তারকৃত", "হাজতবাস", "কারাবন্দি", "জামিনপ্রাপ্ত",
    "পলাতক আসামি", "ওয়ারেন্টভুক্ত", "অনুপস্থিত আসামি", "গ্রেফতার",
    "গ্রেপ্তার হওয়া", "আটক", "আটককৃত", "থানায় সোপর্দ",
    "আদালতে সোপর্দ", "জামিন নাকচ", "জামিন আবেদন",
    "ধর্ষণের শিকার", "যৌন নির্যাতনের শিকার", "চাঁদাবাজির শিকার",
    "হুমকির শিকার", "জিম্মি", "অপহৃত", "অপহরণকারী", "খুনী",
    "হত্যাকারী", "দুর্বৃত্ত", "সন্ত্রাসী", "আততায়ী", "চাঁদাবাজ",
    "জালিয়াত", "প্রতারক", "দুর্নীতিবাজ", "অর্থপাচারকারী",
    "ঘুষখোর", "ঘুষদাতা", "অনৈতিক সুবিধাভোগী",
])

VICTIM_MARKERS = _tuple(["শিকার", "ভুক্তভোগী"])
ACCUSED_MARKERS = _tuple(["অভিযুক্ত", "আসামি", "গ্রেপ্তার"])
KILLER_MARKERS = _tuple(["খুনী", "হত্যাকারী", "ধর্ষণ"])

# --- Incident taxonomy --------------------------------------------------------


@dataclass(frozen=True)
class IncidentCategory:
    """Keyword classes and weight for one incident context."""

    name: str
    core_phrases: tuple[str, ...]
    core_words: tuple[str, ...]
    weak_words: tuple[str, ...]
    soft_exclusions: tuple[str, ...]
    hard_exclusions: tuple[str, ...]
    weight: float

    @property
    def normaliser(self) -> float:
        """Denominator term: 3*|phrases| + 2*|core| + max(1, |weak|)."""
        return (
            3 * len(self.core_phrases)
            + 2 * len(self.core_words)
            + max(1, len(self.weak_words))
        )


def _category(name, *, phrases, core, weak, soft=(), hard=(), weight):
    return IncidentCategory(
        name=name,
        core_phrases=_tuple(phrases),
        core_words=_tuple(core),
        weak_words=_tuple(weak),
        soft_exclusions=_tuple(soft),
        hard_exclusions=_tuple(hard),
        weight=weight,
    )


_CATEGORIES = [
    _category(
        "enforced_disappearance",
        phrases=[
            "গুমের অভিযোগ", "জোরপূর্বক গুম", "গুম হওয়া", "গুম করার অভিযোগ",
            "নিখোঁজ করার অভিযোগ", "আটকে নিয়ে যাওয়া", "গুমের শিকার",
            "জোর করে তুলে নেওয়া", "বলপূর্বক গুম", "গুম করা",
        ],
        core=["গুম", "নিখোঁজ", "উধাও", "নিপাত", "অন্তর্ধান"],
        weak=[
            "পরিবারের দাবি", "খোঁজ পাওয়া যায়নি", "নিখোঁজ ব্যক্তি",
            "সন্ধান", "অনুপস্থিত", "হারিয়ে যাওয়া",
        ],
        soft=["সিনেমা", "নাটক", "বিনোদন", "গল্প", "উপন্যাস"],
        hard=["খেলা", "টুর্নামেন্ট", "গোল", "উইকেট", "স্কোর", "ম্যাচ", "লিগ"],
        weight=0.35,
    ),
    _category(
        "sexual_crime",
        phrases=[
            "ধর্ষণের অভিযোগ", "যৌন নিপীড়ন", "যৌন হয়রানি", "ধর্ষণের ঘটনা",
            "যৌন নির্যাতন", "ধর্ষণের শিকার", "ধর্ষণ মামলা", "যৌন অপরাধ",
            "নারী ও শিশু নির্যাতন",
        ],
        core=["ধর্ষণ", "যৌন", "নিপীড়ন", "হয়রানি", "অপরাধ", "শ্লীলতাহানি"],
        weak=["আপত্তিকর", "কুৎসিত", "অশালীন", "লাঞ্ছিত"],
        soft=[
            "সম্পর্ক", "বিয়ে", "বিবাহ", "প্রেম", "প্রেমিক", "প্রেমিকা",
            "ডেটিং", "সম্মতি", "স্বামী", "স্ত্রী",
        ],
        weight=0.35,
    ),
    _category(
        "murder",
        phrases=[
            "খুনের অভিযোগ", "হত্যাকাণ্ড", "পরিকল্পিত হত্যা", "গণহত্যা",
            "আততায়ীর হামলা", "কিলিং", "হত্যা মামলা", "খুনের ঘটনা",
            "খুন করা", "গলা কেটে হত্যা",
        ],
        core=["হত্যা", "খুন", "কিলিং", "আততায়ী", "খুনী", "হত্যাকারী", "লাশ", "মরদেহ"],
        weak=["মৃত্যু", "নিহত", "মারা যাওয়া", "প্রাণহানি", "রক্তাক্ত"],
        soft=["সড়ক দুর্ঘটনা", "বিমান দুর্ঘটনা", "বন্যা", "ভূমিকম্প", "আগুন"],
        hard=["আত্মহত্যা", "সিনেমা", "নাটক"],
        weight=0.35,
    ),
    _category(
        "financial_crime",
        phrases=[
            "অর্থপাচারের অভিযোগ", "দুর্নীতি মামলা", "জালিয়াতি", "অর্থ আত্মসাৎ",
            "ঘুষ কেলেঙ্কারি", "ঋণ জালিয়াতি", "ব্যাংক জালিয়াতি", "কর ফাঁকি",
            "অবৈধ সম্পদ", "মানি লন্ডারিং",
        ],
        core=["অর্থপাচার", "দুর্নীতি", "জালিয়াতি", "আত্মসাৎ", "ঘুষ", "দুর্নীতিবাজ", "লন্ডারিং"],
        weak=["অনিয়ম", "অবহেলা", "স্বেচ্ছাচার", "অব্যবস্থাপনা", "খেলাপি"],
        soft=[
            "ব্যবসা", "বাণিজ্য", "বিনিয়োগ", "লাভ", "লোকসান", "মুনাফা",
            "শেয়ারবাজার", "ব্যাংক", "বীমা",
        ],
        weight=0.3,
    ),
    _category(
        "threat_extortion",
        phrases=[
            "চাঁদাবাজির অভিযোগ", "হুমকি দেওয়া", "হত্যার হুমকি", "জিম্মি করা",
            "মুক্তিপণ দাবি", "চাঁদা আদায়", "বলপূর্বক চাঁদা", "জিম্মিকরণ",
            "ভয়ভীতি প্রদর্শন",
        ],
        core=["চাঁদাবাজি", "হুমকি", "জিম্মি", "মুক্তিপণ", "বলপূর্বক", "চাঁদা", "ভয়ভীতি"],
        weak=["ভয়", "আতঙ্ক", "চাপ", "চাপাচাপি", "দাবি"],
        soft=[
            "ব্যবসায়িক", "লেনদেন", "চুক্তি", "আলোচনা", "দরকষাকষি",
            "সমঝোতা", "বাণিজ্যিক",
        ],
        weight=0.3,
    ),
    _category(
        "medical",
        phrases=[
            "ভেন্টিলেটরে চিকিৎসা", "নিউরো সার্জারি", "ক্রিটিক্যাল কেয়ার",
            "আইসিইউতে ভর্তি", "অস্ত্রোপচারের পর", "চিকিৎসাধীন", "মৃত্যুর কারণ",
        ],
        core=[
            "মস্তিষ্ক", "ভেন্টিলেটর", "হাসপাতাল", "নিউরো", "চিকিৎসক", "ডাক্তার",
            "চিকিৎসা", "ঔষধ", "অস্ত্রোপচার", "আইসিইউ", "ক্রিটিক্যাল", "স্বাস্থ্য", "রোগ",
        ],
        weak=[
            "মৃত্যু", "নিহত", "আহত", "ব্যথা", "ক্ষত", "ক্ষতিগ্রস্ত", "মারাত্মক",
            "জখম", "শরীর", "রক্ত",
        ],
        soft=["যুদ্ধ", "সন্ত্রাস", "দুর্ঘটনা", "বিস্ফোরণ", "আক্রমণ"],
        weight=0.3,
    ),
    _category(
        "shooting_attack",
        phrases=[
            "এলোমেলো গুলিবর্ষণ", "সন্ত্রাসী হামলা", "বন্দুকযুদ্ধ", "গুলি চালানো",
            "গুলিবিদ্ধ", "ছুরিকাঘাতের ঘটনা", "আততায়ী হামলা",
        ],
        core=["গুলি", "গুলিবর্ষণ", "বন্দুক", "পিস্তল", "রিভলবার", "ছুরিকাঘাত", "অস্ত্র"],
        weak=[
            "হামলা", "আক্রমণ", "হামলাকারী", "সন্ত্রাসী", "দুর্বৃত্ত", "ক্ষয়ক্ষতি",
            "আতঙ্ক", "প্রাণনাশ", "হত্যা", "খুন", "হত্যাকাণ্ড", "জখম", "নির্যাতন", "মারধর",
        ],
        soft=["অনুশীলন", "প্রশিক্ষণ", "ক্রীড়া", "প্রতিযোগিতা", "অনুষ্ঠান"],
        hard=["শ্যুটিং", "অলিম্পিক", "সিনেমা"],
        weight=0.3,
    ),
    _category(
        "investigation",
        phrases=[
            "তদন্ত শুরু", "মামলা দায়ের", "পুলিশি তদন্ত", "আদালতের নির্দেশ",
            "জিজ্ঞাসাবাদ", "গ্রেপ্তার করা", "অভিযোগ পাওয়া", "তদন্তাধীন",
            "রিমান্ড আবেদন",
        ],
        core=[
            "সন্দেহভাজন", "গ্রেপ্তার", "তদন্ত", "মামলা", "থানা", "পুলিশ", "ডিবি",
            "সিআইডি", "আদালত", "বিচারক", "জামিন", "কারাদণ্ড", "সাজা", "রিমান্ড",
        ],
        weak=["জিজ্ঞাসাবাদ", "আটক", "অভিযুক্ত", "অভিযোগ", "সাক্ষী", "প্রমাণ", "অনুসন্ধান", "অভিযান"],
        soft=["খেলা", "বিনোদন", "অনুষ্ঠান", "অনুশীলন", "প্রতিযোগিতা"],
        hard=["সিনেমা", "নাটক"],
        weight=0.25,
    ),
    _category(
        "war",
        phrases=[
            "সামরিক অভিযান", "সীমান্ত সংঘর্ষ", "বিমান হামলা", "গোলাবর্ষণ",
            "যুদ্ধবিমান", "সামরিক অপারেশন", "আকাশসীমা লঙ্ঘন",
        ],
        core=[
            "সীমান্ত", "ড্রোন", "সেনা", "সৈন্য", "সামরিক", "যুদ্ধ", "যুদ্ধবিমান",
            "ট্যাঙ্ক", "গোলাবর্ষণ", "বিস্ফোরণ", "মিসাইল",
        ],
        weak=[
            "হামলা", "আক্রমণ", "পাল্টাপাল্টি", "যুদ্ধংদেহী", "শত্রু", "আকাশসীমা",
            "সীমান্তরক্ষী", "সেনাবাহিনী",
        ],
        soft=["খেলা", "অনুশীলন", "প্রশিক্ষণ", "প্রতিযোগিতা", "টুর্নামেন্ট"],
        hard=["ভিডিও গেম", "সিনেমা"],
        weight=0.2,
    ),
    _category(
        "accident",
        phrases=[
            "সড়ক দুর্ঘটনা", "বিমান দুর্ঘটনা", "ট্রেন দুর্ঘটনা", "অগ্নিকাণ্ড",
            "নিয়ন্ত্রণ হারিয়ে", "মাথায় আঘাত", "ছিটকে পড়ে",
        ],
        core=[
            "বিমান", "ইঞ্জিন", "দুর্ঘটনা", "সড়ক", "ট্রেন", "লঞ্চ", "বাস", "ট্রাক",
            "মোটরসাইকেল", "আগুন", "অগ্নিকাণ্ড", "বিস্ফোরণ",
        ],
        weak=[
            "নিয়ন্ত্রণ", "ছিটকে", "পড়ে", "ধ্বংস", "ক্ষতিগ্রস্ত", "উদ্ধার", "আহত",
            "নিহত", "জাহাজ", "ডুবে", "ডুবি", "উল্টে", "পিছলে",
        ],
        soft=["হামলা", "আক্রমণ", "যুদ্ধ", "সন্ত্রাস", "ইচ্ছাকৃত", "পরিকল্পিত"],
        weight=0.2,
    ),
    _category(
        "protest",
        phrases=[
            "বিক্ষোভ মিছিল", "ধর্মঘট পালন", "হরতাল আহ্বান", "প্রতিবাদ সমাবেশ",
            "অবরোধ কর্মসূচি", "অবস্থান ধর্মঘট", "শ্রমিক বিক্ষোভ", "মানববন্ধন",
        ],
        core=[
            "বিক্ষোভ", "আন্দোলন", "ধর্মঘট", "হরতাল", "প্রতিবাদ", "মিছিল",
            "সমাবেশ", "সভা", "সমাবেশস্থল", "মানববন্ধন",
        ],
        weak=[
            "পুলিশি", "লাঠিচার্জ", "টিয়ারগ্যাস", "কাঁদানে গ্যাস", "জামিন", "আটক",
            "ছাত্র", "শ্রমিক", "কৃষক", "অবরোধ", "অবস্থান", "কর্মসূচি", "স্লোগান",
        ],
        soft=["উৎসব", "উদযাপন", "খেলা", "বিনোদন", "অনুষ্ঠান"],
        weight=0.2,
    ),
    _category(
        "political",
        phrases=[
            "নির্বাচনী প্রচারণা", "ভোটগ্রহণ", "ফলাফল ঘোষণা", "জয়-পরাজয়",
            "প্রার্থী নির্বাচন", "দলীয় মিটিং", "জোটগঠন",
        ],
        core=[
            "নির্বাচন", "ভোট", "ইভিএম", "কেন্দ্র", "প্রার্থী", "এমপি", "সংসদ",
            "সংসদ সদস্য", "মন্ত্রী", "প্রধানমন্ত্রী", "রাষ্ট্রপতি", "দল",
        ],
        weak=[
            "জোট", "মিত্র", "প্রতিপক্ষ", "আওয়ামী লীগ", "বিএনপি", "জাতীয় পার্টি",
            "জামায়াত", "জাসদ", "ওয়ার্কার্স পার্টি", "রাজনীতি", "প্রচারণা",
            "প্রতীক", "জয়-পরাজয়", "ফলাফল",
        ],
        soft=["খেলা", "বিনোদন", "অনুষ্ঠান", "উৎসব", "ক্রীড়া", "প্রতিযোগিতা"],
        weight=0.15,
    ),
]

INCIDENT_CATEGORIES = MappingProxyType({c.name: c for c in _CATEGORIES})

# Plausible successor / related incident contexts.
EVENT_CHAIN = MappingProxyType({
    "enforced_disappearance": ("investigation", "protest"),
    "sexual_crime": ("investigation", "protest"),
    "murder": ("investigation", "protest"),
    "financial_crime": ("investigation", "political"),
    "threat_extortion": ("investigation",),
    "medical": ("investigation", "protest"),
    "shooting_attack": ("medical", "investigation"),
    "investigation": ("protest", "political"),
    "accident": ("medical", "investigation"),
    "protest": ("shooting_attack", "investigation"),
    "war": ("accident", "political"),
    "political": ("protest", "investigation"),
})
