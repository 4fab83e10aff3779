"""Gazetteer and pattern based entity extraction for Bangla news posts.

Four entity types are produced: person, location, organization and object.
Regex rules live in a single table of :class:`EntityRule` rows that is walked
generically; gazetteers are plain substring lookups. Results are deduplicated
per type and ordered person > location > organization > object, then by
confidence.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from khobor.models import Entity
from khobor.text.lexicon import (
    ACCUSED_MARKERS,
    BN_INITIAL,
    BN_LETTER,
    CRIME_ROLE_INDICATORS,
    CRIME_ROLE_WORDS,
    DIVISION_CITIES,
    DOMESTIC_LOCATIONS,
    FAMILY_WORDS,
    INTERNATIONAL_LOCATIONS,
    KILLER_MARKERS,
    LOCATION_MARKERS,
    NON_NAME_WORDS,
    OCCUPATION_WORDS,
    ORGANIZATION_MARKERS,
    ORGANIZATION_NAMES,
    SURNAMES,
    VICTIM_MARKERS,
)
from khobor.text.normalize import clean, normalize_unicode

logger = logging.getLogger(__name__)

TYPE_PRIORITY = {"person": 0, "location": 1, "organization": 2, "object": 3}

# Clause punctuation becomes "|", which no name pattern can span.
_CLAUSE_BREAK = re.compile("[,;:।॥!?|]")
_NOT_LETTER = re.compile(f"[^{BN_LETTER}\\s|]")
_LETTER = re.compile(f"[{BN_LETTER}]")
_START = f"(?<![{BN_LETTER}])"
_END = f"(?![{BN_LETTER}])"
_WORD = f"[{BN_INITIAL}][{BN_LETTER}]*"
# One to three words ending right before a trigger word.
_NAME = f"((?:{_WORD}\\s+){{0,2}}{_WORD})"


def _alt(words: Iterable[str]) -> str:
    return "(?:" + "|".join(re.escape(w) for w in words) + ")"


@dataclass(frozen=True)
class EntityRule:
    """One regex extraction rule.

    ``source`` selects the text the pattern runs on: ``letters`` is the
    normalised text with clause punctuation turned into a ``|`` break and
    everything else but Bangla letters blanked out; ``text`` is the
    normalised text as-is.
    """

    type: str
    pattern: re.Pattern
    confidence: float
    category: str | None = None
    source: str = "letters"
    validate: bool = False


def _rule(entity_type, pattern, confidence, **kwargs) -> EntityRule:
    return EntityRule(entity_type, re.compile(pattern, re.IGNORECASE), confidence, **kwargs)


_DIGITS = "\\d"
_CITATION = f"(?:নং\\s*)?{_DIGITS}+(?:/(?:২০|20)?{_DIGITS}{{2}})?"

ENTITY_RULES: tuple[EntityRule, ...] = (
    # Person: name followed by an occupation, crime role, city or kinship word.
    _rule("person", f"{_START}{_NAME}\\s+{_alt(OCCUPATION_WORDS)}{_END}", 0.80, validate=True),
    _rule("person", f"{_START}{_NAME}\\s+{_alt(CRIME_ROLE_WORDS)}{_END}", 0.85, validate=True),
    _rule("person", f"{_START}{_NAME}\\s+{_alt(DIVISION_CITIES)}{_END}", 0.80, validate=True),
    _rule("person", f"{_START}{_NAME}\\s+{_alt(FAMILY_WORDS)}{_END}", 0.80, validate=True),
    _rule("person", "[\"“]([^\"”]{2,30})[\"”]", 0.75, source="text", validate=True),
    # Person: given name directly before a known surname, and the full name.
    _rule(
        "person",
        f"{_START}([{BN_INITIAL}][{BN_LETTER}]{{1,20}})(?=\\s+{_alt(SURNAMES)}{_END})",
        0.85,
        validate=True,
    ),
    _rule(
        "person",
        f"{_START}([{BN_INITIAL}][{BN_LETTER}]{{2,25}}\\s+{_alt(SURNAMES)}){_END}",
        0.90,
        validate=True,
    ),
    # Location / organization: name followed by a marker word.
    _rule(
        "location",
        f"{_START}({_WORD}\\s+{_alt(LOCATION_MARKERS)}){_END}",
        0.75,
    ),
    _rule(
        "organization",
        f"{_START}((?:{_WORD}\\s+){{0,2}}[{BN_INITIAL}][{BN_LETTER}]{{2,}}\\s+{_alt(ORGANIZATION_MARKERS)}){_END}",
        0.70,
    ),
    # Objects: structured identifiers.
    _rule(
        "object",
        f"((?:(?:ফ্লাইট|বিমান)\\s*)?(?:bg|বিজি)[\\s-]*{_DIGITS}{{2,5}})(?!{_DIGITS})",
        0.80, category="flight", source="text",
    ),
    _rule("object", f"(এয়ারলাইন্স\\s+{_DIGITS}+)", 0.80, category="flight", source="text"),
    _rule(
        "object",
        f"((?:মাইক্রোবাস|বাস|ট্রাক|কার|জিপ)\\s+[{BN_LETTER}\\s-]*?{_DIGITS}{{2}}[-\\s]{_DIGITS}{{4}})",
        0.80, category="vehicle", source="text",
    ),
    _rule(
        "object",
        f"((?:এমভি|লঞ্চ|জাহাজ)\\s+[{BN_LETTER}]{{2,30}})",
        0.80, category="ship", source="text",
    ),
    _rule("object", f"((?:আইন|ধারা|বিধি)\\s+{_CITATION})", 0.80, category="law", source="text"),
    _rule("object", f"(সংশোধনী\\s*{_DIGITS}+)", 0.80, category="law", source="text"),
    _rule("object", "(প্রকল্প\\s*[\"“][^\"”]+[\"”])", 0.80, category="project", source="text"),
    _rule("object", f"(মামলা\\s+{_CITATION})", 0.80, category="case", source="text"),
)

GAZETTEERS: tuple[tuple[str, tuple[str, ...], float], ...] = (
    ("location", DOMESTIC_LOCATIONS, 0.90),
    ("location", INTERNATIONAL_LOCATIONS, 0.85),
    ("organization", ORGANIZATION_NAMES, 0.85),
)


def is_likely_person_name(text: str) -> bool:
    """Heuristic filter for person-name candidates."""
    text = text.strip()
    if len(text) < 2 or len(text) > 25:
        return False
    letters = len(_LETTER.findall(text))
    if letters == 0:
        return False
    if text.lower() in NON_NAME_WORDS:
        return False
    if len(text.split()) == 1 and len(text) < 4:
        return False
    non_space = len("".join(text.split()))
    return letters / non_space >= 0.7


def sort_entities(entities: Iterable[Entity]) -> list[Entity]:
    return sorted(entities, key=lambda e: (TYPE_PRIORITY[e.type], -e.confidence))


def extract_all_entities(text: str | None) -> list[Entity]:
    """Extract every entity in ``text``, deduplicated and priority-ordered."""
    norm = normalize_unicode(text)
    if len(clean(norm)) < 2:
        return []
    letters = _NOT_LETTER.sub(" ", _CLAUSE_BREAK.sub(" | ", norm))

    found: dict[tuple[str, str], Entity] = {}

    def keep(entity: Entity) -> None:
        key = (entity.type, entity.value)
        current = found.get(key)
        if current is None or entity.confidence > current.confidence:
            found[key] = entity

    for rule in ENTITY_RULES:
        haystack = letters if rule.source == "letters" else norm
        for match in rule.pattern.finditer(haystack):
            value = " ".join(match.group(1).split())
            if not value:
                continue
            if rule.validate and not is_likely_person_name(value):
                continue
            keep(Entity(rule.type, value, rule.confidence, rule.category))

    for entity_type, words, confidence in GAZETTEERS:
        for word in words:
            if word in norm:
                keep(Entity(entity_type, word, confidence))

    return sort_entities(found.values())


def extract_entities_by_type(text: str | None, entity_type: str) -> list[Entity]:
    return [e for e in extract_all_entities(text) if e.type == entity_type]


def extract_person_entities(text: str | None) -> list[str]:
    """Person names only, highest confidence first."""
    return [e.value for e in extract_entities_by_type(text, "person")]


def extract_primary_anchor_entity(text: str | None) -> Entity | None:
    """The correlation anchor: the first entity in priority order."""
    entities = extract_all_entities(text)
    return entities[0] if entities else None


def resolve_name_alias(name: str, candidates: Iterable[str]) -> str | None:
    """Find a candidate that contains ``name`` or is contained by it."""
    if not name:
        return None
    for candidate in candidates:
        if candidate and (name in candidate or candidate in name):
            return candidate
    return None


def entities_match(a: Entity, b: Entity) -> bool:
    return a.type == b.type and (
        a.value == b.value or a.value in b.value or b.value in a.value
    )


def calculate_entity_overlap(first: list[Entity], second: list[Entity]) -> float:
    """Matched entities of ``first`` divided by the larger list size."""
    if not first or not second:
        return 0.0
    matches = sum(1 for a in first if any(entities_match(a, b) for b in second))
    return matches / max(len(first), len(second))


def find_shared_entities(first: list[Entity], second: list[Entity]) -> list[str]:
    """``type:value`` tags of entities in ``first`` that have a match in ``second``."""
    return [a.tag for a in first if any(entities_match(a, b) for b in second)]


def extract_crime_roles(text: str | None) -> list[tuple[str, float]]:
    """Crime-role indicators present in ``text`` with a role-specific confidence."""
    norm = normalize_unicode(text)
    roles = []
    for indicator in CRIME_ROLE_INDICATORS:
        if indicator not in norm:
            continue
        if any(m in indicator for m in VICTIM_MARKERS):
            confidence = 0.85
        elif any(m in indicator for m in ACCUSED_MARKERS):
            confidence = 0.9
        elif any(m in indicator for m in KILLER_MARKERS):
            confidence = 0.95
        else:
            confidence = 0.7
        roles.append((indicator, confidence))
    return sorted(roles, key=lambda r: -r[1])


def extract_persons_with_aliases(texts: Iterable[str]) -> dict[str, list[str]]:
    """Map each full person name to the shorter aliases seen across ``texts``."""
    per_text = [extract_person_entities(t) for t in texts]
    all_names = list(dict.fromkeys(n for names in per_text for n in names))
    # Prefer the longest matching form as the canonical name.
    by_length = sorted(all_names, key=len, reverse=True)

    persons: dict[str, list[str]] = {}
    for names in per_text:
        for name in names:
            full = resolve_name_alias(name, by_length) or name
            aliases = persons.setdefault(full, [])
            if name != full and name not in aliases:
                aliases.append(name)
    logger.debug("Resolved %d person names into %d persons", len(all_names), len(persons))
    return persons
