"""Naming conventions for generated code: case conversion and pluralization."""
import re
from typing import List, Optional, Tuple

_SEPARATORS = re.compile(r"[_\-\s]+")
_LAST_WORD = re.compile(r"[A-Z]*[^A-Z_\-\s]*$")

IRREGULAR_PLURALS = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "ox": "oxen",
    "leaf": "leaves",
    "knife": "knives",
    "life": "lives",
    "wife": "wives",
    "half": "halves",
    "shelf": "shelves",
    "wolf": "wolves",
    "thief": "thieves",
    "movie": "movies",
    "cookie": "cookies",
}
IRREGULAR_SINGULARS = {plural: singular for singular, plural in IRREGULAR_PLURALS.items()}

UNCOUNTABLE = {
    "equipment", "information", "rice", "money", "species", "series",
    "fish", "sheep", "deer", "news", "data", "metadata", "feedback",
}

# First match wins
PLURAL_RULES = [
    (r"(quiz)$", r"\1zes"),
    (r"(alias|status|bus|campus|bonus|census|virus|radius|apparatus)$", r"\1es"),
    (r"(x|ch|ss|sh|zz)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(analy|diagno|parenthe|synop|the)sis$", r"\1ses"),
    (r"(buffal|tomat|potat|her)o$", r"\1oes"),
    (r"s$", "s"),
    (r"$", "s"),
]

SINGULAR_RULES = [
    (r"(quiz)zes$", r"\1"),
    (r"(alias|status|bus|campus|bonus|census|virus|radius|apparatus)es$", r"\1"),
    (r"(alias|status|bus|campus|bonus|census|virus|radius|apparatus)$", r"\1"),
    (r"(x|ch|ss|sh|zz)es$", r"\1"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"(analy|diagno|parenthe|synop|the)ses$", r"\1sis"),
    (r"(buffal|tomat|potat|her)oes$", r"\1o"),
    (r"(ss|is)$", r"\1"),
    (r"s$", ""),
]


def _split_words(name: str) -> List[str]:
    """Split on separators and case transitions, keeping each word's casing."""
    s = _SEPARATORS.sub(" ", name)
    s = re.sub('(.)([A-Z][a-z]+)', r'\1 \2', s)
    s = re.sub('([a-z0-9])([A-Z])', r'\1 \2', s)
    return [w for w in s.split(" ") if w]


def _lower_leading(word: str) -> str:
    n = 0
    while n < len(word) and word[n].isupper():
        n += 1
    if n <= 1:
        return word[:1].lower() + word[1:]
    if n == len(word) or not word[n].islower():
        return word[:n].lower() + word[n:]
    # Keep the capital that starts the next word: "HTTPServer" -> "httpServer"
    return word[:n - 1].lower() + word[n - 1:]


def to_pascal_case(name: Optional[str]) -> str:
    """Convert to PascalCase: "to_do", "to-do", "toDo" -> "ToDo"."""
    if not name:
        return ""
    return "".join(w[:1].upper() + w[1:] for w in _SEPARATORS.split(name))


def to_camel_case(name: Optional[str]) -> str:
    """Convert to camelCase: "ToDo", "to_do" -> "toDo"."""
    return _lower_leading(to_pascal_case(name))


def to_snake_case(name: Optional[str]) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    if not name:
        return ""
    return "_".join(w.lower() for w in _split_words(name))


def to_kebab_case(name: Optional[str]) -> str:
    """Convert PascalCase or camelCase to kebab-case."""
    if not name:
        return ""
    return "-".join(w.lower() for w in _split_words(name))


def to_title_case(name: Optional[str]) -> str:
    """Display form with every word capitalized: "toDo" -> "To Do"."""
    if not name:
        return ""
    return " ".join(w[:1].upper() + w[1:] for w in _split_words(name))


def humanize(name: Optional[str]) -> str:
    """Sentence-style display form.

    Separated lowercase input keeps its casing ("hello_world" -> "hello world");
    anything else becomes a sentence ("ToDoItem" -> "To do item"). All-caps
    words are treated as acronyms and left alone.
    """
    if not name:
        return ""
    words = _split_words(name)
    if not words:
        return ""
    if not any(c.isupper() for c in name):
        return " ".join(words)
    head, rest = words[0], words[1:]
    out = [head[:1].upper() + head[1:]]
    for w in rest:
        out.append(w if len(w) > 1 and w.isupper() else w.lower())
    return " ".join(out)


def _split_last_word(name: str) -> Tuple[str, str]:
    m = _LAST_WORD.search(name)
    return name[:m.start()], m.group(0)


def _match_case(template: str, replacement: str) -> str:
    if len(template) > 1 and template.isupper():
        return replacement.upper()
    if template[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _inflect(name: Optional[str], table: dict, rules: list) -> str:
    if not name or not name.strip():
        return name or ""
    prefix, last = _split_last_word(name)
    key = last.lower()
    if key in UNCOUNTABLE:
        return name
    if key in table:
        return prefix + _match_case(last, table[key])
    for pattern, replacement in rules:
        if re.search(pattern, name, flags=re.IGNORECASE):
            result = re.sub(pattern, replacement, name, count=1, flags=re.IGNORECASE)
            if not result:
                return name
            if len(last) > 1 and last.isupper():
                return prefix + result[len(prefix):].upper()
            return result
    return name


def pluralize(name: Optional[str]) -> str:
    """Pluralize an English noun: "Category" -> "Categories", "Person" -> "People".

    A word ending in "s" that no earlier rule covers is assumed to be plural
    already and comes back unchanged, so "Products" stays "Products" but so
    does "Gas".
    """
    if name and _split_last_word(name)[1].lower() in IRREGULAR_SINGULARS:
        return name
    return _inflect(name, IRREGULAR_PLURALS, PLURAL_RULES)


def singularize(name: Optional[str]) -> str:
    """Singularize an English noun: "Categories" -> "Category", "Mice" -> "Mouse".

    A trailing "s" is dropped unless that would leave nothing ("S" stays "S").
    """
    if name and _split_last_word(name)[1].lower() in IRREGULAR_PLURALS:
        return name
    return _inflect(name, IRREGULAR_SINGULARS, SINGULAR_RULES)
