"""Per-language substitution tables.

Each table is applied top to bottom by ``apply_rules``. Multi-letter patterns
sit above the single-letter rules for the same letters; a single-letter rule
that runs first consumes the letters a digraph needs. Do not reorder or sort
these tables. The output symbols are the acoustic model's input vocabulary,
so any edit here changes what the model hears.
"""

from __future__ import annotations

from kokoro_phonemizer.phonemizer.languages import LanguageDialect
from kokoro_phonemizer.phonemizer.rules import (
    LiteralRule,
    RegexRule,
    RuleTable,
    literal_table,
    sort_longest_first,
)

# Combining marks
SYLLABIC = "\u0329"
NASAL = "\u0303"
DENTAL = "\u032a"

ENGLISH: RuleTable = literal_table(
    [
        ("th", "θ"), ("sh", "ʃ"), ("ch", "ʧ"), ("ph", "f"), ("gh", "f"),
        ("ck", "k"), ("qu", "kw"), ("x", "ks"), ("ng", "ŋ"),
        ("tion", "ʃən"), ("sion", "ʒən"), ("ough", "ʌf"),
        ("a", "æ"), ("e", "ɛ"), ("i", "ɪ"), ("o", "ɔ"), ("u", "ʌ"),
        ("ai", "eɪ"), ("ay", "eɪ"), ("ee", "iː"), ("ea", "iː"),
        ("oa", "oʊ"), ("ow", "oʊ"), ("ou", "aʊ"), ("oo", "uː"),
        ("ar", "ɑːɹ"), ("er", "ɜːɹ"), ("ir", "ɜːɹ"), ("or", "ɔːɹ"), ("ur", "ɜːɹ"),
        ("b", "b"), ("c", "k"), ("d", "d"), ("f", "f"), ("g", "g"),
        ("h", "h"), ("j", "ʤ"), ("k", "k"), ("l", "l"), ("m", "m"),
        ("n", "n"), ("p", "p"), ("r", "ɹ"), ("s", "s"), ("t", "t"),
        ("v", "v"), ("w", "w"), ("y", "j"), ("z", "z"),
    ]
)

# Latin letters left in mixed-script input are dropped before the kana
# mapping, which itself emits Latin letters.
JAPANESE: RuleTable = (
    RegexRule(r"[a-zA-Z]", ""),
    *literal_table(
        [
            ("あ", "a"), ("い", "i"), ("う", "u"), ("え", "e"), ("お", "o"),
            ("か", "ka"), ("き", "ki"), ("く", "ku"), ("け", "ke"), ("こ", "ko"),
            ("が", "ga"), ("ぎ", "gi"), ("ぐ", "gu"), ("げ", "ge"), ("ご", "go"),
            ("さ", "sa"), ("し", "ʃi"), ("す", "su"), ("せ", "se"), ("そ", "so"),
            ("ざ", "za"), ("じ", "ʤi"), ("ず", "zu"), ("ぜ", "ze"), ("ぞ", "zo"),
            ("た", "ta"), ("ち", "ʧi"), ("つ", "tsu"), ("て", "te"), ("と", "to"),
            ("だ", "da"), ("ぢ", "ʤi"), ("づ", "zu"), ("で", "de"), ("ど", "do"),
            ("な", "na"), ("に", "ni"), ("ぬ", "nu"), ("ね", "ne"), ("の", "no"),
            ("は", "ha"), ("ひ", "hi"), ("ふ", "ɸu"), ("へ", "he"), ("ほ", "ho"),
            ("ば", "ba"), ("び", "bi"), ("ぶ", "bu"), ("べ", "be"), ("ぼ", "bo"),
            ("ぱ", "pa"), ("ぴ", "pi"), ("ぷ", "pu"), ("ぺ", "pe"), ("ぽ", "po"),
            ("ま", "ma"), ("み", "mi"), ("む", "mu"), ("め", "me"), ("も", "mo"),
            ("や", "ja"), ("ゆ", "ju"), ("よ", "jo"),
            ("ら", "ɹa"), ("り", "ɹi"), ("る", "ɹu"), ("れ", "ɹe"), ("ろ", "ɹo"),
            ("わ", "wa"), ("ゐ", "wi"), ("ゑ", "we"), ("を", "wo"), ("ん", "n"),
        ]
    ),
)

# Pinyin letter sequences, no syllable or tone handling.
CHINESE: RuleTable = literal_table(
    [
        ("a", "a"), ("o", "o"), ("e", "ə"), ("i", "i"), ("u", "u"), ("ü", "y"),
        ("ai", "aɪ"), ("ei", "eɪ"), ("ao", "aʊ"), ("ou", "oʊ"),
        ("an", "an"), ("en", "ən"), ("ang", "aŋ"), ("eng", "əŋ"),
        ("er", "əɹ"), ("zh", "ʤ"), ("ch", "ʧ"), ("sh", "ʃ"), ("r", "ɹ"),
        ("z", "ts"), ("c", "tsʰ"), ("s", "s"),
        ("b", "p"), ("p", "pʰ"), ("m", "m"), ("f", "f"),
        ("d", "t"), ("t", "tʰ"), ("n", "n"), ("l", "l"),
        ("g", "k"), ("k", "kʰ"), ("h", "x"),
        ("j", "ʤ"), ("q", "ʧʰ"), ("x", "ʃ"),
    ]
)

FRENCH: RuleTable = literal_table(
    [
        ("ch", "ʃ"), ("j", "ʒ"), ("gn", "ɲ"), ("ll", "j"), ("qu", "k"),
        ("ph", "f"), ("th", "t"), ("x", "ks"),
        ("a", "a"), ("à", "a"), ("â", "a"), ("ä", "a"),
        ("e", "ə"), ("é", "e"), ("è", "ɛ"), ("ê", "ɛ"), ("ë", "ɛ"),
        ("i", "i"), ("î", "i"), ("ï", "i"),
        ("o", "o"), ("ô", "o"), ("ö", "o"),
        ("u", "u"), ("ù", "u"), ("û", "u"), ("ü", "y"),
        ("y", "i"), ("ÿ", "i"),
        ("ai", "ɛ"), ("au", "o"), ("eau", "o"), ("ei", "ɛ"), ("eu", "ø"), ("ou", "u"),
        ("oi", "wa"), ("oin", "wɛ" + NASAL), ("on", "ɔ" + NASAL), ("an", "ɑ" + NASAL),
        ("en", "ɑ" + NASAL), ("in", "ɛ" + NASAL), ("un", "œ" + NASAL),
        ("b", "b"), ("c", "k"), ("ç", "s"), ("d", "d"), ("f", "f"), ("g", "g"),
        ("h", ""), ("k", "k"), ("l", "l"), ("m", "m"), ("n", "n"), ("p", "p"),
        ("r", "ʁ"), ("s", "s"), ("t", "t"), ("v", "v"), ("w", "w"), ("z", "z"),
    ]
)

# Devanagari letters only; vowel signs and virama pass through.
HINDI: RuleTable = literal_table(
    [
        ("अ", "ə"), ("आ", "aː"), ("इ", "ɪ"), ("ई", "iː"), ("उ", "ʊ"), ("ऊ", "uː"),
        ("ऋ", "ɾɪ"), ("ए", "eː"), ("ऐ", "æː"), ("ओ", "oː"), ("औ", "ɔː"),
        ("क", "k"), ("ख", "kʰ"), ("ग", "g"), ("घ", "gʱ"), ("ङ", "ŋ"),
        ("च", "ʧ"), ("छ", "ʧʰ"), ("ज", "ʤ"), ("झ", "ʤʱ"), ("ञ", "ɲ"),
        ("ट", "ʈ"), ("ठ", "ʈʰ"), ("ड", "ɖ"), ("ढ", "ɖʱ"), ("ण", "ɳ"),
        ("त", "t" + DENTAL), ("थ", "t" + DENTAL + "ʰ"), ("द", "d" + DENTAL),
        ("ध", "d" + DENTAL + "ʱ"), ("न", "n"),
        ("प", "p"), ("फ", "pʰ"), ("ब", "b"), ("भ", "bʱ"), ("म", "m"),
        ("य", "j"), ("र", "ɾ"), ("ल", "l"), ("व", "ʋ"),
        ("श", "ʃ"), ("ष", "ʂ"), ("स", "s"), ("ह", "ɦ"),
    ]
)

ITALIAN: RuleTable = literal_table(
    [
        ("ch", "k"), ("gh", "g"), ("gli", "ʎ"), ("gn", "ɲ"), ("sc", "ʃ"),
        ("a", "a"), ("e", "e"), ("i", "i"), ("o", "o"), ("u", "u"),
        ("b", "b"), ("c", "ʧ"), ("d", "d"), ("f", "f"), ("g", "ʤ"),
        ("h", ""), ("l", "l"), ("m", "m"), ("n", "n"), ("p", "p"),
        ("q", "kw"), ("r", "r"), ("s", "s"), ("t", "t"), ("v", "v"),
        ("z", "ts"),
    ]
)

SPANISH: RuleTable = literal_table(
    [
        ("ch", "ʧ"), ("ll", "ʎ"), ("ñ", "ɲ"), ("rr", "r"), ("qu", "k"),
        ("a", "a"), ("e", "e"), ("i", "i"), ("o", "o"), ("u", "u"),
        ("b", "b"), ("c", "k"), ("d", "d"), ("f", "f"), ("g", "g"),
        ("h", ""), ("j", "x"), ("k", "k"), ("l", "l"), ("m", "m"),
        ("n", "n"), ("p", "p"), ("r", "ɾ"), ("s", "s"), ("t", "t"),
        ("v", "b"), ("w", "w"), ("x", "ks"), ("y", "j"), ("z", "θ"),
    ]
)

PORTUGUESE: RuleTable = literal_table(
    [
        ("ch", "ʃ"), ("lh", "ʎ"), ("nh", "ɲ"), ("qu", "k"), ("rr", "x"),
        ("a", "a"), ("ã", "ɐ" + NASAL), ("e", "e"), ("ê", "e"), ("é", "ɛ"),
        ("i", "i"), ("o", "o"), ("ô", "o"), ("ó", "ɔ"), ("u", "u"),
        ("ç", "s"), ("b", "b"), ("c", "k"), ("d", "d"), ("f", "f"),
        ("g", "g"), ("h", ""), ("j", "ʒ"), ("k", "k"), ("l", "l"),
        ("m", "m"), ("n", "n"), ("p", "p"), ("r", "ɾ"), ("s", "s"),
        ("t", "t"), ("v", "v"), ("w", "w"), ("x", "ʃ"), ("y", "j"), ("z", "z"),
    ]
)

RULE_TABLES: dict[LanguageDialect, RuleTable] = {
    LanguageDialect.EN_US: ENGLISH,
    LanguageDialect.EN_GB: ENGLISH,
    LanguageDialect.JA_JP: JAPANESE,
    LanguageDialect.ZH_CN: CHINESE,
    LanguageDialect.FR_FR: FRENCH,
    LanguageDialect.HI_IN: HINDI,
    LanguageDialect.IT_IT: ITALIAN,
    LanguageDialect.ES_ES: SPANISH,
    LanguageDialect.PT_BR: PORTUGUESE,
}

# Merges diphthongs and affricates into single stand-in symbols. "^" joins
# the two halves of a sequence and is removed at the end of post-processing.
# Longest pattern first, unlike the per-language tables.
MERGES: RuleTable = sort_longest_first(
    LiteralRule(pattern, replacement)
    for pattern, replacement in [
        ("ʔˌn" + SYLLABIC, "tn"), ("ʔn" + SYLLABIC, "tn"), ("ʔn", "tn"), ("ʔ", "t"),
        ("a^ɪ", "I"), ("a^ʊ", "W"),
        ("d^ʒ", "ʤ"),
        ("e^ɪ", "A"), ("e", "A"),
        ("t^ʃ", "ʧ"),
        ("ɔ^ɪ", "Y"),
        ("ə^l", "ᵊl"),
        ("ʲo", "jo"), ("ʲə", "jə"), ("ʲ", ""),
        ("ɚ", "əɹ"),
        ("r", "ɹ"),
        ("x", "k"), ("ç", "k"),
        ("ɐ", "ə"),
        ("ɬ", "l"),
        (NASAL, ""),
    ]
)

# A syllabic mark after a symbol becomes a schwa marker in front of it; any
# stray marks are then dropped.
SYLLABIC_PROMOTION: RuleTable = (
    RegexRule(r"(\S)" + SYLLABIC, r"ᵊ\1"),
    LiteralRule(SYLLABIC, ""),
)

BRITISH_VOWELS: RuleTable = literal_table(
    [
        ("e^ə", "ɛː"),
        ("iə", "ɪə"),
        ("ə^ʊ", "Q"),
    ]
)

GENERAL_VOWELS: RuleTable = literal_table(
    [
        ("o^ʊ", "O"),
        ("ɜːɹ", "ɜɹ"),
        ("ɜː", "ɜɹ"),
        ("ɪə", "iə"),
        ("ː", ""),
    ]
)

FINAL_CLEANUP: RuleTable = literal_table(
    [
        ("o", "ɔ"),
        ("^", ""),
    ]
)
