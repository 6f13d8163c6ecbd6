"""Unit tests for sentence segmentation, tokenization and decapitalization.

WHY: The decapitalization engine is the only part of the sanitizer that
makes judgment calls. Its invariants (sentence starts untouched, acronyms,
exceptions and head successors protected) must hold on their own,
independent of the regex passes around it.

HOW: Segmentation and tokenization are checked span by span. The engine is
driven with the default EXCEPTIONS and PROTECTED_HEADS; each invariant is
checked over the whole word set where that is cheap.

RULES:
- Expected spans are written out in full; offsets are code points.
"""

import pytest

from puebi.capitalization import (
    capitalize_greeting_names,
    capitalize_sentences,
    classify_word,
    decapitalize_mid_sentence,
    fix_greeting_name_case,
    is_all_caps,
    is_sentence_capitalized,
    is_title_case,
    iter_sentences,
    title_case,
    tokenize_words,
)
from puebi.models import SentenceSpan, WordClass, WordSpan
from puebi.presets import EXCEPTIONS, PROTECTED_HEADS


def _decap(text, preserved=()):
    return decapitalize_mid_sentence(text, EXCEPTIONS, PROTECTED_HEADS, preserved=preserved)


class TestSentenceSegmentation:
    """iter_sentences splits at . ! ? and skips separator whitespace."""

    def test_spans(self):
        spans = list(iter_sentences("Halo. Apa kabar?  Baik"))
        assert spans == [
            SentenceSpan(start=0, end=4, terminal=".", next_start=6),
            SentenceSpan(start=6, end=15, terminal="?", next_start=18),
            SentenceSpan(start=18, end=22, terminal=None, next_start=22),
        ]

    def test_empty_text_yields_nothing(self):
        assert list(iter_sentences("")) == []

    def test_unterminated_text_is_one_sentence(self):
        assert list(iter_sentences("tanpa titik")) == [
            SentenceSpan(start=0, end=11, terminal=None, next_start=11),
        ]

    def test_consecutive_terminals_make_empty_sentences(self):
        spans = list(iter_sentences("..."))
        assert [(s.start, s.end, s.terminal) for s in spans] == [
            (0, 0, "."), (1, 1, "."), (2, 2, "."),
        ]

    def test_restartable(self):
        text = "Satu! Dua? Tiga."
        assert list(iter_sentences(text)) == list(iter_sentences(text))

    def test_lazy(self):
        gen = iter_sentences("Satu. Dua.")
        assert next(gen) == SentenceSpan(start=0, end=4, terminal=".", next_start=6)


class TestWordTokenizer:
    """tokenize_words finds maximal runs of Unicode letters."""

    def test_letters_only(self):
        assert tokenize_words("Jean-Paul d'Arc 12abc") == [
            WordSpan(0, 4), WordSpan(5, 9), WordSpan(10, 11),
            WordSpan(12, 15), WordSpan(18, 21),
        ]

    def test_non_latin_scripts(self):
        assert tokenize_words("Привет, мир") == [WordSpan(0, 6), WordSpan(8, 11)]

    def test_no_letters(self):
        assert tokenize_words("1500 035 !!") == []

    def test_spans_increasing_and_disjoint(self):
        spans = tokenize_words("a bb, ccc. dd-ee")
        for left, right in zip(spans, spans[1:]):
            assert left.end < right.start


class TestWordClassifier:
    """Case-shape predicates and classify_word precedence."""

    @pytest.mark.parametrize("word,expected", [
        ("BCA", True), ("A", True), ("Bca", False), ("bca", False), ("", False),
    ])
    def test_is_all_caps(self, word, expected):
        assert is_all_caps(word) is expected

    @pytest.mark.parametrize("word,expected", [
        ("Transfer", True), ("A", True), ("Élan", True),
        ("TRansfer", False), ("transfer", False), ("", False),
    ])
    def test_is_title_case(self, word, expected):
        assert is_title_case(word) is expected

    def test_all_caps_wins(self):
        assert classify_word("ATM", "di", EXCEPTIONS, PROTECTED_HEADS) is WordClass.ALL_CAPS

    def test_single_capital_letter_is_all_caps(self):
        assert classify_word("A", "vitamin", EXCEPTIONS, PROTECTED_HEADS) is WordClass.ALL_CAPS

    def test_exception(self):
        assert classify_word("Call", "Hubungi", EXCEPTIONS, PROTECTED_HEADS) is WordClass.EXCEPTION

    def test_protected_successor(self):
        cls = classify_word("Sudirman", "Jalan", EXCEPTIONS, PROTECTED_HEADS)
        assert cls is WordClass.PROTECTED_SUCCESSOR

    def test_head_match_is_case_sensitive(self):
        cls = classify_word("Sudirman", "jalan", EXCEPTIONS, PROTECTED_HEADS)
        assert cls is WordClass.TITLE_CASE

    def test_first_token_has_no_predecessor(self):
        assert classify_word("Sudirman", None, EXCEPTIONS, PROTECTED_HEADS) is WordClass.TITLE_CASE

    def test_other(self):
        assert classify_word("kata", "x", EXCEPTIONS, PROTECTED_HEADS) is WordClass.OTHER
        assert classify_word("McDonald", "makan", EXCEPTIONS, PROTECTED_HEADS) is WordClass.OTHER


class TestDecapitalization:
    """decapitalize_mid_sentence lowers stray title-case words only."""

    def test_lowers_mid_sentence_title_case(self):
        assert _decap("Saya melakukan Transfer hari ini.") == "Saya melakukan transfer hari ini."

    def test_first_word_kept(self):
        assert _decap("Transfer Dana") == "Transfer dana"

    def test_every_sentence_start_kept(self):
        assert _decap("Saya Pergi. Dia Datang! Kamu Ikut?") == "Saya pergi. Dia datang! Kamu ikut?"

    def test_index_zero_after_digits(self):
        assert _decap("123 Transfer Dana") == "123 Transfer dana"

    def test_head_protects_successor(self):
        assert _decap("Saya tinggal di Jalan Sudirman.") == "Saya tinggal di jalan Sudirman."

    def test_head_protection_not_transitive(self):
        assert _decap("Kantor di Jalan Sudirman Raya") == "Kantor di jalan Sudirman raya"

    def test_sentence_initial_head(self):
        assert _decap("Universitas Gadjah Mada") == "Universitas Gadjah mada"

    def test_acronyms_kept(self):
        assert _decap("Saya punya KTP dan NPWP.") == "Saya punya KTP dan NPWP."

    def test_call_center_kept(self):
        assert _decap("Hubungi Call Center 1500 035.") == "Hubungi Call Center 1500 035."

    def test_mixed_case_left_alone(self):
        assert _decap("Makan di McDonald sekarang") == "Makan di McDonald sekarang"

    def test_digits_split_tokens(self):
        assert _decap("Nomor 123Abc") == "Nomor 123abc"

    def test_hyphenated_name_split_into_tokens(self):
        assert _decap("Saya Jean-Paul") == "Saya jean-paul"

    def test_length_preserving(self):
        text = "Straße Groß İstanbul"
        result = _decap(text)
        assert len(result) == len(text)
        assert result == "Straße groß İstanbul"

    def test_preserved_span_kept(self):
        text = "Hai Budi Santoso,"
        assert _decap(text) == "Hai Budi santoso,"
        assert _decap(text, preserved=[(9, 16)]) == "Hai Budi Santoso,"

    def test_separators_copied_verbatim(self):
        text = "Satu.  Dua!\tTiga Empat"
        assert _decap(text) == "Satu.  Dua!\tTiga empat"

    def test_no_letters(self):
        assert _decap("1500 035 ... !!") == "1500 035 ... !!"


class TestInvariants:
    """Properties that hold for every word in the default word sets."""

    @pytest.mark.parametrize("head", sorted(PROTECTED_HEADS))
    def test_protection_invariant(self, head):
        result = _decap("Saya ke {} Merdeka sekarang".format(head))
        assert " Merdeka " in result

    @pytest.mark.parametrize("word", sorted(EXCEPTIONS))
    def test_exception_invariant(self, word):
        text = "ini {} dan {} juga".format(word, word)
        assert _decap(text) == text

    @pytest.mark.parametrize("word", ["ATM", "BPJS", "QRIS", "OJK", "X"])
    def test_acronym_invariant(self, word):
        text = "Bayar pakai {} sekarang".format(word)
        assert _decap(text) == text

    def test_index_zero_invariant(self):
        text = "Transfer. Bayar! Kirim? Tunggu"
        assert _decap(text) == text


class TestCapitalizeSentences:
    """capitalize_sentences uppercases the first letter of each sentence."""

    def test_basic(self):
        assert capitalize_sentences("halo. apa kabar? baik") == "Halo. Apa kabar? Baik"

    def test_skips_leading_non_letters(self):
        assert capitalize_sentences("123 rupiah") == "123 Rupiah"
        assert capitalize_sentences('"halo"') == '"Halo"'

    def test_dot_between_digits_counts_as_terminal(self):
        assert capitalize_sentences("nilai 1.5 juta") == "Nilai 1.5 Juta"

    def test_no_letters(self):
        assert capitalize_sentences("1.2.3") == "1.2.3"


class TestIsSentenceCapitalized:
    """is_sentence_capitalized checks the first letter."""

    @pytest.mark.parametrize("text,expected", [
        ("", True),
        ("   ", True),
        ("123 !!", True),
        ("Halo", True),
        ("123 Halo", True),
        ("halo", False),
        ("  (halo", False),
    ])
    def test_cases(self, text, expected):
        assert is_sentence_capitalized(text) is expected


class TestTitleCase:
    """title_case capitalizes each whitespace-separated word."""

    def test_basic(self):
        assert title_case("hELLO   wORLD") == "Hello World"

    def test_empty(self):
        assert title_case("") == ""
        assert title_case("   ") == ""

    def test_hyphen_is_inside_word(self):
        assert title_case("jean-paul sartre") == "Jean-paul Sartre"


class TestGreetingNames:
    """fix_greeting_name_case title-cases the name after 'Hai'."""

    def test_name_run(self):
        assert fix_greeting_name_case("Hai luqmanul hakim,") == "Hai Luqmanul Hakim,"

    def test_limited_to_four_tokens(self):
        assert fix_greeting_name_case("Hai a b c d e") == "Hai A B C D e"

    def test_tokens_with_digits_skipped(self):
        assert fix_greeting_name_case("Hai budi123 santoso") == "Hai budi123 Santoso"

    def test_stops_at_punctuation(self):
        assert fix_greeting_name_case("Hai budi. selamat pagi") == "Hai Budi. selamat pagi"

    def test_apostrophe_and_hyphen_allowed(self):
        assert fix_greeting_name_case("Hai o'neil siti-nur") == "Hai O'neil Siti-nur"

    def test_greeting_is_case_sensitive(self):
        assert fix_greeting_name_case("hai budi") == "hai budi"

    def test_custom_greeting_word(self):
        assert fix_greeting_name_case("Halo budi", greeting_word="Halo") == "Halo Budi"

    def test_reports_spans(self):
        text, spans = capitalize_greeting_names("Hai budi santoso,")
        assert text == "Hai Budi Santoso,"
        assert spans == [(4, 8), (9, 16)]

    def test_run_without_comma_reports_no_spans(self):
        assert capitalize_greeting_names("Hai budi transfer.") == ("Hai Budi Transfer.", [])

    def test_no_greeting(self):
        assert capitalize_greeting_names("Selamat pagi budi") == ("Selamat pagi budi", [])
