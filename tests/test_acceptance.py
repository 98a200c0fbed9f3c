import itertools
import re

from counted_pda import Accepted, RejectCategory, Rejected, accepts, run

_SHAPE = re.compile(r"(a*)(b*)xy*(c*)(a*)")


def in_language(word: str) -> bool:
    m = _SHAPE.fullmatch(word)
    if m is None:
        return False
    lead, bs, cs, trail = (len(g) for g in m.groups())
    return lead >= 2 and lead == trail and bs >= 1 and bs == cs


def category_of(word: str) -> RejectCategory:
    outcome = run(word).outcome
    assert isinstance(outcome, Rejected), word
    return outcome.category


def test_documented_accepted_words():
    assert isinstance(run("aabxcaa").outcome, Accepted)  # n=2, m=1, p=0
    assert isinstance(run("aabbxyyccaa").outcome, Accepted)  # n=2, m=2, p=2
    assert accepts("aaabbbxcccaaa")
    assert accepts("aaaabxyyyycaaaa")


def test_documented_rejected_words():
    assert category_of("abxcaa") is RejectCategory.N_AT_LEAST_TWO
    assert category_of("aabxca") is RejectCategory.A_COUNT_MISMATCH
    assert category_of("aaxcaa") is RejectCategory.M_AT_LEAST_ONE


def test_surrounding_whitespace_is_ignored():
    assert accepts("  aabxcaa\n")


def test_agrees_with_reference_on_all_short_words():
    # Every word over the alphabet up to length 7 (plus longer accepted ones)
    for length in range(8):
        for letters in itertools.product("abxyc", repeat=length):
            word = "".join(letters)
            assert accepts(word) is in_language(word), word


def test_longer_members_and_near_misses():
    for n in range(2, 6):
        for m in range(1, 4):
            for p in range(0, 3):
                word = "a" * n + "b" * m + "x" + "y" * p + "c" * m + "a" * n
                assert accepts(word), word
                assert not accepts(word + "a")
                assert not accepts(word[:-1])
                assert not accepts("a" * n + "b" * m + "x" + "y" * p + "c" * (m + 1) + "a" * n)
