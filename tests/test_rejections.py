from counted_pda import PDAEngine, RejectCategory, Rejected, State, run


def rejected(word: str) -> Rejected:
    outcome = run(word).outcome
    assert isinstance(outcome, Rejected), word
    return outcome


def test_wrong_symbol_per_state():
    cases = {
        "c": (RejectCategory.EXPECTED_A_OR_B, State.Q0, "c"),
        "": (RejectCategory.EXPECTED_A_OR_B, State.Q0, None),
        "aaby": (RejectCategory.EXPECTED_B_OR_X, State.Q1, "y"),
        "aab": (RejectCategory.EXPECTED_B_OR_X, State.Q1, None),
        "aabxa": (RejectCategory.EXPECTED_Y_OR_C, State.Q2, "a"),
        "aabx": (RejectCategory.EXPECTED_Y_OR_C, State.Q2, None),
        "aabxcy": (RejectCategory.EXPECTED_C_OR_A, State.Q3, "y"),
        "aabxc": (RejectCategory.EXPECTED_C_OR_A, State.Q3, None),
        "aabxcaab": (RejectCategory.EXPECTED_A_OR_END, State.Q4, "b"),
    }
    for word, (category, state, sym) in cases.items():
        r = rejected(word)
        assert (r.category, r.state, r.symbol) == (category, state, sym), word


def test_wrong_symbol_reason_names_found_symbol():
    assert rejected("aaby").reason == "expected b or x: found 'y'"
    assert rejected("aab").reason == "expected b or x: found 'EOF'"


def test_counting_constraints():
    assert rejected("aaxcaa").category is RejectCategory.M_AT_LEAST_ONE
    assert rejected("bxcaa").category is RejectCategory.N_AT_LEAST_TWO
    assert rejected("aabxcca").category is RejectCategory.TOP_NOT_B
    assert rejected("aabxcaaa").category is RejectCategory.NO_A_TO_POP
    assert rejected("aaabxcaa").category is RejectCategory.A_COUNT_MISMATCH

    bc = rejected("aabbxcaa")
    assert bc.category is RejectCategory.BC_MISMATCH
    assert bc.reason == "b/c count mismatch: 1 c against 2 b"

    a = rejected("aabxca")
    assert a.reason == "a-count mismatch: 1 trailing a against 2 leading a"


def test_no_b_marks_guard():
    # q2 always has a B on top in a real run; force the configuration instead
    p = PDAEngine("c")
    p.config.state = State.Q2
    p.step()
    assert p.outcome.category is RejectCategory.NO_B_MARKS


def test_stack_not_at_base_guard():
    p = PDAEngine("aabxcaa")
    while p.remaining_input or p.current_state is not State.Q4:
        p.step()
    # Counters agree but a stray mark is left on the stack
    p.config.push("B")
    p.step()
    assert p.outcome.category is RejectCategory.STACK_NOT_AT_BASE


def test_rejection_leaves_configuration_untouched():
    p = PDAEngine("aabbxcaa")
    p.run_to_completion()
    # q3 on 'a' failed: nothing popped, nothing consumed, no trace entry added
    assert p.current_state is State.Q3
    assert p.stack_contents == ("Z0", "A", "A", "B")
    assert p.remaining_input == "aa"
    assert p.trace_entries[-1].state is State.Q3
    assert p.halting_state is State.QR
