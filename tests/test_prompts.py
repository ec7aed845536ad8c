# ===============================================
# tests/test_prompts.py
# Prompt composition: fragment order and shape.
# ===============================================

import itertools

import pytest

from promptgen.generate import Modes, PromptComposer, as_actor, attach_content, compose
from promptgen.generate.prompts import (
    COMMENTS_INSTRUCTION,
    DOCUMENTATION_INSTRUCTION,
    EXPLANATIONS_INSTRUCTION,
    build_instructions,
)


def test_no_modes_gives_empty_instructions():
    assert build_instructions(Modes()) == ""
    assert compose("Write a parser", Modes()) == "Write a parser.\n\n"


def test_all_modes_order_is_explanations_documentation_comments():
    out = compose("Write a parser", Modes(comments=True, documentation=True, explanations=True))
    assert out == (
        "Write a parser.\n\n"
        f"{EXPLANATIONS_INSTRUCTION}\n"
        f"{DOCUMENTATION_INSTRUCTION}\n"
        f"{COMMENTS_INSTRUCTION}\n"
    )


@pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=3)))
def test_every_combination_keeps_fixed_order(flags):
    comments, documentation, explanations = flags
    out = build_instructions(Modes(comments=comments, documentation=documentation, explanations=explanations))

    expected = [
        line
        for line, on in (
            (EXPLANATIONS_INSTRUCTION, explanations),
            (DOCUMENTATION_INSTRUCTION, documentation),
            (COMMENTS_INSTRUCTION, comments),
        )
        if on
    ]
    assert out == "".join(f"{line}\n" for line in expected)


def test_keyword_order_does_not_matter():
    a = Modes(comments=True, explanations=True)
    b = Modes(explanations=True, comments=True)
    assert compose("x", a) == compose("x", b)


def test_single_mode_texts():
    assert compose("t", Modes(comments=True)).endswith(
        "Include detailed in-code comments whenever applicable.\n"
    )
    assert "DO comment these lines out" in compose("t", Modes(documentation=True))
    assert compose("t", Modes(explanations=True)).startswith(
        "t.\n\nAdd detailed explanation on how to use code and what it does."
    )


def test_as_actor_wraps_prompt():
    assert as_actor("senior Go developer", "do it.\n\n") == "As a senior Go developer, do it.\n\n"


def test_attach_content():
    assert attach_content("Refactor this", "") == "Refactor this"
    assert attach_content("Refactor this", "x = 1\n") == "Refactor this.\nContent: \n\nx = 1\n"


def test_composer_object_wraps_with_actor():
    out = PromptComposer().compose("tester", "Write tests", Modes(comments=True))
    assert out == f"As a tester, Write tests.\n\n{COMMENTS_INSTRUCTION}\n"
