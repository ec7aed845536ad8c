# Prompt fragments and the composer that turns actor/task/modes into one
# instruction string for the generation API.

from __future__ import annotations

from .types import Modes

COMMENTS_INSTRUCTION = "Include detailed in-code comments whenever applicable."
DOCUMENTATION_INSTRUCTION = (
    "Attach extensive documentation for generated code as well as for used "
    "dependencies or modules. Include it below code and DO comment these lines out."
)
EXPLANATIONS_INSTRUCTION = (
    "Add detailed explanation on how to use code and what it does. "
    "Include them below code and DO comment these lines out."
)


def build_instructions(modes: Modes) -> str:
    """Mode lines, explanations first and comments last, each newline-terminated."""
    instructions = ""
    if modes.comments:
        instructions = f"{COMMENTS_INSTRUCTION}\n{instructions}"
    if modes.documentation:
        instructions = f"{DOCUMENTATION_INSTRUCTION}\n{instructions}"
    if modes.explanations:
        instructions = f"{EXPLANATIONS_INSTRUCTION}\n{instructions}"
    return instructions


def compose(task: str, modes: Modes) -> str:
    return f"{task}.\n\n{build_instructions(modes)}"


def as_actor(actor: str, prompt: str) -> str:
    return f"As a {actor}, {prompt}"


def attach_content(task: str, content: str) -> str:
    """Append file content below the task; no-op for empty content."""
    if not content:
        return task
    return f"{task}.\nContent: \n\n{content}"


class PromptComposer:
    """Object wrapper over the module functions, for callers holding a composer."""

    def compose(self, actor: str, task: str, modes: Modes) -> str:
        return as_actor(actor, compose(task, modes))
