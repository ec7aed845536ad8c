# Dummy model client for local dev and testing without API calls.

from ..cleanup import remove_first_line
from ..prompts import as_actor, compose
from ..types import Modes


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"
        self.calls = 0

    def generate_content(self, actor: str, prompt: str, modes: Modes) -> str:
        self.calls += 1
        text = f"[ECHO RESPONSE]\n{as_actor(actor, compose(prompt, modes))}"
        return remove_first_line(text)
