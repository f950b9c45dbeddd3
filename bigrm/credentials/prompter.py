"""Interactive fallback that asks the user for an API key."""

import getpass
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from bigrm.storage.credential_store import CredentialStore

logger = logging.getLogger(__name__)

AFFIRMATIVE = ("y", "yes")


class KeyPrompter:
    """Single-turn yes/no confirmation followed by one line of key input.

    Input callables are injectable so the prompt can be driven from tests.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        secret_fn: Callable[[str], str] = getpass.getpass,
        mask_input: bool = False,
        out: TextIO | None = None,
    ):
        self.input_fn = input_fn
        self.secret_fn = secret_fn
        self.mask_input = mask_input
        self.out = out

    def _print(self, message: str) -> None:
        print(message, file=self.out or sys.stdout)

    def _read(self, read: Callable[[str], str], prompt: str) -> str:
        try:
            return read(prompt)
        except EOFError:
            return ""

    def confirm(self, question: str) -> bool:
        answer = self._read(self.input_fn, f"{question} [y/N] ")
        return answer.strip().lower() in AFFIRMATIVE

    def prompt_for_key(self, store: CredentialStore) -> str | None:
        if not self.confirm("Do you have a valid OpenWeather API key"):
            logger.debug("User declined to enter an API key")
            return None

        read = self.secret_fn if self.mask_input else self.input_fn
        key = self._read(read, "Please enter your API key: ").strip()
        if key and store.set_key(key):
            self._print(f"'{key}' stored for future use.")
            return key

        self._print(f"Invalid key entered as: '{key}'")
        return None
