from __future__ import annotations

import logging
from typing import TextIO

from .models import ConfirmationDecision, ConfirmationRequest, InputFailure

logger = logging.getLogger(__name__)

AFFIRMATIVE = "y"


def normalize(answer: str) -> str:
    return answer.strip().lower()


def format_prompt(target_path) -> str:
    return f"Are you sure you want to delete all files and folders in {target_path}? (y/n) "


class ConfirmationGate:
    """Asks the operator before anything gets deleted.

    A forced request skips the question entirely and never reads from the
    input source, so it is safe to use with piped input or without a terminal.
    The normalized answer of the last decision is kept in ``response``.
    """

    def __init__(self):
        self.response: str | None = None

    def decide(
        self,
        request: ConfirmationRequest,
        input_source: TextIO,
        output_sink: TextIO,
    ) -> ConfirmationDecision:
        if request.force:
            print("Running delete without confirmation.", file=output_sink)
            print(f"Deleting all files and folders in {request.target_path}.", file=output_sink)
            self.response = AFFIRMATIVE
            logger.debug("forced delete of %s, prompt skipped", request.target_path)
            return ConfirmationDecision.AFFIRMED

        output_sink.write(format_prompt(request.target_path))
        output_sink.flush()

        try:
            line = input_source.readline()
        except (OSError, ValueError) as exc:
            raise InputFailure(f"Failed to read user input: {exc}") from exc

        self.response = normalize(line)
        if self.response == AFFIRMATIVE:
            logger.debug("operator confirmed delete of %s", request.target_path)
            return ConfirmationDecision.AFFIRMED

        logger.debug("operator declined with %r", self.response)
        return ConfirmationDecision.DECLINED
