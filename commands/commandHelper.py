from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from .confirm import ConfirmationGate
from .models import ConfirmationDecision, ConfirmationRequest, InputFailure
from .rm import DeletionExecutor


class bcolors:
    GREEN = '\033[92m'
    FAIL = '\033[91m'
    DIM = '\033[2m'
    ENDC = '\033[0m'


def format_elapsed(seconds: float) -> str:
    return format(Decimal(repr(seconds)), "f")


def _paint(text: str, color: str, sink: TextIO, enabled: bool) -> str:
    if not enabled:
        return text
    try:
        is_tty = sink.isatty()
    except (AttributeError, ValueError):
        is_tty = False
    return color + text + bcolors.ENDC if is_tty else text


def run(
    target_path: Path,
    force: bool = False,
    input_source: TextIO | None = None,
    output_sink: TextIO | None = None,
    color: bool = False,
    executor: DeletionExecutor | None = None,
) -> int:
    input_source = input_source if input_source is not None else sys.stdin
    output_sink = output_sink if output_sink is not None else sys.stdout
    executor = executor if executor is not None else DeletionExecutor()

    request = ConfirmationRequest(target_path=target_path, force=force)
    gate = ConfirmationGate()

    try:
        decision = gate.decide(request, input_source, output_sink)
    except InputFailure as exc:
        print(_paint(f"Error: {exc}", bcolors.FAIL, output_sink, color), file=output_sink)
        return 1

    match decision:
        case ConfirmationDecision.DECLINED:
            print(f"Aborting as user input '{gate.response}' was not 'y'", file=output_sink)
            return 0

        case ConfirmationDecision.AFFIRMED:
            outcome = executor.run(request.target_path)
            if outcome.succeeded:
                print(
                    _paint(f"Removed all files and folders from {request.target_path}", bcolors.GREEN, output_sink, color),
                    file=output_sink,
                )
            else:
                print(_paint(f"Error: {outcome.error_detail}", bcolors.FAIL, output_sink, color), file=output_sink)

            print(_paint(f"Done in {format_elapsed(outcome.elapsed_seconds)}s", bcolors.DIM, output_sink, color), file=output_sink)
            return 0 if outcome.succeeded else 1
