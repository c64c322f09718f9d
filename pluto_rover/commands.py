"""Command dispatch boundary.

:func:`dispatch_commands` feeds a raw command string to a rover one
recognized command at a time. It is the layer that faces callers: a failure
while applying one command (for example a store that cannot be written) is
logged and counted, and the rest of the batch still runs.
"""

import logging
from dataclasses import dataclass

from pluto_rover.actions import to_command
from pluto_rover.rover import RoverInterface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one command batch.

    Attributes:
        applied: Recognized commands that ran without raising.
        skipped: Unrecognized characters that were ignored.
        failed: Recognized commands whose ``move`` raised.
    """

    applied: int = 0
    skipped: int = 0
    failed: int = 0


def dispatch_commands(rover: RoverInterface, commands: str) -> DispatchResult:
    """Send ``commands`` to ``rover`` as one atomic batch.

    Args:
        rover (RoverInterface): Target rover.
        commands (str): Raw command string; only ``F``, ``B``, ``L``, ``R`` act.

    Returns:
        DispatchResult: Per-batch counts.
    """
    applied = skipped = failed = 0
    with rover.batch():
        for char in commands:
            command = to_command(char)
            if command is None:
                skipped += 1
                continue
            try:
                rover.move(command)
            except Exception:
                logger.exception("Command %r failed; continuing with batch", char)
                failed += 1
            else:
                applied += 1
    if failed:
        logger.warning("Batch finished with %d failed command(s)", failed)
    return DispatchResult(applied=applied, skipped=skipped, failed=failed)
