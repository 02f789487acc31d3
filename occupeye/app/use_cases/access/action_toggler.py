"""
Action Toggler

Decides whether a scan is an entry or an exit from the identity's history.
"""

import logging

from occupeye.app.repositories.rfid_log_repository import IRfidLogRepository
from occupeye.domain.entities import AccessAction
from occupeye.domain.timestamps import normalize_timestamp

logger = logging.getLogger(__name__)


def next_action_after(last_action) -> AccessAction:
    """entry -> exit, exit -> entry, anything else (denied) -> entry"""
    if last_action == AccessAction.entry:
        return AccessAction.exit
    if last_action == AccessAction.exit:
        return AccessAction.entry
    return AccessAction.entry


async def determine_next_action(
    rfid_logs: IRfidLogRepository, identity_reference: str
) -> AccessAction:
    """
    Toggle against the most recent log entry of an identity.

    The store gives no ordering, so entries are sorted newest first by
    normalized timestamp. No prior entries, or any failure while loading or
    sorting them, yields entry.

    Note: read-then-write without locking. Two concurrent scans for the
    same identity can both observe the same last action.
    """
    try:
        logs = await rfid_logs.get_by_student_id(identity_reference)
        if not logs:
            return AccessAction.entry

        ordered = sorted(
            logs, key=lambda log: normalize_timestamp(log.timestamp), reverse=True
        )
        return next_action_after(ordered[0].action)
    except Exception:
        logger.warning(
            "Error determining action for %s, defaulting to entry",
            identity_reference,
            exc_info=True,
        )
        return AccessAction.entry
