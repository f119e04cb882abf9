"""
Short descriptive labels for sync error codes and deletion reasons.

Both lookups are total: a code or reason this package does not know
resolves to a placeholder label instead of raising.
"""

from enum import Enum
from typing import Any, Dict

from synclens.events.models import DeletionReason, ErrorCode

UNKNOWN_ERROR_LABEL = "(unknown error)"

ERROR_LABELS: Dict[ErrorCode, str] = {
    ErrorCode.INTERNAL_ERROR: "internalError",
    ErrorCode.PARTIAL_FAILURE: "partialFailure",
    ErrorCode.NETWORK_UNAVAILABLE: "networkUnavailable",
    ErrorCode.NETWORK_FAILURE: "networkFailure",
    ErrorCode.BAD_CONTAINER: "badContainer",
    ErrorCode.SERVICE_UNAVAILABLE: "serviceUnavailable",
    ErrorCode.REQUEST_RATE_LIMITED: "requestRateLimited",
    ErrorCode.MISSING_ENTITLEMENT: "missingEntitlement",
    ErrorCode.NOT_AUTHENTICATED: "notAuthenticated",
    ErrorCode.PERMISSION_FAILURE: "permissionFailure",
    ErrorCode.UNKNOWN_ITEM: "unknownItem",
    ErrorCode.INVALID_ARGUMENTS: "invalidArguments",
    ErrorCode.RESULTS_TRUNCATED: "resultsTruncated",
    ErrorCode.SERVER_RECORD_CHANGED: "serverRecordChanged",
    ErrorCode.SERVER_REJECTED_REQUEST: "serverRejectedRequest",
    ErrorCode.ASSET_FILE_NOT_FOUND: "assetFileNotFound",
    ErrorCode.ASSET_FILE_MODIFIED: "assetFileModified",
    ErrorCode.INCOMPATIBLE_VERSION: "incompatibleVersion",
    ErrorCode.CONSTRAINT_VIOLATION: "constraintViolation",
    ErrorCode.OPERATION_CANCELLED: "operationCancelled",
    ErrorCode.CHANGE_TOKEN_EXPIRED: "changeTokenExpired",
    ErrorCode.BATCH_REQUEST_FAILED: "batchRequestFailed",
    ErrorCode.ZONE_BUSY: "zoneBusy",
    ErrorCode.BAD_DATABASE: "badDatabase",
    ErrorCode.QUOTA_EXCEEDED: "quotaExceeded",
    ErrorCode.ZONE_NOT_FOUND: "zoneNotFound",
    ErrorCode.LIMIT_EXCEEDED: "limitExceeded",
    ErrorCode.USER_DELETED_ZONE: "userDeletedZone",
    ErrorCode.TOO_MANY_PARTICIPANTS: "tooManyParticipants",
    ErrorCode.ALREADY_SHARED: "alreadyShared",
    ErrorCode.REFERENCE_VIOLATION: "referenceViolation",
    ErrorCode.MANAGED_ACCOUNT_RESTRICTED: "managedAccountRestricted",
    ErrorCode.PARTICIPANT_MAY_NEED_VERIFICATION: "participantMayNeedVerification",
    ErrorCode.SERVER_RESPONSE_LOST: "serverResponseLost",
    ErrorCode.ASSET_NOT_AVAILABLE: "assetNotAvailable",
    ErrorCode.ACCOUNT_TEMPORARILY_UNAVAILABLE: "accountTemporarilyUnavailable",
    ErrorCode.PARTICIPANT_ALREADY_INVITED: "participantAlreadyInvited",
}

REASON_LABELS: Dict[DeletionReason, str] = {
    DeletionReason.DELETED: "deleted",
    DeletionReason.PURGED: "purged",
    DeletionReason.ENCRYPTED_DATA_RESET: "encryptedDataReset",
}


def error_label(code: Any) -> str:
    """
    Return the label for a sync error code.

    Args:
        code: An ``ErrorCode`` member or its raw integer value

    Returns:
        str: The camelCase code name, or ``"(unknown error)"``
    """
    try:
        return ERROR_LABELS.get(ErrorCode(code), UNKNOWN_ERROR_LABEL)
    except (ValueError, TypeError):
        return UNKNOWN_ERROR_LABEL


def deletion_reason_label(reason: Any) -> str:
    """
    Return the label for a zone deletion reason.

    Unrecognized reasons keep their raw value in the label, e.g.
    ``"(unknown reason: 7)"``.
    """
    try:
        return REASON_LABELS[DeletionReason(reason)]
    except (ValueError, TypeError, KeyError):
        raw = reason.value if isinstance(reason, Enum) else reason
        return f"(unknown reason: {raw})"
