"""Classified errors for the tenant services.

A :class:`ClassifiedError` carries a :class:`~tenantctl.domain.types.ErrorKind`
that callers branch on, a self-contained message that is safe to show to an
operator, an operation label naming the subsystem, and an optional wrapped
cause.

The factories below build errors; they never raise them. Deciding whether
to raise is up to the service that calls them.

INVARIANT: Factories are pure. Same inputs, same kind and message.
"""

from __future__ import annotations

from typing import Any

from tenantctl.domain.types import ErrorKind

URM_OP = "kv/userResourceMapping"
ORG_OP = "kv/organization"


class ClassifiedError(Exception):
    """An error with a kind, a message, an operation label, and a cause.

    Attributes are read-only. Compare errors by ``kind`` (see
    :func:`is_kind`), not by message text.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        op: str = "",
        err: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self._kind = ErrorKind(kind)
        self._message = message
        self._op = op
        self._err = err
        if err is not None:
            self.__cause__ = err

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def op(self) -> str:
        return self._op

    @property
    def err(self) -> BaseException | None:
        return self._err

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"ClassifiedError(kind={self._kind.value!r}, message={self._message!r}, op={self._op!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        # Exception.__reduce__ carries only args.
        return (_rebuild, (self._kind, self._message, self._op, self._err))


def _rebuild(
    kind: ErrorKind, message: str, op: str, err: BaseException | None
) -> ClassifiedError:
    return ClassifiedError(kind, message, op=op, err=err)


def error_kind(exc: BaseException | None) -> ErrorKind | None:
    """Return the kind of *exc*.

    Unclassified exceptions are internal errors; ``None`` has no kind.
    """
    if exc is None:
        return None
    if isinstance(exc, ClassifiedError):
        return exc.kind
    return ErrorKind.INTERNAL


def is_kind(exc: BaseException | None, kind: ErrorKind) -> bool:
    """True when *exc* is classified as *kind*."""
    return error_kind(exc) == kind


def error_message(exc: BaseException | None) -> str:
    """Human-readable message for *exc* (empty for ``None``)."""
    if exc is None:
        return ""
    if isinstance(exc, ClassifiedError):
        return exc.message
    return str(exc) or type(exc).__name__


# ---------------------------------------------------------------------------
# User resource mappings
# ---------------------------------------------------------------------------


def invalid_urm_id_error() -> ClassifiedError:
    """A mapping was addressed with a malformed user or resource ID."""
    return ClassifiedError(
        ErrorKind.INVALID,
        "provided user resource mapping ID has invalid format",
        op=URM_OP,
    )


def urm_not_found_error() -> ClassifiedError:
    """No mapping matched the lookup."""
    return ClassifiedError(
        ErrorKind.NOT_FOUND,
        "user to resource mapping not found",
        op=URM_OP,
    )


def unavailable_urm_service_error(err: BaseException) -> ClassifiedError:
    """The mapping store could not be reached (e.g. network, disk)."""
    return ClassifiedError(
        ErrorKind.INTERNAL,
        f"Unable to connect to resource mapping service. Please try again; Err: {err}",
        op=URM_OP,
        err=err,
    )


def corrupt_urm_error(err: BaseException) -> ClassifiedError:
    """A stored mapping could not be decoded."""
    return ClassifiedError(
        ErrorKind.INTERNAL,
        f"Unknown internal user resource mapping data error; Err: {err}",
        op=URM_OP,
        err=err,
    )


def unprocessable_mapping_error(err: BaseException) -> ClassifiedError:
    """A mapping could not be encoded as JSON."""
    return ClassifiedError(
        ErrorKind.UNPROCESSABLE_ENTITY,
        f"unable to convert mapping of user to resource into JSON; Err {err}",
        op=URM_OP,
        err=err,
    )


def non_unique_mapping_error(user_id: object) -> ClassifiedError:
    """The user is already mapped to the resource.

    Classified as internal: there is no dedicated conflict kind.
    """
    return ClassifiedError(
        ErrorKind.INTERNAL,
        f"Unexpected error when assigning user to a resource: mapping for user {user_id} already exists",
        op=URM_OP,
    )


# ---------------------------------------------------------------------------
# Organizations
# ---------------------------------------------------------------------------


def invalid_org_id_error() -> ClassifiedError:
    return ClassifiedError(ErrorKind.INVALID, "provided organization ID has invalid format", op=ORG_OP)


def org_not_found_error() -> ClassifiedError:
    return ClassifiedError(ErrorKind.NOT_FOUND, "organization not found", op=ORG_OP)


def org_name_required_error() -> ClassifiedError:
    return ClassifiedError(ErrorKind.INVALID, "organization name is required", op=ORG_OP)


def org_name_taken_error(name: str) -> ClassifiedError:
    return ClassifiedError(
        ErrorKind.INVALID,
        f"organization with name {name} already exists",
        op=ORG_OP,
    )


def missing_org_filter_error() -> ClassifiedError:
    return ClassifiedError(ErrorKind.INVALID, "no filter parameters provided", op=ORG_OP)


def unavailable_org_service_error(err: BaseException) -> ClassifiedError:
    return ClassifiedError(
        ErrorKind.INTERNAL,
        f"Unable to connect to organization service. Please try again; Err: {err}",
        op=ORG_OP,
        err=err,
    )


def corrupt_org_error(err: BaseException) -> ClassifiedError:
    return ClassifiedError(
        ErrorKind.INTERNAL,
        f"Unknown internal organization data error; Err: {err}",
        op=ORG_OP,
        err=err,
    )


def unprocessable_org_error(err: BaseException) -> ClassifiedError:
    return ClassifiedError(
        ErrorKind.UNPROCESSABLE_ENTITY,
        f"unable to convert organization into JSON; Err {err}",
        op=ORG_OP,
        err=err,
    )
