# user_error/core/chain/contract.py
"""
Convertible-error contract

Anything with a display form and an optional prior cause can be shown to the
user without building a StructuredError by hand:

- to_text(err):      display form (str(err) unless the value defines to_text())
- prior_cause(err):  next link in the cause chain, or None

Everything else is derived:

- summary(err)          "Error: " + to_text(err), or UserFacing.summary()
- reasons(err)          one line per link after err, nearest first, None if no links
- helptext(err)         None
- into_structured(err)  independent StructuredError built from the three above
- print_error(err) / print_and_exit(err)

Python exceptions conform as-is: the prior cause is __cause__, falling back to
__context__ unless the context was suppressed with ``raise ... from None``.

Cycles in a cause chain are not detected. Exception chains built by ``raise``
are acyclic; a hand-written prior_cause() that loops forever is a caller bug.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, NoReturn, Optional, Protocol, runtime_checkable

from user_error.core.errors import StructuredError, codes


logger = logging.getLogger(__name__)


@runtime_checkable
class ErrorLike(Protocol):
    """Structural type for values that expose their own cause lookup."""

    def __str__(self) -> str: ...

    def prior_cause(self) -> Optional[Any]: ...


# ---- required accessors ----

def to_text(err: Any) -> str:
    hook = getattr(err, "to_text", None)
    if callable(hook):
        return str(hook())
    return str(err)


def prior_cause(err: Any) -> Optional[Any]:
    if isinstance(err, StructuredError):
        return _exception_cause(err)
    if isinstance(err, ErrorLike):
        return err.prior_cause()
    if isinstance(err, BaseException):
        return _exception_cause(err)
    return None


def _exception_cause(err: BaseException) -> Optional[BaseException]:
    if err.__cause__ is not None:
        return err.__cause__
    if err.__suppress_context__:
        return None
    return err.__context__


# ---- derived operations ----

def iter_causes(err: Any) -> Iterator[Any]:
    """
    Walk the cause chain lazily, starting at the immediate cause of ``err``.

    Each call starts again from ``err``.
    """
    link = prior_cause(err)
    while link is not None:
        yield link
        link = prior_cause(link)


def summary(err: Any) -> str:
    if isinstance(err, UserFacing):
        return err.summary()
    return f"{codes.HEADLINE_PREFIX} {to_text(err)}"


def chain_reasons(err: Any) -> Optional[List[str]]:
    """Default reason derivation: display text of every link after ``err``."""
    lines = [to_text(link) for link in iter_causes(err)]
    return lines or None


def reasons(err: Any) -> Optional[List[str]]:
    if isinstance(err, StructuredError):
        return list(err.reasons) or None
    if isinstance(err, UserFacing):
        return err.reasons()
    return chain_reasons(err)


def helptext(err: Any) -> Optional[str]:
    if isinstance(err, StructuredError):
        return err.help_text
    if isinstance(err, UserFacing):
        return err.helptext()
    return None


def into_structured(err: Any) -> StructuredError:
    """
    Materialize ``err`` into a StructuredError that no longer references it.

    The structured summary is summary(err) without its "Error: " prefix;
    rendering adds the prefix back, so the rendered headline equals
    summary(err), including an overridden UserFacing.summary().
    """
    if isinstance(err, StructuredError):
        return err.copy()
    logger.debug("materializing %s into StructuredError", type(err).__name__)
    text = _headline_text(err)
    return StructuredError(
        summary=text if text.strip() else type(err).__name__,
        reasons=reasons(err) or [],
        help_text=helptext(err),
    )


def _headline_text(err: Any) -> str:
    """Summary without the headline prefix; honours UserFacing.summary() overrides."""
    if not isinstance(err, UserFacing):
        return to_text(err)
    headline = err.summary()
    prefix = f"{codes.HEADLINE_PREFIX} "
    if headline.startswith(prefix):
        return headline[len(prefix):]
    return headline


def print_error(err: Any, *, color: Optional[bool] = None) -> None:
    into_structured(err).print(color=color)


def print_and_exit(err: Any, *, color: Optional[bool] = None) -> NoReturn:
    into_structured(err).print_and_exit(color=color)


class UserFacing:
    """
    Mixin that gives an exception class the contract as methods.

    Override ``summary``, ``reasons`` or ``helptext`` (or ``to_text``/``prior_cause``) to
    customise what the user sees; everything else follows.

        class ConfigMissing(UserFacing, Exception):
            def helptext(self):
                return "Run `mytool init` first"
    """

    def to_text(self) -> str:
        return str(self)

    def summary(self) -> str:
        return f"{codes.HEADLINE_PREFIX} {to_text(self)}"

    def reasons(self) -> Optional[List[str]]:
        return chain_reasons(self)

    def helptext(self) -> Optional[str]:
        return None

    def into_structured(self) -> StructuredError:
        return into_structured(self)

    def print(self, *, color: Optional[bool] = None) -> None:
        print_error(self, color=color)

    def print_and_exit(self, *, color: Optional[bool] = None) -> NoReturn:
        print_and_exit(self, color=color)
